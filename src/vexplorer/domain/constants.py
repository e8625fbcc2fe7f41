from __future__ import annotations

"""
Domain Constants.

Centralizes the static values shared by the tree model, the explorer
session and the persistence layer: naming rules, default extensions,
hierarchy markers and versioning.
"""

APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE NAMING RULES
# -----------------------------------------------------------------------------

ROOT_NAME = "root"
PATH_SEPARATOR = "/"
PARENT_TOKEN = ".."
EXTENSION_DOT = "."

DEFAULT_EXTENSION = ".txt"

# -----------------------------------------------------------------------------
# HIERARCHY LISTING FORMAT
# -----------------------------------------------------------------------------

DIRECTORY_MARKER = "[D]"
FILE_MARKER = "[F]"
INDENT_UNIT = "  "

DEFAULT_HIERARCHY_FILE = "hierarchy.txt"

# Attempts granted to the collision prompt before a paste gives up
MAX_RENAME_ATTEMPTS = 5
