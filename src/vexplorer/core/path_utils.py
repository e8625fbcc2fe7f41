from __future__ import annotations

"""
Path and Command Text Utilities.

Pure helpers for joining and splitting virtual paths, separating base
names from extensions, and tokenizing raw command lines. Shared by the
tree, the explorer and the shell so that every layer applies the same
naming rules.
"""

from typing import List, Optional, Tuple

from vexplorer.domain.constants import (
    DEFAULT_EXTENSION,
    EXTENSION_DOT,
    PATH_SEPARATOR,
)
from vexplorer.domain.tree_models import join_full_path

# Characters stripped by trim(); mirrors the shell's notion of blank space
_BLANKS = " \t\r\n"

# -----------------------------------------------------------------------------
# PATH HANDLING
# -----------------------------------------------------------------------------

def join_path(path: str, name: str) -> str:
    """
    Join a parent location and an entry name with the canonical separator.

    Args:
        path: Parent full path; empty for the top level.
        name: Entry name.

    Returns:
        str: The combined path.
    """
    return join_full_path(path, name)


def split_path(full_path: str) -> List[str]:
    """
    Split a virtual path into its non-empty components.

    Leading, trailing and repeated separators are ignored.
    """
    return [part for part in (full_path or "").split(PATH_SEPARATOR) if part]


# -----------------------------------------------------------------------------
# NAME HANDLING
# -----------------------------------------------------------------------------

def _last_dot(token: str) -> int:
    # A dot in first position names a hidden entry, not an extension
    pos = token.rfind(EXTENSION_DOT)
    return pos if pos > 0 else -1


def split_name(token: str, default_extension: Optional[str] = DEFAULT_EXTENSION) -> Tuple[str, str]:
    """
    Separate a file token into base name and dotted extension.

    Applies the last-dot rule: ``archive.tar.gz`` -> (``archive.tar``, ``.gz``).
    A token without a dot receives ``default_extension``.

    Args:
        token: Raw name typed by the user.
        default_extension: Extension to use when none is present.

    Returns:
        Tuple[str, str]: (base name, extension)
    """
    pos = _last_dot(token)
    if pos == -1:
        return token, default_extension or ""
    return token[:pos], token[pos:]


def base_name(token: str) -> str:
    """Return the token stripped of its extension (if any)."""
    pos = _last_dot(token)
    return token if pos == -1 else token[:pos]


def extension_of(token: str) -> str:
    """Return the dotted extension of a token, or an empty string."""
    pos = _last_dot(token)
    return "" if pos == -1 else token[pos:]


def has_extension(token: str) -> bool:
    return _last_dot(token) != -1


# -----------------------------------------------------------------------------
# COMMAND TEXT
# -----------------------------------------------------------------------------

def trim(text: Optional[str]) -> str:
    """Strip spaces, tabs and line breaks from both ends."""
    return (text or "").strip(_BLANKS)


def split_command(line: Optional[str], delimiter: str = " ") -> List[str]:
    """
    Tokenize a raw command line.

    Every token is trimmed and empty tokens (repeated delimiters,
    surrounding blanks) are discarded.

    Args:
        line: Raw text typed by the user.
        delimiter: Token separator.

    Returns:
        List[str]: Ordered non-empty tokens.
    """
    if not line:
        return []
    tokens = (trim(part) for part in line.split(delimiter))
    return [t for t in tokens if t]
