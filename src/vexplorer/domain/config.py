from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of explorer preferences using JSON. Supports
default fallback, tolerant loading of partial or corrupted files and
shallow merging of runtime overrides.
"""

import json
import logging
import os
from typing import Any, Dict

from vexplorer.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_EXTENSION,
    DEFAULT_HIERARCHY_FILE,
)
from vexplorer.infra.fs import DEFAULT_STORAGE_SUBDIR, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the explorer session.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    base = os.getcwd()
    return {
        # Naming
        "default_extension": DEFAULT_EXTENSION,
        "recognized_extensions": [],

        # Persistence
        "storage_dir": os.path.join(base, DEFAULT_STORAGE_SUBDIR),
        "hierarchy_file": os.path.join(base, DEFAULT_HIERARCHY_FILE),
        "save_on_exit": True,

        # Session bootstrap
        "load_sample": True,
        "import_path": "",

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
        "locale": "en",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Unknown keys are ignored so that stale files cannot pollute the schema.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    config = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    stored = data.get("settings", {})
    if not isinstance(stored, dict):
        logger.warning("Config 'settings' section is malformed. Using defaults.")
        return config

    return merge_config(config, stored)


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    payload = {"version": CURRENT_CONFIG_VERSION, "settings": config}
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only keys known to the default schema are merged and None values are
    treated as "not provided".

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    known = get_default_config().keys()
    for k, v in overrides.items():
        if k in known and v is not None:
            out[k] = v
    return out
