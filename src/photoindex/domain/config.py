from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of scan settings and the recent folders list
using a JSON document in the user data directory. A missing or corrupt
document falls back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from photoindex.domain.constants import (
    CONFIG_FILENAME,
    CURRENT_CONFIG_VERSION,
    DEFAULT_DISPLAY_MODE,
    DEFAULT_EXCLUSION_LIST,
    DEFAULT_MAX_DEPTH,
)
from photoindex.infra.fs import get_user_data_dir, write_json_atomic

logger = logging.getLogger(__name__)


def get_config_file() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)


# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------
def get_default_scan_settings() -> Dict[str, Any]:
    """
    Generate the default scan settings.

    Returns:
        Dict[str, Any]: Settings consumed by the folder index and the CLI.
    """
    return {
        "max_depth": DEFAULT_MAX_DEPTH,
        "exclusion_list": list(DEFAULT_EXCLUSION_LIST),
        "persist_after_scan": True,
        "display_mode": DEFAULT_DISPLAY_MODE,
    }


def get_default_app_state() -> Dict[str, Any]:
    """Full default structure of config.json."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "scan_settings": get_default_scan_settings(),
        "recent_folders": [],
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load application state from disk, merged over the defaults.

    Args:
        config_file: Source file. Defaults to the user data directory file.

    Returns:
        Dict[str, Any]: The loaded state or the default structure on failure.
    """
    path = config_file or get_config_file()
    state = get_default_app_state()

    if not os.path.exists(path):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    if isinstance(data.get("scan_settings"), dict):
        state["scan_settings"].update(data["scan_settings"])
    if isinstance(data.get("recent_folders"), list):
        state["recent_folders"] = [p for p in data["recent_folders"] if isinstance(p, str)]

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    """
    Persist application state to disk.

    Returns:
        bool: True if the file was written.
    """
    path = config_file or get_config_file()
    state["version"] = CURRENT_CONFIG_VERSION
    ok, err = write_json_atomic(path, state, indent=4)
    if not ok:
        logger.error(f"Failed to save configuration: {err}")
        return False

    logger.debug(f"Configuration saved to {path}")
    return True


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_scan_settings(config_file: Optional[str] = None) -> Dict[str, Any]:
    """Retrieve the persisted scan settings, completed with defaults."""
    defaults = get_default_scan_settings()
    defaults.update(load_app_state(config_file).get("scan_settings", {}))
    return defaults


def save_scan_settings(settings: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    state = load_app_state(config_file)
    state["scan_settings"] = settings
    return save_app_state(state, config_file)
