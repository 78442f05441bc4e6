from __future__ import annotations

"""
Configuration Domain Management.

Persists the tree styling settings as a JSON record in the user data
directory. Loading always merges the stored values over the defaults so a
partially saved or missing file never leaves a field undefined.
"""

import json
import logging
import os
from typing import Any, Dict

from rainbowtree.domain import constants as const
from rainbowtree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

CONFIG_KEYS = ("colors", "unfocused_color", "enable_focus", "line_style")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default styling configuration.

    Returns:
        Dict[str, Any]: Fresh dictionary; callers may mutate it freely.
    """
    return {
        "colors": list(const.DEFAULT_COLORS),
        "unfocused_color": const.DEFAULT_UNFOCUSED_COLOR,
        "enable_focus": True,
        "line_style": const.DEFAULT_LINE_STYLE,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the styling configuration from disk.

    Unknown keys are dropped, missing keys take their default value. A
    missing or unreadable file yields the defaults.

    Returns:
        Dict[str, Any]: The merged configuration.
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

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the styling configuration verbatim.

    Args:
        config: The configuration dictionary to save.
    """
    record = {k: config[k] for k in CONFIG_KEYS if k in config}
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(record, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
