"""
Configuration management module.

This module provides utilities for loading, saving, and managing the map and
search settings stored in config.json. Every key has a built-in default so
the file is optional.

Author: Food Map maintainers
Date: 2026-10-19
"""

import json
import os
from typing import Dict, Any

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.getenv("FOODMAP_CONFIG_PATH", os.path.join(BASE_DIR, "config.json"))
SEED_PATH = os.getenv("FOODMAP_SEED_PATH", os.path.join(BASE_DIR, "data", "locations.json"))
VERSION_PATH = os.path.join(BASE_DIR, "version.json")

# Neihu Science Park service building
MAP_CENTER = [25.0771545, 121.5733916]
RESTING_ZOOM = 16
FOCUS_ZOOM = 18
FLY_DURATION = 1.5

# Seconds of quiescence before a search value reaches the filter
SEARCH_DEBOUNCE = 0.15
COMPOSE_DEBOUNCE = 0.05


def load_config(path: str = None) -> Dict[str, Any]:
    """Load configuration from config.json.

    Args:
        path: Optional override of the config file location.

    Returns:
        Configuration dictionary with all required fields ensured.
    """
    try:
        with open(path or CONFIG_PATH, "r", encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        config = get_default_config()

    # Ensure all required fields are present
    config = ensure_config_fields(config)
    return config


def get_default_config() -> Dict[str, Any]:
    """Get default configuration structure.

    Returns:
        Default configuration dictionary.
    """
    return {
        "center": list(MAP_CENTER),
        "zoom": RESTING_ZOOM,
        "focus_zoom": FOCUS_ZOOM,
        "fly_duration": FLY_DURATION,
        "search_debounce": SEARCH_DEBOUNCE,
        "compose_debounce": COMPOSE_DEBOUNCE,
    }


def ensure_config_fields(config: Dict[str, Any]) -> Dict[str, Any]:
    """Ensure all required fields are present in the configuration.

    Args:
        config: Configuration dictionary to update.

    Returns:
        Updated configuration dictionary.
    """
    for key, default in get_default_config().items():
        config.setdefault(key, default)

    center = config["center"]
    if not isinstance(center, (list, tuple)) or len(center) != 2:
        config["center"] = list(MAP_CENTER)

    return config
