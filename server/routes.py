"""
Basic API routes.

This module contains the endpoints the map page reads on load: display
settings, the category groups for the filter chips, and the version.

Author: Food Map maintainers
Date: 2026-10-19
"""

import json

from fastapi import APIRouter

from logic.config import VERSION_PATH, load_config
from logic.filtering import GROUP_CATEGORIES, group_names

router = APIRouter()

DEFAULT_VERSION = "1.0.0"


@router.get("/api/map")
def get_map():
    """Get the map display settings.

    Returns:
        Dictionary with center, resting and focus zoom, fly duration and
        search debounce windows.
    """
    config = load_config()
    return {
        "center": config["center"],
        "zoom": config["zoom"],
        "focus_zoom": config["focus_zoom"],
        "fly_duration": config["fly_duration"],
        "search_debounce": config["search_debounce"],
        "compose_debounce": config["compose_debounce"],
    }


@router.get("/api/groups")
def get_groups():
    """Get the category groups used by the list filter.

    Returns:
        Mapping of group tag to its sorted categories; "all" maps to [].
    """
    return {
        name: sorted(GROUP_CATEGORIES.get(name, ()))
        for name in group_names()
    }


@router.get("/api/version")
def get_version():
    """Get the application version.

    Returns:
        Dictionary with version string.
    """
    try:
        with open(VERSION_PATH, "r", encoding="utf-8") as f:
            version_data = json.load(f)
        return version_data
    except (FileNotFoundError, json.JSONDecodeError, KeyError):
        return {"version": DEFAULT_VERSION}
