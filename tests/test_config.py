"""
Tests for map settings loading.

Run with: python -m pytest tests/test_config.py
"""

import json

from logic.config import FOCUS_ZOOM, MAP_CENTER, get_default_config, load_config


def test_missing_file_uses_defaults(tmp_path):
    assert load_config(str(tmp_path / "absent.json")) == get_default_config()


def test_partial_file_is_completed(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"zoom": 14, "center": [1, 2, 3]}), encoding="utf-8")

    config = load_config(str(path))
    assert config["zoom"] == 14
    assert config["focus_zoom"] == FOCUS_ZOOM
    assert config["center"] == list(MAP_CENTER)
