"""
Tests for the JSON settings file.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from watersort.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS
    assert settings is not DEFAULT_SETTINGS


def test_save_and_load_merges_defaults(tmp_path):
    path = tmp_path / "config.json"
    save_settings({"undo_cap": None, "custom_key": 1}, path)

    settings = load_settings(path)

    assert settings["undo_cap"] is None
    assert settings["custom_key"] == 1
    assert settings["hint_time_budget"] == DEFAULT_SETTINGS["hint_time_budget"]


def test_corrupt_file_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_non_object_root_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_settings(path) == DEFAULT_SETTINGS


def test_unusable_values_fall_back(tmp_path):
    path = tmp_path / "config.json"
    save_settings({
        "default_difficulty": "nightmare",
        "hint_time_budget": "fast",
        "undo_cap": -2,
        "unlimited_hints": "yes",
    }, path)

    settings = load_settings(path)

    assert settings["default_difficulty"] == "normal"
    assert settings["hint_time_budget"] == DEFAULT_SETTINGS["hint_time_budget"]
    assert settings["undo_cap"] == DEFAULT_SETTINGS["undo_cap"]
    assert settings["unlimited_hints"] is False
