"""
Settings Module for the Water Sort puzzle

Player preferences kept in a small JSON document (config.json in the
working directory unless a path is given). Values that are missing or
have the wrong type fall back to their defaults, so a hand-edited file
can never stop the game from starting.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from watersort.solver import Difficulty

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("config.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "default_difficulty": Difficulty.NORMAL.value,
    "hint_time_budget": 0.1,   # seconds
    "undo_cap": 3,             # null = unlimited
    "unlimited_hints": False,
    "debug_enabled": False,
}


def _sanitize(settings: Dict[str, Any]) -> Dict[str, Any]:
    """Replace known keys holding unusable values with their defaults."""
    result = dict(settings)

    if result.get("default_difficulty") not in {d.value for d in Difficulty}:
        result["default_difficulty"] = DEFAULT_SETTINGS["default_difficulty"]

    budget = result.get("hint_time_budget")
    if isinstance(budget, bool) or not isinstance(budget, (int, float)) or budget < 0:
        result["hint_time_budget"] = DEFAULT_SETTINGS["hint_time_budget"]

    cap = result.get("undo_cap")
    if cap is not None and (isinstance(cap, bool) or not isinstance(cap, int) or cap < 0):
        result["undo_cap"] = DEFAULT_SETTINGS["undo_cap"]

    for key in ("unlimited_hints", "debug_enabled"):
        if not isinstance(result.get(key), bool):
            result[key] = DEFAULT_SETTINGS[key]

    return result


def load_settings(path: Union[str, Path] = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Read settings, filling in anything missing from DEFAULT_SETTINGS.

    Unknown keys are kept as they are.

    Args:
        path: Settings file

    Returns:
        New settings dict (defaults when the file is absent or unreadable)
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No settings at {path}, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not read settings from {path}: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()

    if not isinstance(stored, dict):
        logger.warning(f"Settings in {path} are not a JSON object, using defaults")
        return DEFAULT_SETTINGS.copy()

    merged = DEFAULT_SETTINGS.copy()
    merged.update(stored)
    settings = _sanitize(merged)
    logger.debug(f"Settings loaded from {path}: {settings}")
    return settings


def save_settings(settings: Dict[str, Any], path: Union[str, Path] = SETTINGS_FILE) -> None:
    """
    Write settings as indented JSON. Failures are logged, not raised.

    Args:
        settings: Settings to store
        path: Settings file
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
    except OSError as e:
        logger.error(f"Could not write settings to {path}: {e}")
        return
    logger.debug(f"Settings written to {path}")
