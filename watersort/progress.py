"""
Progress Store Module - JSON-backed records, streaks and saved sessions.

Implements the persistence collaborator used by GameSession. Every
mutation is written to disk immediately.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from watersort.solver import Layout, LevelConfig

logger = logging.getLogger(__name__)

PROGRESS_FILE = Path("progress.json")


class ProgressStore:
    """
    Player progress persisted as a single JSON document.

    Attributes:
        best_by_seed: Best record per seed, {"moves": int, "time": float}
        current_streak: Consecutive wins without a restart
        completed_levels: Seeds the player has moved past
        custom_levels: Saved layouts with their configuration
        saved_session: Last saved GameSession.to_dict() snapshot
    """

    def __init__(self, path: Union[str, Path] = PROGRESS_FILE):
        """
        Initialize the store and load any existing progress.

        Args:
            path: Progress file path
        """
        self.path = Path(path)
        self.best_by_seed: Dict[int, Dict[str, float]] = {}
        self.current_streak = 0
        self.completed_levels: List[int] = []
        self.custom_levels: List[Dict[str, Any]] = []
        self.saved_session: Optional[Dict[str, Any]] = None
        self.load()

    def load(self) -> None:
        """Load progress from disk, keeping defaults on missing/corrupt files."""
        if not self.path.exists():
            logger.debug("Progress file not found, starting fresh")
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load progress: {e}, starting fresh")
            return

        if not isinstance(data, dict):
            logger.warning(f"Progress in {self.path} is not a JSON object, starting fresh")
            return

        try:
            # JSON object keys are strings
            best_by_seed = {
                int(seed): dict(record)
                for seed, record in data.get("best_by_seed", {}).items()
            }
            current_streak = int(data.get("current_streak", 0))
            completed_levels = [int(s) for s in data.get("completed_levels", [])]
            custom_levels = list(data.get("custom_levels", []))
        except (AttributeError, TypeError, ValueError) as e:
            logger.warning(f"Malformed progress in {self.path}: {e}, starting fresh")
            return

        saved_session = data.get("saved_session")
        if saved_session is not None and not isinstance(saved_session, dict):
            logger.warning("Ignoring malformed saved session")
            saved_session = None

        self.best_by_seed = best_by_seed
        self.current_streak = current_streak
        self.completed_levels = completed_levels
        self.custom_levels = custom_levels
        self.saved_session = saved_session

    def save(self) -> None:
        """Write progress to disk."""
        data = {
            "best_by_seed": {str(seed): record for seed, record in self.best_by_seed.items()},
            "current_streak": self.current_streak,
            "completed_levels": self.completed_levels,
            "custom_levels": self.custom_levels,
            "saved_session": self.saved_session,
        }
        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save progress: {e}")

    def record_best(self, seed: int, moves: int, time: float) -> None:
        """
        Keep the better of the stored and the new record.

        Fewer moves wins; equal moves are decided by the shorter time.
        """
        current = self.best_by_seed.get(seed)
        if (current is None
                or moves < current["moves"]
                or (moves == current["moves"] and time < current["time"])):
            self.best_by_seed[seed] = {"moves": moves, "time": time}
            logger.info(f"New best for seed {seed}: {moves} moves, {time:.1f}s")
            self.save()

    def increment_streak(self) -> None:
        self.current_streak += 1
        self.save()

    def reset_streak(self) -> None:
        self.current_streak = 0
        self.save()

    def mark_level_completed(self, seed: int) -> None:
        """Mark a seed as completed, creating an empty record on first clear."""
        if seed not in self.best_by_seed:
            self.best_by_seed[seed] = {"moves": 0, "time": 0.0}
        if seed not in self.completed_levels:
            self.completed_levels.append(seed)
        self.save()

    def is_completed(self, seed: int) -> bool:
        return seed in self.completed_levels

    def save_custom_level(self, config: LevelConfig, layout: Layout,
                          name: Optional[str] = None) -> Dict[str, Any]:
        """
        Save a layout together with its configuration.

        Args:
            config: Level configuration
            layout: Layout to save
            name: Display name (default "Custom-<seed>")

        Returns:
            The stored entry
        """
        entry = {
            "name": name or f"Custom-{config.seed}",
            "config": config.to_dict(),
            "tubes": layout.to_list(),
            "created_at": time.time(),
        }
        self.custom_levels.append(entry)
        self.save()
        return entry

    def save_session(self, data: Dict[str, Any]) -> None:
        """Store a GameSession.to_dict() snapshot for resuming later."""
        self.saved_session = data
        self.save()

    def load_session(self) -> Optional[Dict[str, Any]]:
        """Return the last saved session snapshot, if any."""
        return self.saved_session

    def clear_session(self) -> None:
        self.saved_session = None
        self.save()
