"""
Level Config Module - Immutable puzzle configuration and difficulty presets.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict


class Difficulty(str, Enum):
    """
    Difficulty tag for a level.

    The tag is a label only; generation depends on colors, capacity and
    extra_empty, which the presets below choose per difficulty.
    """
    NORMAL = "normal"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


# (colors, capacity, extra_empty) per difficulty
DIFFICULTY_PRESETS: Dict[Difficulty, tuple] = {
    Difficulty.NORMAL: (5, 4, 2),
    Difficulty.HARD: (6, 5, 1),
    Difficulty.EXPERT: (7, 5, 1),
}


@dataclass(frozen=True)
class LevelConfig:
    """
    Configuration for one puzzle instance.

    Attributes:
        seed: Drives the deterministic shuffle
        colors: Number of distinct colors (one filled tube each)
        capacity: Units per tube
        extra_empty: Number of initially empty tubes
        difficulty: Classification label
    """
    seed: int
    colors: int
    capacity: int = 4
    extra_empty: int = 2
    difficulty: Difficulty = Difficulty.NORMAL

    def __post_init__(self):
        if self.colors < 1:
            raise ValueError(f"colors must be >= 1, got {self.colors}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.extra_empty < 0:
            raise ValueError(f"extra_empty must be >= 0, got {self.extra_empty}")
        # Accept plain strings such as "hard" from settings files
        object.__setattr__(self, "difficulty", Difficulty(self.difficulty))

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty, seed: int) -> 'LevelConfig':
        """
        Create the preset configuration for a difficulty.

        Args:
            difficulty: Difficulty tag (or its string value)
            seed: Level seed

        Returns:
            LevelConfig with the preset colors/capacity/extra_empty
        """
        difficulty = Difficulty(difficulty)
        colors, capacity, extra_empty = DIFFICULTY_PRESETS[difficulty]
        return cls(seed=seed, colors=colors, capacity=capacity,
                   extra_empty=extra_empty, difficulty=difficulty)

    @property
    def tube_count(self) -> int:
        """Total tubes in a generated layout."""
        return self.colors + self.extra_empty

    def next_level(self) -> 'LevelConfig':
        """Same configuration with the seed incremented by one."""
        return replace(self, seed=self.seed + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "colors": self.colors,
            "capacity": self.capacity,
            "extra_empty": self.extra_empty,
            "difficulty": self.difficulty.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LevelConfig':
        return cls(
            seed=int(data["seed"]),
            colors=int(data["colors"]),
            capacity=int(data.get("capacity", 4)),
            extra_empty=int(data.get("extra_empty", 2)),
            difficulty=Difficulty(data.get("difficulty", Difficulty.NORMAL.value)),
        )
