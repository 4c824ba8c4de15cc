"""
Level Generator Module - Deterministic puzzle generation from a seed.

A level is produced by shuffling every color unit with a seeded
linear-congruential generator, dealing the units into filled tubes and
appending the empty tubes. Candidates go through a cheap acceptance
check; after MAX_ATTEMPTS rejections the generator falls back to an
already-solved layout instead of failing.
"""

import logging
from typing import List, MutableSequence

from .config import LevelConfig
from .layout import Layout, has_legal_move, is_won

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10

_MASK_64 = (1 << 64) - 1
_LCG_MULTIPLIER = 2862933555777941757
_LCG_INCREMENT = 3037000493


class SeededRandom:
    """
    64-bit linear-congruential generator.

    Every call to next() advances the state, so successive shuffles from
    one instance differ while the whole stream stays reproducible.
    """

    def __init__(self, seed: int):
        self._state = seed & _MASK_64

    def next(self) -> int:
        """Advance the state and return it as a 64-bit integer."""
        self._state = (self._state * _LCG_MULTIPLIER + _LCG_INCREMENT) & _MASK_64
        return self._state

    def next_below(self, bound: int) -> int:
        """
        Uniform integer in [0, bound).

        Multiply-shift with rejection of the biased low range.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        threshold = (1 << 64) % bound
        while True:
            product = self.next() * bound
            if (product & _MASK_64) >= threshold:
                return product >> 64

    def shuffle(self, items: MutableSequence) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_below(i + 1)
            items[i], items[j] = items[j], items[i]


def _random_layout(config: LevelConfig, rng: SeededRandom) -> Layout:
    """Shuffle all units and deal them into tubes."""
    units: List[int] = []
    for color in range(config.colors):
        units.extend([color] * config.capacity)
    rng.shuffle(units)

    tubes = [
        units[i * config.capacity:(i + 1) * config.capacity]
        for i in range(config.colors)
    ]
    tubes.extend([] for _ in range(config.extra_empty))
    return Layout.from_lists(tubes)


def basic_solved_layout(config: LevelConfig) -> Layout:
    """Fallback layout: one full tube per color plus the empty tubes."""
    tubes = [[color] * config.capacity for color in range(config.colors)]
    tubes.extend([] for _ in range(config.extra_empty))
    return Layout.from_lists(tubes)


def is_acceptable(layout: Layout, config: LevelConfig) -> bool:
    """
    Cheap solvability check for a generated layout.

    Accepts a layout if every color occurs exactly capacity times, the
    layout is not already won, and at least one pour is legal. This does
    not prove the puzzle can be finished.
    """
    counts = layout.color_counts()
    if set(counts) != set(range(config.colors)):
        return False
    if any(count != config.capacity for count in counts.values()):
        return False
    if is_won(layout, config.capacity):
        return False
    return has_legal_move(layout, config.capacity)


def generate_layout(config: LevelConfig) -> Layout:
    """
    Generate the layout for a level configuration.

    Deterministic: the same config always yields the same layout.

    Args:
        config: Level configuration

    Returns:
        Accepted layout, or the solved fallback layout when every attempt
        was rejected
    """
    rng = SeededRandom(config.seed)

    for attempt in range(1, MAX_ATTEMPTS + 1):
        layout = _random_layout(config, rng)
        if is_acceptable(layout, config):
            logger.debug(f"Seed {config.seed}: accepted layout on attempt {attempt}")
            return layout
        logger.debug(f"Seed {config.seed}: rejected layout on attempt {attempt}")

    logger.warning(
        f"Seed {config.seed}: no acceptable layout after {MAX_ATTEMPTS} attempts, "
        "using solved fallback"
    )
    return basic_solved_layout(config)
