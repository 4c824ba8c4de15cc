"""
Search Context Module - Shared, time-boxed context for hint strategies.
"""

import time
from dataclasses import dataclass, field

from .config import LevelConfig
from .layout import Layout


class SearchTimeout(Exception):
    """Raised inside a search when the context deadline has passed."""


@dataclass
class SearchContext:
    """
    Context passed to strategies containing the layout snapshot and
    the wall-clock budget.

    There is no cancel signal: strategies poll is_expired() at fixed
    points and return their best effort once the budget runs out.

    Attributes:
        layout: Layout snapshot to search from
        config: Level configuration (capacity is read from here)
        time_budget: Maximum computation time in seconds
        start_time: When computation started (time.perf_counter())
    """
    layout: Layout
    config: LevelConfig
    time_budget: float = 0.1
    start_time: float = field(default_factory=time.perf_counter)

    @property
    def capacity(self) -> int:
        return self.config.capacity

    def is_expired(self) -> bool:
        """True once the time budget has been used up."""
        return self.elapsed_time() >= self.time_budget

    def check_deadline(self) -> None:
        """
        Raise SearchTimeout if the budget is exhausted.

        Raises:
            SearchTimeout: If is_expired()
        """
        if self.is_expired():
            raise SearchTimeout()

    def elapsed_time(self) -> float:
        """Seconds elapsed since computation started."""
        return time.perf_counter() - self.start_time
