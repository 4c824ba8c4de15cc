"""
Base Strategy Module - Abstract base class for hint strategies.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Tuple

from .context import SearchContext
from .layout import Layout, apply_move, can_move
from .move import Move
from .solution import HintResult


class HintStrategy(ABC):
    """
    Abstract base class for all hint strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def solve(self, context: SearchContext) -> HintResult:
        """
        Compute moves for the layout in the context.

        Search strategies must poll the context deadline and give up
        once it has passed. A strategy that finds nothing returns a
        result without moves.

        Args:
            context: Search context with layout, config and budget

        Returns:
            HintResult with moves and metrics
        """
        pass

    def iter_successors(self, layout: Layout, capacity: int) -> Iterator[Tuple[Move, Layout]]:
        """
        Yield (move, resulting layout) for every legal pour.

        Pairs are produced in ascending source, then ascending
        destination order.
        """
        count = layout.tube_count
        for source in range(count):
            for destination in range(count):
                if can_move(layout, capacity, source, destination):
                    new_layout, move = apply_move(layout, capacity, source, destination)
                    yield move, new_layout
