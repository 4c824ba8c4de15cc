"""
Hint Result Module - Result of a hint computation.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .move import Move


@dataclass
class HintMetrics:
    """
    Performance metrics for a hint computation.

    Attributes:
        states_explored: Number of layouts visited
        depth_reached: Deepest IDDFS depth limit tried (0 if not run)
        strategy_name: Name of the strategy that produced the moves
    """
    states_explored: int = 0
    depth_reached: int = 0
    strategy_name: str = ""


@dataclass
class HintResult:
    """
    Result of a strategy computation.

    Attributes:
        moves: Full plan when is_complete, otherwise at most one move
        is_complete: True if the moves solve the puzzle
        elapsed: Search time in seconds
        metrics: Performance statistics
    """
    moves: List[Move] = field(default_factory=list)
    is_complete: bool = False
    elapsed: float = 0.0
    metrics: HintMetrics = field(default_factory=HintMetrics)

    @property
    def move_count(self) -> int:
        """Number of moves in the result."""
        return len(self.moves)

    @property
    def has_moves(self) -> bool:
        """Check if the result has any moves."""
        return len(self.moves) > 0

    @property
    def first_move(self) -> Optional[Move]:
        """The move to play now, or None."""
        return self.moves[0] if self.moves else None
