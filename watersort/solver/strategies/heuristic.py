"""
Heuristic Strategy - Scores every legal pour and suggests the best one.

Used when no complete plan was found in time. The score is computed as
if a single unit moved, which is coarser than the real pour.
"""

import time
from typing import Optional, Sequence

from ..base import HintStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..layout import Layout, apply_move, can_move
from ..solution import HintMetrics, HintResult

EMPTY_DESTINATION_BONUS = 10
MATCHING_COLOR_BONUS = 20
FILLS_DESTINATION_BONUS = 50
EMPTIES_SOURCE_BONUS = 15
UNIFORM_SOURCE_BONUS = 30


def score_move(layout: Layout, capacity: int, source: int, destination: int) -> int:
    """
    Score a legal pour.

    Rules are additive:
      +10 destination is empty
      +20 destination top matches the source top
          +50 more if one unit would fill the destination
      +15 source holds a single unit
      +30 source would be one uniform color after losing one unit
    """
    src: Sequence[int] = layout.tubes[source]
    dst: Sequence[int] = layout.tubes[destination]
    top = src[-1]
    score = 0

    if not dst:
        score += EMPTY_DESTINATION_BONUS

    if dst and dst[-1] == top:
        score += MATCHING_COLOR_BONUS
        if len(dst) + 1 == capacity:
            score += FILLS_DESTINATION_BONUS

    if len(src) == 1:
        score += EMPTIES_SOURCE_BONUS

    if len(src) > 1:
        remaining = src[:-1]
        if all(c == remaining[0] for c in remaining):
            score += UNIFORM_SOURCE_BONUS

    return score


@register_strategy
class HeuristicStrategy(HintStrategy):
    """
    Single-move suggestion by hand-tuned scoring.

    Ties go to the first pour in scan order (ascending source, then
    ascending destination).
    """
    name = "heuristic"
    description = "Heuristic (instant) - Best scoring single pour"

    def solve(self, context: SearchContext) -> HintResult:
        start_time = time.perf_counter()
        layout = context.layout
        capacity = context.capacity

        best: Optional[tuple] = None
        best_score = None
        evaluated = 0

        for source in range(layout.tube_count):
            for destination in range(layout.tube_count):
                if not can_move(layout, capacity, source, destination):
                    continue
                evaluated += 1
                score = score_move(layout, capacity, source, destination)
                if best_score is None or score > best_score:
                    best_score = score
                    best = (source, destination)

        moves = []
        if best is not None:
            _, move = apply_move(layout, capacity, *best)
            moves.append(move)

        return HintResult(
            moves=moves,
            is_complete=False,
            elapsed=time.perf_counter() - start_time,
            metrics=HintMetrics(states_explored=evaluated, strategy_name=self.name),
        )
