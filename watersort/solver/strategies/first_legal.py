"""
First Legal Strategy - Suggests the first legal pour in scan order.
"""

import time

from ..base import HintStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..solution import HintMetrics, HintResult


@register_strategy
class FirstLegalStrategy(HintStrategy):
    """Last-resort strategy: any legal pour at all."""
    name = "first_legal"
    description = "First legal (instant) - First pour in scan order"

    def solve(self, context: SearchContext) -> HintResult:
        start_time = time.perf_counter()
        successor = next(self.iter_successors(context.layout, context.capacity), None)
        moves = [successor[0]] if successor is not None else []
        return HintResult(
            moves=moves,
            is_complete=False,
            elapsed=time.perf_counter() - start_time,
            metrics=HintMetrics(states_explored=len(moves), strategy_name=self.name),
        )
