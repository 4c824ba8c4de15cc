"""
Hint Engine Module - Runs the hint strategies in fallback order.

  1. iddfs        complete plan within the time budget
  2. heuristic    best scoring single pour
  3. first_legal  any legal pour

The first stage that returns moves wins. When none does there is no
legal pour and the result is empty.
"""

import logging
import time
from typing import Sequence

from .config import LevelConfig
from .context import SearchContext
from .factory import create_chain
from .layout import Layout
from .solution import HintMetrics, HintResult

logger = logging.getLogger(__name__)

DEFAULT_TIME_BUDGET = 0.1
HINT_CHAIN: Sequence[str] = ("iddfs", "heuristic", "first_legal")


def find_hint(layout: Layout, config: LevelConfig,
              time_budget: float = DEFAULT_TIME_BUDGET) -> HintResult:
    """
    Compute a hint for the layout.

    Args:
        layout: Layout snapshot to search from
        config: Level configuration
        time_budget: Wall-clock budget for the complete search, in seconds

    Returns:
        HintResult; elapsed covers the whole chain
    """
    start_time = time.perf_counter()
    context = SearchContext(layout=layout, config=config, time_budget=time_budget)
    states_explored = 0
    depth_reached = 0

    for strategy in create_chain(HINT_CHAIN):
        result = strategy.solve(context)
        states_explored += result.metrics.states_explored
        depth_reached = max(depth_reached, result.metrics.depth_reached)

        if result.has_moves or result.is_complete:
            logger.debug(f"Hint from '{strategy.name}': {result.move_count} move(s), "
                         f"complete={result.is_complete}")
            result.elapsed = time.perf_counter() - start_time
            result.metrics.states_explored = states_explored
            result.metrics.depth_reached = depth_reached
            return result

    logger.debug("No legal pour available, no hint")
    return HintResult(
        moves=[],
        is_complete=False,
        elapsed=time.perf_counter() - start_time,
        metrics=HintMetrics(states_explored=states_explored,
                            depth_reached=depth_reached),
    )
