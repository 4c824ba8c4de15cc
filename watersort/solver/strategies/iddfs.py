"""
IDDFS Strategy - Complete solution by iterative deepening depth-first search.

Runs a depth-limited DFS with limits 1, 2, 3, ... until a plan reaching
the won state is found or the time budget runs out. The first plan found
is returned; it is not guaranteed to be the shortest one when a visited
state cuts off a shallower path.
"""

import logging
import time
from typing import Iterator, List, Optional, Set, Tuple

from ..base import HintStrategy
from ..context import SearchContext, SearchTimeout
from ..factory import register_strategy
from ..layout import Layout, is_won
from ..move import Move
from ..solution import HintMetrics, HintResult

logger = logging.getLogger(__name__)


@register_strategy
class IDDFSStrategy(HintStrategy):
    """
    Iterative deepening search for a full solution.

    Each depth-limited pass keeps its own visited set of layout keys;
    the set is not shared between passes. The deadline is checked
    before every depth pass and at every visited node, and a timeout
    aborts the whole search rather than just the current branch.

    Parameters:
        max_depth: Optional ceiling on the depth limit (None = unbounded)
    """
    name = "iddfs"
    description = "IDDFS (complete) - Full solution within the time budget"

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self._states_explored = 0

    def solve(self, context: SearchContext) -> HintResult:
        """
        Search for a complete plan.

        Args:
            context: Search context with layout, config and budget

        Returns:
            HintResult with is_complete=True and the plan, or an empty
            incomplete result on timeout / exhausted depth
        """
        start_time = time.perf_counter()
        self._states_explored = 0
        depth_limit = 0
        plan: Optional[List[Move]] = None

        try:
            while self.max_depth is None or depth_limit < self.max_depth:
                context.check_deadline()
                depth_limit += 1
                plan = self._depth_limited(context.layout, context.capacity,
                                           depth_limit, context)
                if plan is not None:
                    break
        except SearchTimeout:
            logger.debug(f"IDDFS timed out at depth {depth_limit} "
                         f"after {self._states_explored} states")
            plan = None

        return HintResult(
            moves=plan or [],
            is_complete=plan is not None,
            elapsed=time.perf_counter() - start_time,
            metrics=HintMetrics(
                states_explored=self._states_explored,
                depth_reached=depth_limit,
                strategy_name=self.name,
            ),
        )

    def _depth_limited(self, root: Layout, capacity: int, limit: int,
                       context: SearchContext) -> Optional[List[Move]]:
        """
        One depth-limited DFS pass using an explicit stack.

        stack[k] iterates the children of the node at depth k, and path
        holds the moves leading to the node being visited.

        Returns:
            Moves from root to a won layout, or None

        Raises:
            SearchTimeout: If the deadline passes during the pass
        """
        visited: Set[str] = set()
        path: List[Move] = []
        stack: List[Iterator[Tuple[Move, Layout]]] = []
        node = root
        depth = 0

        while True:
            context.check_deadline()
            self._states_explored += 1

            if is_won(node, capacity):
                return list(path)

            if depth < limit:
                key = node.state_key()
                if key not in visited:
                    visited.add(key)
                    stack.append(self.iter_successors(node, capacity))

            # Move on to the next unexplored child, backtracking as needed
            while stack:
                child = next(stack[-1], None)
                if child is None:
                    stack.pop()
                    continue
                move, node = child
                depth = len(stack)
                del path[depth - 1:]
                path.append(move)
                break
            else:
                return None
