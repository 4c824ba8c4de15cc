"""
Game Session Module - Interaction state machine for one puzzle.

This module provides the GameSession which turns tube taps into pours,
keeps the move history for undo, detects the win and asks the solver for
hints. Persistence of records and the undo/hint policy belong to the
caller and are passed in as collaborators.

Selection flow:
    NO SELECTION --tap non-empty tube i--> SELECTED(i)
    SELECTED(i)  --tap i-----------------> NO SELECTION
    SELECTED(i)  --tap j, legal----------> pour i->j, NO SELECTION
    SELECTED(i)  --tap j, illegal--------> NO SELECTION (layout unchanged)

For the puzzle rules and the hint search, see the watersort.solver package.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from watersort.solver import (
    DEFAULT_TIME_BUDGET,
    Layout,
    LevelConfig,
    Move,
    apply_move,
    can_move,
    find_hint,
    generate_layout,
    is_won,
    reverse_move,
)

logger = logging.getLogger(__name__)


__all__ = [
    "SelectionOutcome",
    "SessionPolicy",
    "ProgressRecorder",
    "NullProgressRecorder",
    "GameSession",
]


class SelectionOutcome(Enum):
    """
    Result of a tube tap, for caller feedback.

    States:
        SELECTED: Tube is now selected, waiting for a destination
        DESELECTED: The selected tube was tapped again
        MOVED: A pour was applied
        WON: A pour was applied and it solved the puzzle
        ILLEGAL: The pour was not legal; selection cleared, layout unchanged
        IGNORED: Nothing happened (empty tube, bad index, game already won)
    """
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
    WON = auto()
    ILLEGAL = auto()
    IGNORED = auto()


@dataclass(frozen=True)
class SessionPolicy:
    """
    Undo/hint availability, decided by the caller.

    Attributes:
        undo_cap: Undos allowed per level (None = unlimited)
        unlimited_hints: If False the hint gate closes after the first hint
    """
    undo_cap: Optional[int] = None
    unlimited_hints: bool = True


class ProgressRecorder(Protocol):
    """Persistence collaborator notified about wins and streaks."""

    def record_best(self, seed: int, moves: int, time: float) -> None: ...

    def increment_streak(self) -> None: ...

    def reset_streak(self) -> None: ...

    def mark_level_completed(self, seed: int) -> None: ...


class NullProgressRecorder:
    """Recorder that discards everything."""

    def record_best(self, seed: int, moves: int, time: float) -> None:
        pass

    def increment_streak(self) -> None:
        pass

    def reset_streak(self) -> None:
        pass

    def mark_level_completed(self, seed: int) -> None:
        pass


class GameSession:
    """
    Mutable game session over one level.

    Holds the current layout, the move history, the undo pushback list
    and the selection cursor. Move count and elapsed time are derived
    from the history and the start time.
    """

    def __init__(self, config: LevelConfig,
                 progress: Optional[ProgressRecorder] = None,
                 policy: Optional[SessionPolicy] = None,
                 hint_time_budget: float = DEFAULT_TIME_BUDGET,
                 clock: Callable[[], float] = time.time,
                 layout: Optional[Layout] = None):
        """
        Initialize a session.

        Args:
            config: Level configuration
            progress: Persistence collaborator (default: discard)
            policy: Undo/hint policy (default: unlimited)
            hint_time_budget: Seconds the hint search may take
            clock: Wall clock used for elapsed time
            layout: Start from this layout instead of generating one
        """
        self.progress: ProgressRecorder = progress or NullProgressRecorder()
        self.policy = policy or SessionPolicy()
        self.hint_time_budget = hint_time_budget
        self._clock = clock
        self._config = config
        self._reset(layout if layout is not None else generate_layout(config))

    def _reset(self, layout: Layout) -> None:
        """Replace the whole session state with a fresh level."""
        self._layout = layout
        self._history: List[Move] = []
        self._undo_stack: List[Move] = []
        self._start_time = self._clock()
        self._selected: Optional[int] = None
        self._undos_used = 0
        self._hint_available = True
        self._won = is_won(layout, self._config.capacity)

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def config(self) -> LevelConfig:
        return self._config

    @property
    def layout(self) -> Layout:
        """Current layout (immutable snapshot)."""
        return self._layout

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected

    @property
    def history(self) -> List[Move]:
        """Applied moves, oldest first (copy)."""
        return list(self._history)

    @property
    def undo_stack(self) -> List[Move]:
        """Moves retracted by undo, most recent last (copy)."""
        return list(self._undo_stack)

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def elapsed_time(self) -> float:
        """Seconds since the level started."""
        return self._clock() - self._start_time

    @property
    def is_won(self) -> bool:
        return self._won

    @property
    def undos_used(self) -> int:
        return self._undos_used

    @property
    def can_undo(self) -> bool:
        """True if there is a move to undo and the undo cap allows it."""
        if not self._history:
            return False
        cap = self.policy.undo_cap
        return cap is None or self._undos_used < cap

    @property
    def can_hint(self) -> bool:
        return self.policy.unlimited_hints or self._hint_available

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def select_tube(self, index: int) -> SelectionOutcome:
        """
        Handle a tap on a tube.

        Args:
            index: Tube index

        Returns:
            SelectionOutcome describing what happened
        """
        if self._won or not 0 <= index < self._layout.tube_count:
            return SelectionOutcome.IGNORED

        if self._selected is None:
            if not self._layout[index]:
                return SelectionOutcome.IGNORED
            self._selected = index
            return SelectionOutcome.SELECTED

        source = self._selected
        self._selected = None
        if source == index:
            return SelectionOutcome.DESELECTED
        return self.pour(source, index)

    def pour(self, source: int, destination: int) -> SelectionOutcome:
        """
        Pour source into destination without going through selection.

        Any pending selection is dropped, whatever the outcome.

        Returns:
            MOVED, WON, ILLEGAL, or IGNORED when the level is already won
        """
        self._selected = None
        if self._won:
            return SelectionOutcome.IGNORED

        capacity = self._config.capacity
        if not can_move(self._layout, capacity, source, destination):
            logger.debug(f"Illegal pour {source} -> {destination}")
            return SelectionOutcome.ILLEGAL

        self._layout, move = apply_move(self._layout, capacity, source, destination)
        self._undo_stack.clear()
        self._history.append(move)
        logger.debug(f"Pour {source} -> {destination}: {move.amount} x color {move.color}")

        if is_won(self._layout, capacity):
            self._handle_win()
            return SelectionOutcome.WON
        return SelectionOutcome.MOVED

    def undo(self) -> Optional[Move]:
        """
        Retract the last move.

        Returns:
            The retracted move, or None when undo is not available
        """
        if not self.can_undo:
            return None

        move = self._history.pop()
        self._layout = reverse_move(self._layout, move)
        self._undo_stack.append(move)
        self._undos_used += 1
        self._selected = None
        self._won = is_won(self._layout, self._config.capacity)
        logger.debug(f"Undo {move.source} -> {move.destination} ({move.amount})")
        return move

    def request_hint(self) -> Optional[Tuple[int, int]]:
        """
        Ask the solver for the next pour.

        Returns:
            (source, destination) of the suggested pour, or None
        """
        if not self.can_hint:
            return None

        result = find_hint(self._layout, self._config, self.hint_time_budget)
        move = result.first_move
        if move is None:
            return None

        if not self.policy.unlimited_hints:
            self._hint_available = False
        logger.info(f"Hint {move.source} -> {move.destination} "
                    f"(complete={result.is_complete}, {result.elapsed * 1000:.1f}ms)")
        return move.indices

    def restart(self) -> None:
        """Regenerate the same level from scratch; resets the streak."""
        logger.info(f"Restarting level seed={self._config.seed}")
        self._reset(generate_layout(self._config))
        self.progress.reset_streak()

    def advance_level(self) -> None:
        """Mark the level completed and move on to seed + 1."""
        self.progress.mark_level_completed(self._config.seed)
        self._config = self._config.next_level()
        logger.info(f"Advancing to level seed={self._config.seed}")
        self._reset(generate_layout(self._config))

    def _handle_win(self) -> None:
        self._won = True
        moves = self.move_count
        elapsed = self.elapsed_time
        logger.info(f"Level seed={self._config.seed} won in {moves} moves, {elapsed:.1f}s")
        self.progress.record_best(self._config.seed, moves, elapsed)
        self.progress.increment_streak()

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the full session state to a JSON-friendly dict."""
        return {
            "config": self._config.to_dict(),
            "tubes": self._layout.to_list(),
            "history": [m.to_dict() for m in self._history],
            "undo_stack": [m.to_dict() for m in self._undo_stack],
            "start_time": self._start_time,
            "selected": self._selected,
            "undos_used": self._undos_used,
            "hint_available": self._hint_available,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  progress: Optional[ProgressRecorder] = None,
                  policy: Optional[SessionPolicy] = None,
                  hint_time_budget: float = DEFAULT_TIME_BUDGET,
                  clock: Callable[[], float] = time.time) -> 'GameSession':
        """
        Restore a session saved with to_dict().

        Args:
            data: Dict produced by to_dict()
            progress, policy, hint_time_budget, clock: As for __init__

        Returns:
            GameSession in the saved state
        """
        config = LevelConfig.from_dict(data["config"])
        session = cls(config, progress=progress, policy=policy,
                      hint_time_budget=hint_time_budget, clock=clock,
                      layout=Layout.from_lists(data["tubes"]))
        session._history = [Move.from_dict(m) for m in data.get("history", [])]
        session._undo_stack = [Move.from_dict(m) for m in data.get("undo_stack", [])]
        session._start_time = float(data.get("start_time", session._start_time))
        session._selected = data.get("selected")
        session._undos_used = int(data.get("undos_used", 0))
        session._hint_available = bool(data.get("hint_available", True))
        return session
