"""
Layout Module - Immutable tube layout and the pour rules over it.

A layout is an ordered collection of tubes. Each tube is a stack of
color identifiers where the end of the sequence is the pourable top.
All functions here are pure: they never modify a layout in place.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from .move import Move


Tube = Tuple[int, ...]


class IllegalMoveError(ValueError):
    """Raised when a pour or its reversal would break the layout invariants."""


@dataclass(frozen=True)
class Layout:
    """
    Immutable tube layout.

    Uses tuple-of-tuples for hashability and immutability, so a layout
    can be handed to a background search without copying.

    Attributes:
        tubes: Tuple of tubes, each a tuple of color ids (last = top)
    """
    tubes: Tuple[Tube, ...]

    @classmethod
    def from_lists(cls, tubes: Iterable[Sequence[int]]) -> 'Layout':
        """
        Create Layout from nested lists.

        Args:
            tubes: Iterable of tube contents, bottom first

        Returns:
            Layout instance
        """
        return cls(tubes=tuple(tuple(tube) for tube in tubes))

    def to_list(self) -> List[List[int]]:
        """Convert to mutable nested list representation."""
        return [list(tube) for tube in self.tubes]

    @property
    def tube_count(self) -> int:
        """Number of tubes in the layout."""
        return len(self.tubes)

    def total_units(self) -> int:
        """Total number of color units across all tubes."""
        return sum(len(tube) for tube in self.tubes)

    def color_counts(self) -> Dict[int, int]:
        """Occurrences of every color id across all tubes."""
        return dict(Counter(color for tube in self.tubes for color in tube))

    def state_key(self) -> str:
        """
        Canonical string encoding of the tube contents.

        Units inside a tube are joined with ',' and tubes with '|', so
        two layouts share a key only if every tube matches position by
        position.
        """
        return "|".join(",".join(str(c) for c in tube) for tube in self.tubes)

    def __len__(self) -> int:
        return len(self.tubes)

    def __getitem__(self, index: int) -> Tube:
        return self.tubes[index]


def movable_run_length(tube: Sequence[int]) -> int:
    """
    Count the identical units at the top of a tube.

    Args:
        tube: Tube contents, bottom first

    Returns:
        Length of the top run (0 for an empty tube)
    """
    if not tube:
        return 0
    top = tube[-1]
    count = 0
    for color in reversed(tube):
        if color != top:
            break
        count += 1
    return count


def can_move(layout: Layout, capacity: int, source: int, destination: int) -> bool:
    """
    Check whether a pour from source to destination is legal.

    Out-of-range indices are never legal.
    """
    count = len(layout.tubes)
    if not (0 <= source < count and 0 <= destination < count):
        return False
    if source == destination:
        return False

    src = layout.tubes[source]
    dst = layout.tubes[destination]
    if not src or len(dst) >= capacity:
        return False
    return not dst or dst[-1] == src[-1]


def pour_amount(layout: Layout, capacity: int, source: int, destination: int) -> int:
    """Units a legal pour would transfer: the top run, limited by free space."""
    run = movable_run_length(layout.tubes[source])
    free = capacity - len(layout.tubes[destination])
    return max(0, min(run, free))


def apply_move(layout: Layout, capacity: int, source: int, destination: int) -> Tuple[Layout, Move]:
    """
    Pour the top run of source into destination.

    When the run is longer than the free space in destination only the
    space-limited part moves; the rest stays in source.

    Args:
        layout: Current layout
        capacity: Units per tube
        source: Tube index to pour from
        destination: Tube index to pour into

    Returns:
        (new layout, move describing the pour)

    Raises:
        IllegalMoveError: If the pour is not legal
    """
    if not can_move(layout, capacity, source, destination):
        raise IllegalMoveError(f"Illegal pour {source} -> {destination}")

    amount = pour_amount(layout, capacity, source, destination)
    color = layout.tubes[source][-1]

    tubes = list(layout.tubes)
    tubes[source] = tubes[source][:-amount]
    tubes[destination] = tubes[destination] + (color,) * amount

    move = Move(source=source, destination=destination, amount=amount, color=color)
    return Layout(tubes=tuple(tubes)), move


def reverse_move(layout: Layout, move: Move) -> Layout:
    """
    Undo a pour produced by apply_move().

    Removes move.amount units from the destination and puts the same
    number of move.color units back on the source.

    Raises:
        IllegalMoveError: If the destination top does not hold the poured units
    """
    count = len(layout.tubes)
    if not (0 <= move.source < count and 0 <= move.destination < count):
        raise IllegalMoveError(f"Move indices out of range: {move.indices}")

    dst = layout.tubes[move.destination]
    if len(dst) < move.amount or any(c != move.color for c in dst[-move.amount:]):
        raise IllegalMoveError(
            f"Tube {move.destination} does not end with {move.amount} x color {move.color}"
        )

    tubes = list(layout.tubes)
    tubes[move.destination] = dst[:-move.amount]
    tubes[move.source] = tubes[move.source] + (move.color,) * move.amount
    return Layout(tubes=tuple(tubes))


def is_tube_complete(tube: Sequence[int], capacity: int) -> bool:
    """True if the tube is full of a single color."""
    return len(tube) == capacity and all(c == tube[0] for c in tube)


def is_won(layout: Layout, capacity: int) -> bool:
    """True if every tube is empty or a full tube of one color."""
    return all(not tube or is_tube_complete(tube, capacity) for tube in layout.tubes)


def legal_moves(layout: Layout, capacity: int) -> List[Tuple[int, int]]:
    """
    All legal (source, destination) pairs in scan order.

    Scan order is ascending source, then ascending destination.
    """
    count = len(layout.tubes)
    return [
        (s, d)
        for s in range(count)
        for d in range(count)
        if can_move(layout, capacity, s, d)
    ]


def has_legal_move(layout: Layout, capacity: int) -> bool:
    """True if at least one pour is legal."""
    count = len(layout.tubes)
    return any(
        can_move(layout, capacity, s, d)
        for s in range(count)
        for d in range(count)
    )
