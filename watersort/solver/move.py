"""
Move Module - Represents a single pour between two tubes.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Move:
    """
    Represents one pour from a source tube to a destination tube.

    A move records exactly what was transferred so that it can be
    reversed later without looking at the layout it came from.

    Attributes:
        source: Index of the tube poured from
        destination: Index of the tube poured into
        amount: Number of units transferred (>= 1)
        color: Color identifier of the transferred units
    """
    source: int
    destination: int
    amount: int
    color: int

    def __post_init__(self):
        if self.amount < 1:
            raise ValueError(f"Move amount must be >= 1, got {self.amount}")
        if self.source == self.destination:
            raise ValueError("Move source and destination must differ")

    @property
    def indices(self):
        """(source, destination) pair, as handed to UI code."""
        return (self.source, self.destination)

    def to_dict(self) -> Dict[str, int]:
        """Convert to a JSON-friendly dict."""
        return {
            "source": self.source,
            "destination": self.destination,
            "amount": self.amount,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Move':
        """
        Create a Move from a dict produced by to_dict().

        Args:
            data: Dict with source, destination, amount and color keys

        Returns:
            Move instance
        """
        return cls(
            source=int(data["source"]),
            destination=int(data["destination"]),
            amount=int(data["amount"]),
            color=int(data["color"]),
        )
