"""
Strategies Package - Concrete hint strategy implementations.

Import this module to register all built-in strategies.
"""

from .iddfs import IDDFSStrategy
from .heuristic import HeuristicStrategy, score_move
from .first_legal import FirstLegalStrategy

__all__ = [
    "IDDFSStrategy",
    "HeuristicStrategy",
    "FirstLegalStrategy",
    "score_move",
]
