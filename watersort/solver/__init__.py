"""
Solver Package - Liquid sort puzzle engine.

This package holds the pure puzzle model, the seeded level generator and
a pluggable strategy framework for computing hints.

Public API:
    - Layout: Immutable tube layout
    - Move: One recorded pour
    - LevelConfig / Difficulty: Level configuration and presets
    - can_move(), apply_move(), reverse_move(), is_won(): Pour rules
    - generate_layout(): Deterministic level generation
    - find_hint(): Complete plan or best single pour within a time budget
    - HintStrategy / create_strategy(): Strategy framework

Usage:
    from watersort.solver import LevelConfig, generate_layout, find_hint

    config = LevelConfig.for_difficulty("normal", seed=42)
    layout = generate_layout(config)

    result = find_hint(layout, config, time_budget=0.5)
    if result.is_complete:
        print(f"Solved in {result.move_count} pours")
    elif result.first_move:
        print(f"Try {result.first_move.source} -> {result.first_move.destination}")
"""

# Core data structures
from .move import Move
from .layout import (
    Layout,
    IllegalMoveError,
    movable_run_length,
    can_move,
    apply_move,
    reverse_move,
    is_won,
    legal_moves,
    has_legal_move,
)
from .config import LevelConfig, Difficulty, DIFFICULTY_PRESETS
from .generator import SeededRandom, generate_layout, is_acceptable, basic_solved_layout
from .solution import HintResult, HintMetrics
from .context import SearchContext, SearchTimeout

# Strategy framework
from .base import HintStrategy
from .factory import (
    create_strategy,
    create_chain,
    get_strategy_names,
    get_strategy_info,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .hints import find_hint, DEFAULT_TIME_BUDGET

__all__ = [
    # Data structures
    "Move",
    "Layout",
    "IllegalMoveError",
    "LevelConfig",
    "Difficulty",
    "DIFFICULTY_PRESETS",
    "HintResult",
    "HintMetrics",
    "SearchContext",
    "SearchTimeout",
    # Pour rules
    "movable_run_length",
    "can_move",
    "apply_move",
    "reverse_move",
    "is_won",
    "legal_moves",
    "has_legal_move",
    # Generation
    "SeededRandom",
    "generate_layout",
    "is_acceptable",
    "basic_solved_layout",
    # Strategy framework
    "HintStrategy",
    "create_strategy",
    "create_chain",
    "get_strategy_names",
    "get_strategy_info",
    "register_strategy",
    "find_hint",
    "DEFAULT_TIME_BUDGET",
]
