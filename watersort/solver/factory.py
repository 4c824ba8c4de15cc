"""
Strategy Registry Module - Name-based lookup of hint strategies.

Strategy classes add themselves with @register_strategy when the
strategies package is imported; the hint engine then builds its
fallback chain from names.
"""

from typing import Any, Dict, List, Sequence, Type

from .base import HintStrategy


_REGISTRY: Dict[str, Type[HintStrategy]] = {}


def register_strategy(cls: Type[HintStrategy]) -> Type[HintStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    A later class registered with the same name replaces the earlier one.
    """
    _REGISTRY[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> HintStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Registered name, e.g. "iddfs" or "heuristic"
        **kwargs: Forwarded to the strategy constructor

    Raises:
        ValueError: If nothing is registered under name
    """
    try:
        cls = _REGISTRY[name]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY))
        raise ValueError(f"Unknown strategy: {name}. Known strategies: {known}") from None
    return cls(**kwargs)


def create_chain(names: Sequence[str]) -> List[HintStrategy]:
    """Instantiate strategies in the given order with default arguments."""
    return [create_strategy(name) for name in names]


def get_strategy_names() -> List[str]:
    """Registered strategy names in registration order."""
    return list(_REGISTRY)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name/description pairs for every registered strategy."""
    return [{"name": name, "description": cls.description} for name, cls in _REGISTRY.items()]
