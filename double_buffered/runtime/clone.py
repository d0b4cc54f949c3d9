"""Value duplication strategies."""

from __future__ import annotations

from collections.abc import Callable
from copy import copy, deepcopy
from typing import Any

from double_buffered.api.buffer import CloneFn, SupportsClone
from double_buffered.runtime.config import CLONE_STRATEGY_NAMES, get_buffer_config


def clone_method[V: SupportsClone](value: V) -> V:
    """Duplicate through the value's own ``clone()`` method."""
    return value.clone()


# shallow copies share nested objects; only safe for flat values.
CLONE_STRATEGIES: dict[str, Callable[[Any], Any]] = {
    "deep": deepcopy,
    "shallow": copy,
    "method": clone_method,
}


def resolve_clone_fn(name: str) -> CloneFn[Any]:
    """Return the clone function registered under ``name``."""
    key = str(name).strip().lower()
    try:
        return CLONE_STRATEGIES[key]
    except KeyError:
        known = ", ".join(CLONE_STRATEGY_NAMES)
        raise ValueError(f"unknown clone strategy {name!r}; expected one of: {known}") from None


def default_clone_fn() -> CloneFn[Any]:
    """Return the clone function selected by the active buffer configuration."""
    return resolve_clone_fn(get_buffer_config().clone_strategy)


__all__ = ["CLONE_STRATEGIES", "clone_method", "default_clone_fn", "resolve_clone_fn"]
