"""
Switch for the self-checks run by the graph algorithms.

With the switch on, ``dijkstra`` and ``bellman_ford`` confirm that no arc can
still relax their distances, ``topological_sort`` confirms no arc points
backwards in its order, and ``bipartite_coloring`` confirms no edge joins two
vertices of the same colour. A failed check raises ``InvariantViolation``.

The initial state comes from the ``GRAPHCLASSICS_DEBUG`` environment
variable, read once at import.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "GRAPHCLASSICS_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_debug_flag(value: Optional[str]) -> bool:
    """Interpret an environment value; unset or unrecognised means off."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


_checks_enabled: bool = parse_debug_flag(os.getenv(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """Return whether algorithms verify their results before returning."""
    return _checks_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn result verification on or off for the whole process."""
    global _checks_enabled
    _checks_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with result verification set to ``enabled``.

    The previous setting is restored on exit, also when the block raises.

    Example:
        >>> with debug_context(True):
        ...     dist = dijkstra(g, 0)  # raises InvariantViolation on a bad result
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
