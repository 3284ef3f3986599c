"""Diagnostics and debugging utilities for graphclassics."""

from .core import (
    assert_proper_coloring,
    assert_shortest_distances,
    assert_topological_order,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_shortest_distances",
    "assert_topological_order",
    "assert_proper_coloring",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
