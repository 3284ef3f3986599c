"""Exception types raised by graphclassics.

Everything derives from :class:`GraphError`, itself a ``ValueError``, so
callers that only catch ``ValueError`` keep working.
"""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for all package-specific errors."""


class InvalidVertexIndex(GraphError, IndexError):
    """Raised when a vertex id falls outside ``[0, vertex_count)``."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex} out of range for a graph with {vertex_count} vertices"
        )


class NegativeWeightUnsupported(GraphError):
    """Raised when an algorithm requiring non-negative weights meets a negative one."""


class WeightTypeError(GraphError, TypeError):
    """Raised for dtypes that cannot serve as edge weights."""


class InvariantViolation(GraphError):
    """Raised by debug-mode checks when an algorithm result is inconsistent."""


__all__ = [
    "GraphError",
    "InvalidVertexIndex",
    "NegativeWeightUnsupported",
    "WeightTypeError",
    "InvariantViolation",
]
