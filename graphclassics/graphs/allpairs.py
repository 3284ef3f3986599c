"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes the dense shortest-distance matrix of a graph, and keeps an already
converged matrix up to date when single edges are inserted afterwards.

The matrix is a ``(V, V)`` NumPy array of the graph's weight dtype, with
the infinity sentinel marking pairs without a path. Sums are only formed
when neither operand is the sentinel.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Any

import numpy as np

from ..exceptions import GraphError
from ..logging import get_logger
from ..weights import WeightType
from .core import Graph, check_vertex

logger = get_logger(__name__)


def _relax_through(matrix: np.ndarray, k: int, inf: Any) -> None:
    """Relax every pair ``(i, j)`` through intermediate vertex ``k`` in place."""
    to_k = matrix[:, k].copy()
    from_k = matrix[k, :].copy()
    reachable = (to_k != inf)[:, None] & (from_k != inf)[None, :]
    candidate = np.where(reachable, to_k[:, None] + from_k[None, :], matrix)
    np.minimum(matrix, candidate, out=matrix)


def _check_matrix(matrix: np.ndarray) -> int:
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise GraphError(f"Distance matrix must be square, got shape {matrix.shape}")
    return matrix.shape[0]


def warshall_floyd(graph: Graph) -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Negative weights are allowed. A negative cycle shows up as a negative
    entry on the diagonal (see :func:`has_negative_cycle`); other entries
    are then meaningless.

    Args:
        graph: Graph to analyse. Parallel arcs keep their minimum weight.

    Returns:
        ``(V, V)`` array where ``matrix[i][j]`` is the shortest distance from
        ``i`` to ``j`` or the infinity sentinel, and ``matrix[i][i] == 0``
        unless ``i`` lies on a negative cycle.

    Complexity: O(V^3).

    Example:
        >>> g = Graph(3)
        >>> g.add_arc(0, 1, 1)
        >>> g.add_arc(1, 2, 2)
        >>> int(warshall_floyd(g)[0][2])
        3
    """
    wt = graph.weight_type
    n = graph.vertex_count
    inf = wt.infinity

    matrix = wt.full((n, n))
    np.fill_diagonal(matrix, wt.zero)
    for arcs in graph.adj:
        for e in arcs:
            if e.weight < matrix[e.source, e.target]:
                matrix[e.source, e.target] = e.weight

    for k in range(n):
        _relax_through(matrix, k, inf)

    if has_negative_cycle(matrix):
        logger.warning("warshall_floyd: negative cycle detected")
    logger.debug("warshall_floyd: V=%d E=%d", n, graph.edge_count)
    return matrix


def has_negative_cycle(matrix: np.ndarray) -> bool:
    """Return True if the converged ``matrix`` has a negative diagonal entry."""
    _check_matrix(matrix)
    return bool(np.any(np.diagonal(matrix) < 0))


def add_edge_to_matrix(matrix: np.ndarray, source: int, target: int, weight: Any = 1) -> None:
    """
    Insert an undirected edge into a converged distance matrix, in place.

    Both ``matrix[source][target]`` and ``matrix[target][source]`` take the
    minimum of their current value and ``weight``; then only paths through
    ``source`` or ``target`` are re-relaxed, since every path the new edge
    shortens passes through one of its endpoints.

    Args:
        matrix: Output of :func:`warshall_floyd` (or of earlier updates).
            Modified in place.
        source: One endpoint.
        target: Other endpoint.
        weight: Edge weight (default 1).

    Raises:
        InvalidVertexIndex: If an endpoint is out of range.

    Complexity: O(V^2).
    """
    n = _check_matrix(matrix)
    check_vertex(source, n)
    check_vertex(target, n)
    wt = WeightType.of(matrix.dtype)
    w = wt.cast(weight)

    matrix[source, target] = min(matrix[source, target], w)
    matrix[target, source] = min(matrix[target, source], w)
    for k in (source, target):
        _relax_through(matrix, k, wt.infinity)


def add_arc_to_matrix(matrix: np.ndarray, source: int, target: int, weight: Any = 1) -> None:
    """
    Insert a directed arc into a converged distance matrix, in place.

    A shortest path improved by the new arc uses it once, so
    ``matrix[i][j] = min(matrix[i][j], matrix[i][source] + weight + matrix[target][j])``
    is the complete update.

    Raises:
        InvalidVertexIndex: If an endpoint is out of range.

    Complexity: O(V^2).
    """
    n = _check_matrix(matrix)
    check_vertex(source, n)
    check_vertex(target, n)
    wt = WeightType.of(matrix.dtype)
    w = wt.cast(weight)
    inf = wt.infinity

    if w >= matrix[source, target]:
        return

    to_source = matrix[:, source].copy()
    from_target = matrix[target, :].copy()
    reachable = (to_source != inf)[:, None] & (from_target != inf)[None, :]
    candidate = np.where(reachable, to_source[:, None] + w + from_target[None, :], matrix)
    np.minimum(matrix, candidate, out=matrix)
