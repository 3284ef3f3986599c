"""
Single-source shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights.
Bellman-Ford algorithm for arbitrary weights (detects negative cycles).

Both return a NumPy array of the graph's weight dtype; vertices that cannot
be reached keep the infinity sentinel of that dtype
(:attr:`graphclassics.weights.WeightType.infinity`).

Single-destination shortest paths reduce to single-source ones on the
reversed graph (:func:`graphclassics.graphs.utils.reverse_graph`).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

import heapq
from typing import Any, List, Tuple

import numpy as np

from ..diagnostics import assert_shortest_distances, is_debug_enabled
from ..exceptions import NegativeWeightUnsupported
from ..logging import get_logger
from .core import Edge, Graph, check_edge_vertices, check_vertex, weight_type_of

logger = get_logger(__name__)


def dijkstra(graph: Graph, source: int) -> np.ndarray:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Array of length ``graph.vertex_count``; ``dist[source] == 0`` and
        ``dist[v]`` is the shortest distance to ``v``, or the infinity
        sentinel if ``v`` is unreachable.

    Raises:
        InvalidVertexIndex: If source is not a vertex of the graph.
        NegativeWeightUnsupported: If the graph contains a negative weight.

    Complexity: O(E log V) using a binary heap with lazy deletion.

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1, 4)
        >>> g.add_edge(1, 2, 1)
        >>> g.add_edge(0, 2, 7)
        >>> dijkstra(g, 0).tolist()
        [0, 4, 5]
    """
    n = graph.vertex_count
    check_vertex(source, n)

    for arcs in graph.adj:
        for e in arcs:
            if e.weight < 0:
                raise NegativeWeightUnsupported(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {e.weight} on edge ({e.source}, {e.target})"
                )

    wt = graph.weight_type
    inf = wt.infinity
    dist: List[Any] = [inf] * n
    dist[source] = wt.zero

    pq: List[Tuple[Any, int]] = [(wt.zero, source)]
    pops = 0

    while pq:
        d, u = heapq.heappop(pq)
        pops += 1

        # Stale entry: u was already settled with a smaller distance
        if dist[u] < d:
            continue

        for e in graph.adj[u]:
            next_dist = d + e.weight
            if dist[e.target] <= next_dist:
                continue
            dist[e.target] = next_dist
            heapq.heappush(pq, (next_dist, e.target))

    logger.debug("dijkstra: V=%d E=%d source=%d heap pops=%d", n, graph.edge_count, source, pops)

    result = np.array(dist, dtype=wt.dtype)
    if is_debug_enabled():
        assert_shortest_distances(graph.edges(), result, source, inf)
    return result


def bellman_ford(edges: List[Edge], vertex_count: int, source: int) -> np.ndarray:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Negative edge weights are allowed. Edges whose tail is still at the
    infinity sentinel are never relaxed, so the sentinel is never added to.

    Args:
        edges: Flat edge list (an :class:`Edges` or a list of :class:`Edge`).
        vertex_count: Number of vertices.
        source: Source vertex.

    Returns:
        Distance array as in :func:`dijkstra`, or an empty array if a
        negative cycle is reachable from ``source``.

    Raises:
        InvalidVertexIndex: If source or an edge endpoint is out of range.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> edges = Edges()
        >>> edges.add(0, 1, 1)
        >>> edges.add(1, 2, -3)
        >>> edges.add(2, 0, 1)
        >>> bellman_ford(edges, 3, 0).size
        0
    """
    check_vertex(source, vertex_count)
    check_edge_vertices(edges, vertex_count)

    wt = weight_type_of(edges)
    inf = wt.infinity
    dist: List[Any] = [inf] * vertex_count
    dist[source] = wt.zero

    passes = 0
    for _ in range(vertex_count - 1):
        passes += 1
        updated = False
        for e in edges:
            if dist[e.source] == inf:
                continue
            candidate = dist[e.source] + e.weight
            if candidate < dist[e.target]:
                dist[e.target] = candidate
                updated = True
        if not updated:
            break

    for e in edges:
        if dist[e.source] == inf:
            continue
        if dist[e.source] + e.weight < dist[e.target]:
            logger.warning(
                "bellman_ford: negative cycle reachable from source %d (edge %d -> %d)",
                source,
                e.source,
                e.target,
            )
            return np.empty(0, dtype=wt.dtype)

    logger.debug(
        "bellman_ford: V=%d E=%d source=%d passes=%d", vertex_count, len(edges), source, passes
    )

    result = np.array(dist, dtype=wt.dtype)
    if is_debug_enabled():
        assert_shortest_distances(edges, result, source, inf)
    return result
