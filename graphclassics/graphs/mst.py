"""
Minimum spanning tree: Kruskal's algorithm.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Kruskal).
"""

from typing import Any, List

from ..logging import get_logger
from .core import Edge, check_edge_vertices, weight_type_of
from .unionfind import UnionFind

logger = get_logger(__name__)


def kruskal(edges: List[Edge], vertex_count: int) -> Any:
    """
    Kruskal's algorithm for the minimum spanning forest.

    Edges are taken in ascending weight order and kept whenever they join
    two different components.

    Note:
        ``edges`` is sorted in place by weight (stable). Pass
        ``edges.copy()`` to keep the original order.

    Args:
        edges: Flat edge list, each edge treated as undirected.
        vertex_count: Number of vertices.

    Returns:
        Total weight of the minimum spanning forest, as a scalar of the
        edge weight dtype. For a disconnected graph this is the sum over
        all components.

    Raises:
        InvalidVertexIndex: If an edge endpoint is out of range.

    Complexity: O(E log E) for sorting plus near-linear union-find work.

    Example:
        >>> edges = Edges()
        >>> edges.add(0, 1, 1)
        >>> edges.add(1, 2, 2)
        >>> edges.add(0, 2, 3)
        >>> int(kruskal(edges, 3))
        3
    """
    check_edge_vertices(edges, vertex_count)
    wt = weight_type_of(edges)

    edges.sort(key=lambda e: e.weight)

    tree = UnionFind(vertex_count)
    total = wt.zero
    accepted = 0
    for e in edges:
        if tree.unite(e.source, e.target):
            total += e.weight
            accepted += 1

    logger.debug(
        "kruskal: V=%d E=%d accepted=%d components=%d",
        vertex_count,
        len(edges),
        accepted,
        vertex_count - accepted,
    )
    return total
