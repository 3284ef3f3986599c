"""
Depth-first traversal algorithms: topological sort and bipartiteness.

Both use an explicit stack of ``(vertex, arc iterator)`` frames, which visits
vertices in exactly the order of the recursive formulation (roots by
increasing id, arcs in insertion order) without being bounded by the
interpreter's recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.3 (DFS) and 22.4 (Topological sort).
"""

from typing import Iterator, List, Optional, Tuple

from ..diagnostics import assert_proper_coloring, assert_topological_order, is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph

logger = get_logger(__name__)

WHITE, GRAY, BLACK = 0, 1, 2


def topological_sort(graph: Graph) -> Tuple[bool, List[int]]:
    """
    Topological ordering of a directed graph.

    A vertex is appended to the order once all its descendants are finished;
    the list is reversed at the end. Meeting a gray vertex (one still on the
    current DFS path) means a directed cycle.

    Args:
        graph: Directed graph (arcs added with ``add_arc``).

    Returns:
        Tuple of:
        - success: False if the graph contains a directed cycle
        - order: All vertices such that every arc goes from an earlier to a
          later vertex. Partial and unordered when success is False.

    Complexity: O(V + E).

    Example:
        >>> g = Graph(3)
        >>> g.add_arc(2, 0)
        >>> g.add_arc(0, 1)
        >>> topological_sort(g)
        (True, [2, 0, 1])
    """
    n = graph.vertex_count
    color = [WHITE] * n
    order: List[int] = []

    for root in range(n):
        if color[root] != WHITE:
            continue

        color[root] = GRAY
        stack: List[Tuple[int, Iterator[Edge]]] = [(root, iter(graph.adj[root]))]

        while stack:
            v, arcs = stack[-1]
            for e in arcs:
                if color[e.target] == BLACK:
                    continue
                if color[e.target] == GRAY:
                    logger.debug("topological_sort: cycle through arc (%d, %d)", v, e.target)
                    return False, order
                color[e.target] = GRAY
                stack.append((e.target, iter(graph.adj[e.target])))
                break
            else:
                stack.pop()
                order.append(v)
                color[v] = BLACK

    order.reverse()
    if is_debug_enabled():
        assert_topological_order(graph.adj, order)
    return True, order


def bipartite_coloring(graph: Graph) -> Optional[List[int]]:
    """
    Two-colour the vertices of an undirected graph.

    Every uncoloured vertex starts a new DFS with colour ``+1``, so each
    connected component is checked.

    Args:
        graph: Undirected graph (symmetric adjacency, built with ``add_edge``).

    Returns:
        List with ``+1`` or ``-1`` per vertex such that no edge joins two
        equal colours, or None if no such colouring exists.

    Complexity: O(V + E).
    """
    n = graph.vertex_count
    color = [0] * n

    for root in range(n):
        if color[root] != 0:
            continue

        color[root] = 1
        stack: List[Tuple[int, Iterator[Edge]]] = [(root, iter(graph.adj[root]))]

        while stack:
            v, arcs = stack[-1]
            for e in arcs:
                if color[e.target] == 0:
                    color[e.target] = -color[v]
                    stack.append((e.target, iter(graph.adj[e.target])))
                    break
                if color[e.target] == color[v]:
                    logger.debug("bipartite_coloring: odd cycle through edge (%d, %d)", v, e.target)
                    return None
            else:
                stack.pop()

    if is_debug_enabled():
        assert_proper_coloring(graph.adj, color)
    return color


def is_bipartite_graph(graph: Graph) -> bool:
    """
    Return True iff the graph admits a proper 2-colouring.

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 2)
        >>> g.add_edge(2, 0)
        >>> is_bipartite_graph(g)
        False
    """
    return bipartite_coloring(graph) is not None


def bipartite_partition_size(graph: Graph) -> int:
    """
    Return the number of vertices coloured ``+1``, or -1 if not bipartite.

    Vertex 0 (and the first vertex of every further component) is always
    coloured ``+1``.
    """
    color = bipartite_coloring(graph)
    if color is None:
        return -1
    return sum(1 for c in color if c == 1)
