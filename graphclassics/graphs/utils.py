"""
Utility functions for converting between graph representations.
"""

from typing import Iterable, Optional

from ..weights import DTypeLike
from .core import Edge, Edges, Graph, weight_type_of


def graph_from_edges(
    edges: Iterable[Edge],
    vertex_count: int,
    directed: bool = True,
    dtype: Optional[DTypeLike] = None,
) -> Graph:
    """
    Build an adjacency-list Graph from a flat edge list.

    Args:
        edges: Iterable of :class:`Edge`.
        vertex_count: Number of vertices.
        directed: If True each edge becomes one arc, otherwise an undirected
            edge (two arcs).
        dtype: Weight dtype; defaults to the dtype of ``edges``.

    Returns:
        A new Graph; ``edges`` is left untouched.

    Example:
        >>> edges = Edges()
        >>> edges.add(0, 1, 5)
        >>> graph_from_edges(edges, 2, directed=False).edge_count
        2
    """
    if not isinstance(edges, list):
        edges = list(edges)
    if dtype is None:
        dtype = weight_type_of(edges).dtype
    graph = Graph(vertex_count, dtype=dtype)
    for e in edges:
        if directed:
            graph.add_arc(e.source, e.target, e.weight)
        else:
            graph.add_edge(e.source, e.target, e.weight)
    return graph


def edges_from_graph(graph: Graph) -> Edges:
    """
    Return every arc of ``graph`` as a flat edge list.

    An undirected edge yields both of its arcs.
    """
    return graph.edges()


def reverse_graph(graph: Graph) -> Graph:
    """
    Return a new graph with every arc reversed.

    Shortest paths *to* a fixed target in ``graph`` are shortest paths
    *from* that target in the reversed graph.

    Example:
        >>> g = Graph(2)
        >>> g.add_arc(0, 1, 3)
        >>> reverse_graph(g)[1][0].target
        0
    """
    reversed_graph = Graph(graph.vertex_count, dtype=graph.dtype)
    for arcs in graph.adj:
        for e in arcs:
            reversed_graph.add_arc(e.target, e.source, e.weight)
    return reversed_graph
