"""
Core graph data structures.

Two representations are provided:

- :class:`Graph`: per-vertex adjacency lists over dense vertex ids
  ``0 .. n-1``. ``graph[v]`` is the list of arcs leaving ``v``.
- :class:`Edges`: a flat, insertion-ordered edge list.

Both carry a weight dtype (see :mod:`graphclassics.weights`); weights are
cast to it on insertion. The vertex count of a Graph is fixed at
construction, only adjacency lists grow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List

import numpy as np

from ..exceptions import GraphError, InvalidVertexIndex
from ..weights import DEFAULT_DTYPE, DTypeLike, WeightType


def check_vertex(vertex: int, vertex_count: int) -> None:
    """
    Validate a vertex id.

    Raises:
        InvalidVertexIndex: If ``vertex`` is not in ``[0, vertex_count)``.
    """
    if not 0 <= vertex < vertex_count:
        raise InvalidVertexIndex(vertex, vertex_count)


@dataclass(frozen=True)
class Edge:
    """
    Directed, weighted arc from ``source`` to ``target``.

    Attributes:
        source: Tail vertex id.
        target: Head vertex id.
        weight: Arc weight (default 1).
    """

    source: int
    target: int
    weight: Any = 1


class Edges(list):
    """
    Flat edge-list representation.

    A ``list`` of :class:`Edge` that remembers its weight dtype. Order is
    insertion order until an algorithm documented as reordering it
    (:func:`~graphclassics.graphs.mst.kruskal`) is called.

    Example:
        >>> edges = Edges()
        >>> edges.add(0, 1, 4)
        >>> len(edges), int(edges[0].weight)
        (1, 4)
    """

    def __init__(self, edges: Iterable[Edge] = (), dtype: DTypeLike = DEFAULT_DTYPE):
        self.weight_type = WeightType.of(dtype)
        super().__init__(
            Edge(int(e.source), int(e.target), self.weight_type.cast(e.weight)) for e in edges
        )

    @property
    def dtype(self) -> np.dtype:
        return self.weight_type.dtype

    def add(self, source: int, target: int, weight: Any = 1) -> None:
        """Append the arc ``(source, target, weight)``."""
        self.append(Edge(int(source), int(target), self.weight_type.cast(weight)))

    def copy(self) -> "Edges":
        return Edges(self, dtype=self.dtype)


def check_edge_vertices(edges: Iterable[Edge], vertex_count: int) -> None:
    """
    Validate every endpoint of ``edges`` against ``vertex_count``.

    Raises:
        InvalidVertexIndex: On the first out-of-range endpoint.
    """
    for e in edges:
        check_vertex(e.source, vertex_count)
        check_vertex(e.target, vertex_count)


def weight_type_of(edges: List[Edge]) -> WeightType:
    """
    Return the weight type of an edge collection.

    :class:`Edges` carry their own; for a plain list of Edge the dtype is
    inferred from the weights (``int64`` when empty).
    """
    if isinstance(edges, Edges):
        return edges.weight_type
    if not edges:
        return WeightType.of(DEFAULT_DTYPE)
    return WeightType.of(np.result_type(*(e.weight for e in edges)))


class Graph:
    """
    Weighted graph with adjacency-list representation.

    Undirected connections are stored as a pair of opposite arcs, so every
    algorithm sees a directed graph.

    Attributes:
        adj: Adjacency lists, ``adj[v]`` holding the arcs whose source is ``v``.
        weight_type: Weight dtype wrapper.

    Complexity:
        - add_edge / add_arc: O(1) amortized
        - edges: O(V + E)
    """

    def __init__(self, vertex_count: int, dtype: DTypeLike = DEFAULT_DTYPE):
        """
        Initialize a graph with ``vertex_count`` isolated vertices.

        Args:
            vertex_count: Number of vertices, ids ``0 .. vertex_count-1``.
            dtype: Weight dtype (default ``int64``).

        Raises:
            GraphError: If ``vertex_count`` is negative or not an integer.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, (int, np.integer)):
            raise GraphError(f"vertex_count must be an integer, got {vertex_count!r}")
        if vertex_count < 0:
            raise GraphError(f"vertex_count must be non-negative, got {vertex_count}")
        self.weight_type = WeightType.of(dtype)
        self.adj: List[List[Edge]] = [[] for _ in range(int(vertex_count))]

    @property
    def dtype(self) -> np.dtype:
        return self.weight_type.dtype

    @property
    def vertex_count(self) -> int:
        return len(self.adj)

    @property
    def edge_count(self) -> int:
        """Number of stored arcs (an undirected edge counts twice)."""
        return sum(len(arcs) for arcs in self.adj)

    def __len__(self) -> int:
        return len(self.adj)

    def __getitem__(self, vertex: int) -> List[Edge]:
        check_vertex(vertex, len(self.adj))
        return self.adj[vertex]

    def __iter__(self) -> Iterator[List[Edge]]:
        return iter(self.adj)

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self.vertex_count}, edge_count={self.edge_count}, dtype={self.dtype})"

    def add_edge(self, source: int, target: int, weight: Any = 1) -> None:
        """
        Add an undirected edge between ``source`` and ``target``.

        Appends ``(source, target, w)`` to ``adj[source]`` and
        ``(target, source, w)`` to ``adj[target]``.

        Raises:
            InvalidVertexIndex: If either endpoint is out of range.
        """
        check_vertex(source, len(self.adj))
        check_vertex(target, len(self.adj))
        w = self.weight_type.cast(weight)
        self.adj[source].append(Edge(int(source), int(target), w))
        self.adj[target].append(Edge(int(target), int(source), w))

    def add_arc(self, source: int, target: int, weight: Any = 1) -> None:
        """
        Add a directed arc from ``source`` to ``target``.

        Raises:
            InvalidVertexIndex: If either endpoint is out of range.
        """
        check_vertex(source, len(self.adj))
        check_vertex(target, len(self.adj))
        self.adj[source].append(Edge(int(source), int(target), self.weight_type.cast(weight)))

    def edges(self) -> Edges:
        """Return every stored arc, ordered by source vertex then insertion."""
        return Edges((e for arcs in self.adj for e in arcs), dtype=self.dtype)


def add_edge(graph: Graph, source: int, target: int, weight: Any = 1) -> None:
    """Insert an undirected edge into ``graph`` (see :meth:`Graph.add_edge`)."""
    graph.add_edge(source, target, weight)


def add_arc(graph: Graph, source: int, target: int, weight: Any = 1) -> None:
    """Insert a directed arc into ``graph`` (see :meth:`Graph.add_arc`)."""
    graph.add_arc(source, target, weight)


def add_to_edges(edges: List[Edge], source: int, target: int, weight: Any = 1) -> None:
    """
    Append the arc ``(source, target, weight)`` to a flat edge collection.

    An :class:`Edges` casts the weight to its dtype. A plain list stores
    ``weight`` as given.
    """
    if isinstance(edges, Edges):
        edges.add(source, target, weight)
    else:
        edges.append(Edge(int(source), int(target), weight))
