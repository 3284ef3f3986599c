"""
Graph algorithms package for graphclassics.

This package provides classical textbook graph algorithms over dense integer
vertex ids and a NumPy weight dtype:
- Graph data structures (Graph, Edges, Edge)
- Single-source shortest paths (Dijkstra, Bellman-Ford)
- All-pairs shortest paths (Floyd-Warshall, incremental edge insertion)
- Minimum spanning forest (Kruskal, with UnionFind)
- Topological sort and bipartiteness (iterative DFS)
"""

from .allpairs import add_arc_to_matrix, add_edge_to_matrix, has_negative_cycle, warshall_floyd
from .core import Edge, Edges, Graph, add_arc, add_edge, add_to_edges
from .mst import kruskal
from .shortest import bellman_ford, dijkstra
from .traversal import (
    bipartite_coloring,
    bipartite_partition_size,
    is_bipartite_graph,
    topological_sort,
)
from .unionfind import UnionFind
from .utils import edges_from_graph, graph_from_edges, reverse_graph

__all__ = [
    "Edge",
    "Edges",
    "Graph",
    "add_edge",
    "add_arc",
    "add_to_edges",
    "UnionFind",
    "dijkstra",
    "bellman_ford",
    "warshall_floyd",
    "add_edge_to_matrix",
    "add_arc_to_matrix",
    "has_negative_cycle",
    "kruskal",
    "topological_sort",
    "is_bipartite_graph",
    "bipartite_coloring",
    "bipartite_partition_size",
    "graph_from_edges",
    "edges_from_graph",
    "reverse_graph",
]
