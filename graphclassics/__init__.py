"""graphclassics - classical graph algorithms over weight-generic graphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    GraphError,
    InvalidVertexIndex,
    InvariantViolation,
    NegativeWeightUnsupported,
    WeightTypeError,
)

# Graph algorithms
from .graphs import (
    Edge,
    Edges,
    Graph,
    UnionFind,
    add_arc,
    add_arc_to_matrix,
    add_edge,
    add_edge_to_matrix,
    add_to_edges,
    bellman_ford,
    bipartite_coloring,
    bipartite_partition_size,
    dijkstra,
    edges_from_graph,
    graph_from_edges,
    has_negative_cycle,
    is_bipartite_graph,
    kruskal,
    reverse_graph,
    topological_sort,
    warshall_floyd,
)

# Weight types
from .weights import WeightType, infinity_for, is_unreachable

__all__ = [
    # Version
    "__version__",
    # Data model
    "Edge",
    "Edges",
    "Graph",
    "add_edge",
    "add_arc",
    "add_to_edges",
    "WeightType",
    "infinity_for",
    "is_unreachable",
    "UnionFind",
    # Shortest paths
    "dijkstra",
    "bellman_ford",
    "warshall_floyd",
    "add_edge_to_matrix",
    "add_arc_to_matrix",
    "has_negative_cycle",
    # Spanning trees
    "kruskal",
    # Traversal
    "topological_sort",
    "is_bipartite_graph",
    "bipartite_coloring",
    "bipartite_partition_size",
    # Utilities
    "graph_from_edges",
    "edges_from_graph",
    "reverse_graph",
    # Errors
    "GraphError",
    "InvalidVertexIndex",
    "NegativeWeightUnsupported",
    "WeightTypeError",
    "InvariantViolation",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
