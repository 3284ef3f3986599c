"""
Example: Classical Graph Algorithms in graphclassics

Builds a small road network and walks through the library: single-source
distances, all-pairs distances with incremental road openings, a minimum
spanning forest for cabling, a dependency ordering and a bipartiteness check.
"""

import numpy as np

from graphclassics import (
    Edges,
    Graph,
    add_edge_to_matrix,
    bellman_ford,
    dijkstra,
    is_bipartite_graph,
    is_unreachable,
    kruskal,
    topological_sort,
    warshall_floyd,
)

TOWNS = ["Ashby", "Brook", "Carlow", "Dunmore", "Elton"]
ROADS = [(0, 1, 7), (0, 2, 9), (1, 2, 10), (1, 3, 15), (2, 3, 11)]


def example_shortest_paths():
    """Example: Distances from one town."""
    print("=" * 60)
    print("Example 1: Single-source shortest paths")
    print("=" * 60)

    g = Graph(len(TOWNS))
    edges = Edges()
    for a, b, km in ROADS:
        g.add_edge(a, b, km)
        edges.add(a, b, km)
        edges.add(b, a, km)

    dist = dijkstra(g, 0)
    for town, d, unreachable in zip(TOWNS, dist, is_unreachable(dist)):
        print(f"  {TOWNS[0]} -> {town}: {'unreachable' if unreachable else int(d)}")

    same = np.array_equal(dist, bellman_ford(edges, len(TOWNS), 0))
    print(f"Bellman-Ford agrees: {same}")
    print()


def example_all_pairs():
    """Example: All-pairs distances kept current while roads open."""
    print("=" * 60)
    print("Example 2: All-pairs shortest paths with a new road")
    print("=" * 60)

    g = Graph(len(TOWNS))
    for a, b, km in ROADS:
        g.add_edge(a, b, km)

    matrix = warshall_floyd(g)
    print(f"Dunmore -> Elton reachable: {not is_unreachable(matrix[3][4])}")

    add_edge_to_matrix(matrix, 3, 4, 6)
    print(f"After opening Dunmore-Elton, Ashby -> Elton: {int(matrix[0][4])} km")
    print()


def example_spanning_forest():
    """Example: Cheapest cabling connecting every town."""
    print("=" * 60)
    print("Example 3: Minimum spanning forest")
    print("=" * 60)

    edges = Edges()
    for a, b, km in ROADS:
        edges.add(a, b, km)

    total = kruskal(edges.copy(), len(TOWNS))
    print(f"Cable needed: {int(total)} km (Elton stays isolated)")
    print()


def example_ordering():
    """Example: Build order of dependent tasks."""
    print("=" * 60)
    print("Example 4: Topological order and bipartiteness")
    print("=" * 60)

    tasks = ["survey", "permit", "grade", "pave"]
    deps = Graph(len(tasks))
    deps.add_arc(0, 1)
    deps.add_arc(0, 2)
    deps.add_arc(1, 3)
    deps.add_arc(2, 3)

    ok, order = topological_sort(deps)
    print(f"Schedulable: {ok}")
    print(f"Order: {' -> '.join(tasks[v] for v in order)}")

    g = Graph(len(TOWNS))
    for a, b, km in ROADS:
        g.add_edge(a, b, km)
    print(f"Road network bipartite: {is_bipartite_graph(g)}")
    print()


if __name__ == "__main__":
    example_shortest_paths()
    example_all_pairs()
    example_spanning_forest()
    example_ordering()
    print("All examples completed.")
