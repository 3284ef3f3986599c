"""Benchmark incremental all-pairs updates against full recomputation."""

import time
from typing import Dict

import numpy as np

from graphclassics.graphs import Graph, add_edge_to_matrix, warshall_floyd


def random_graph(n_vertices: int, n_edges: int, seed: int = 0) -> Graph:
    """Build a random undirected graph with integer weights in [1, 100)."""
    rng = np.random.default_rng(seed)
    g = Graph(n_vertices)
    for _ in range(n_edges):
        u, v = rng.integers(0, n_vertices, size=2)
        g.add_edge(int(u), int(v), int(rng.integers(1, 100)))
    return g


def benchmark_insertions(
    n_vertices: int,
    n_edges: int = 1000,
    n_insertions: int = 20,
    seed: int = 0,
) -> Dict[str, float]:
    """Time ``n_insertions`` edge insertions both ways.

    Args:
        n_vertices: Number of vertices.
        n_edges: Number of edges in the initial graph.
        n_insertions: Number of edges inserted afterwards.
        seed: RNG seed.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed + 1)
    g = random_graph(n_vertices, n_edges, seed)
    matrix = warshall_floyd(g)
    new_edges = [
        (int(rng.integers(0, n_vertices)), int(rng.integers(0, n_vertices)), int(rng.integers(1, 100)))
        for _ in range(n_insertions)
    ]

    start = time.perf_counter()
    for a, b, w in new_edges:
        add_edge_to_matrix(matrix, a, b, w)
    incremental = time.perf_counter() - start

    start = time.perf_counter()
    for a, b, w in new_edges:
        g.add_edge(a, b, w)
        full = warshall_floyd(g)
    recompute = time.perf_counter() - start

    if not np.array_equal(matrix, full):
        raise RuntimeError("incremental update diverged from recomputation")

    return {
        "n_vertices": n_vertices,
        "n_insertions": n_insertions,
        "incremental_sec": incremental,
        "recompute_sec": recompute,
        "speedup": recompute / incremental,
    }


if __name__ == "__main__":
    print("Benchmarking all-pairs edge insertion...")

    for n in (50, 100, 200):
        results = benchmark_insertions(n_vertices=n)
        print(f"V={n}:")
        print(f"  Incremental: {results['incremental_sec']*1e3:.2f} ms")
        print(f"  Recompute:   {results['recompute_sec']*1e3:.2f} ms")
        print(f"  Speedup:     {results['speedup']:.1f}x")
