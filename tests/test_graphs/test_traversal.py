"""Tests for DFS-based traversal algorithms."""

import sys

import pytest

from graphclassics.graphs import (
    Graph,
    bipartite_coloring,
    bipartite_partition_size,
    is_bipartite_graph,
    topological_sort,
)


def assert_valid_order(graph, order):
    position = {v: i for i, v in enumerate(order)}
    assert sorted(order) == list(range(graph.vertex_count))
    for arcs in graph:
        for e in arcs:
            assert position[e.source] < position[e.target]


def cycle_graph(n):
    g = Graph(n)
    for i in range(n):
        g.add_edge(i, (i + 1) % n)
    return g


class TestTopologicalSort:
    """Tests for topological sort."""

    def test_topological_sort_chain(self):
        """Test a simple chain."""
        g = Graph(3)
        g.add_arc(0, 1)
        g.add_arc(1, 2)

        assert topological_sort(g) == (True, [0, 1, 2])

    def test_topological_sort_deterministic(self):
        """Test the order matches the recursive DFS formulation."""
        g = Graph(3)
        g.add_arc(2, 0)
        g.add_arc(0, 1)

        assert topological_sort(g) == (True, [2, 0, 1])

    def test_topological_sort_diamond(self):
        """Test a diamond DAG."""
        g = Graph(4)
        g.add_arc(0, 1)
        g.add_arc(0, 2)
        g.add_arc(1, 3)
        g.add_arc(2, 3)

        ok, order = topological_sort(g)
        assert ok
        assert order == [0, 2, 1, 3]
        assert_valid_order(g, order)

    def test_topological_sort_isolated_vertices(self):
        """Test vertices without arcs still appear."""
        ok, order = topological_sort(Graph(3))
        assert ok
        assert order == [2, 1, 0]

    def test_topological_sort_empty(self):
        """Test a graph without vertices."""
        assert topological_sort(Graph(0)) == (True, [])

    def test_topological_sort_cycle(self):
        """Test a directed cycle is reported."""
        g = Graph(3)
        g.add_arc(0, 1)
        g.add_arc(1, 2)
        g.add_arc(2, 0)

        ok, _ = topological_sort(g)
        assert ok is False

    def test_topological_sort_self_loop(self):
        """Test a self loop is a cycle."""
        g = Graph(2)
        g.add_arc(1, 1)
        ok, _ = topological_sort(g)
        assert ok is False

    def test_topological_sort_cycle_in_later_root(self):
        """Test a cycle reachable only from a later root aborts the sort."""
        g = Graph(4)
        g.add_arc(0, 1)
        g.add_arc(2, 3)
        g.add_arc(3, 2)

        ok, _ = topological_sort(g)
        assert ok is False

    def test_topological_sort_undirected_edge_is_cycle(self):
        """Test that an undirected edge (two opposite arcs) is a cycle."""
        g = Graph(2)
        g.add_edge(0, 1)
        assert topological_sort(g)[0] is False

    def test_topological_sort_random_dag(self, rng):
        """Test validity on random DAGs built from a hidden permutation."""
        n = 30
        perm = rng.permutation(n)
        g = Graph(n)
        for _ in range(80):
            i, j = sorted(int(x) for x in rng.choice(n, size=2, replace=False))
            g.add_arc(int(perm[i]), int(perm[j]))

        ok, order = topological_sort(g)
        assert ok
        assert_valid_order(g, order)

    def test_topological_sort_deep_chain(self):
        """Test a chain deeper than the recursion limit."""
        n = sys.getrecursionlimit() + 500
        g = Graph(n)
        for i in range(n - 1):
            g.add_arc(i, i + 1)

        ok, order = topological_sort(g)
        assert ok
        assert order == list(range(n))


class TestBipartite:
    """Tests for bipartiteness checks."""

    def test_even_cycle(self):
        """Test a 4-cycle is bipartite."""
        assert is_bipartite_graph(cycle_graph(4)) is True

    def test_odd_cycle(self):
        """Test a triangle is not bipartite."""
        assert is_bipartite_graph(cycle_graph(3)) is False

    def test_single_vertex(self):
        """Test trivial graphs."""
        assert is_bipartite_graph(Graph(1))
        assert is_bipartite_graph(Graph(0))

    def test_coloring_alternates(self):
        """Test colours alternate along a path starting with +1 at vertex 0."""
        g = Graph(4)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        g.add_edge(2, 3)

        assert bipartite_coloring(g) == [1, -1, 1, -1]

    def test_coloring_none_for_odd_cycle(self):
        """Test no colouring exists for an odd cycle."""
        assert bipartite_coloring(cycle_graph(5)) is None

    def test_disconnected_odd_cycle_detected(self):
        """Test an odd cycle in a component not containing vertex 0."""
        g = Graph(5)
        g.add_edge(0, 1)
        g.add_edge(2, 3)
        g.add_edge(3, 4)
        g.add_edge(4, 2)

        assert is_bipartite_graph(g) is False

    def test_disconnected_bipartite(self):
        """Test every component gets coloured."""
        g = Graph(4)
        g.add_edge(0, 1)
        g.add_edge(2, 3)

        assert bipartite_coloring(g) == [1, -1, 1, -1]

    def test_partition_size(self):
        """Test the size of the +1 side."""
        g = Graph(4)
        g.add_edge(0, 1)
        g.add_edge(0, 2)
        g.add_edge(0, 3)

        assert bipartite_partition_size(g) == 1

    def test_partition_size_not_bipartite(self):
        """Test -1 for non-bipartite graphs."""
        assert bipartite_partition_size(cycle_graph(3)) == -1

    def test_self_loop_not_bipartite(self):
        """Test a self loop can never be 2-coloured."""
        g = Graph(2)
        g.add_edge(0, 0)
        assert not is_bipartite_graph(g)

    @pytest.mark.parametrize("n", [10, 11])
    def test_long_cycle(self, n):
        """Test long cycles by parity."""
        assert is_bipartite_graph(cycle_graph(n)) == (n % 2 == 0)

    def test_deep_path(self):
        """Test a path deeper than the recursion limit."""
        n = sys.getrecursionlimit() + 500
        g = Graph(n)
        for i in range(n - 1):
            g.add_edge(i, i + 1)
        assert is_bipartite_graph(g)
