"""Post-condition checks for graph algorithm results."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from ..exceptions import InvariantViolation


def assert_shortest_distances(
    arcs: Iterable[Any],
    dist: np.ndarray,
    source: int,
    infinity: Any,
) -> None:
    """
    Assert that ``dist`` is a fixed point of edge relaxation.

    Parameters
    ----------
    arcs:
        Iterable of Edge-like objects with ``source``, ``target`` and
        ``weight`` attributes.
    dist:
        Distance array produced by a single-source algorithm.
    source:
        The source vertex the distances were computed from.
    infinity:
        The unreachable sentinel for the distance dtype.

    Raises
    ------
    InvariantViolation
        If ``dist[source]`` is not zero or some arc can still be relaxed.
    """
    if dist[source] != 0:
        raise InvariantViolation(f"Distance to source {source} is {dist[source]}, expected 0")

    for arc in arcs:
        if dist[arc.source] == infinity:
            continue
        if dist[arc.source] + arc.weight < dist[arc.target]:
            raise InvariantViolation(
                f"Arc ({arc.source}, {arc.target}, {arc.weight}) can still be relaxed: "
                f"{dist[arc.source]} + {arc.weight} < {dist[arc.target]}"
            )


def assert_topological_order(graph: Sequence[Sequence[Any]], order: Sequence[int]) -> None:
    """
    Assert that ``order`` lists every vertex once with all arcs pointing forward.

    Raises
    ------
    InvariantViolation
        If a vertex is missing or repeated, or an arc points backwards.
    """
    n = len(graph)
    if sorted(order) != list(range(n)):
        raise InvariantViolation(f"Order {list(order)} is not a permutation of {n} vertices")

    position = [0] * n
    for idx, v in enumerate(order):
        position[v] = idx

    for v in range(n):
        for arc in graph[v]:
            if position[arc.source] >= position[arc.target]:
                raise InvariantViolation(
                    f"Arc ({arc.source}, {arc.target}) points backwards in topological order"
                )


def assert_proper_coloring(graph: Sequence[Sequence[Any]], colors: Sequence[int]) -> None:
    """
    Assert that no arc joins two vertices of the same colour.

    Raises
    ------
    InvariantViolation
        If an arc connects equally coloured vertices.
    """
    for v in range(len(graph)):
        for arc in graph[v]:
            if colors[arc.source] == colors[arc.target]:
                raise InvariantViolation(
                    f"Arc ({arc.source}, {arc.target}) joins two vertices coloured "
                    f"{colors[arc.source]}"
                )
