"""
Unit tests for SimpleDijkstraEngine using AdjacencyListGraph.
"""

import math

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import SimpleDijkstraEngine, dijkstra


def test_dijkstra_basic_paths():
    # A -> B (1), A -> C (4), B -> C (2)
    g = AdjacencyListGraph.from_edges(
        ["A", "B", "C"], [("A", "B", 1), ("A", "C", 4), ("B", "C", 2)]
    )

    engine = SimpleDijkstraEngine()
    dist, prev = engine.shortest_paths(g, "A")

    assert dist["A"] == 0
    assert dist["B"] == 1
    # Shortest A->C is A->B->C with cost 3
    assert dist["C"] == 3
    assert prev == {"B": "A", "C": "B"}


def test_dijkstra_unreachable_vertex_is_infinite():
    g = AdjacencyListGraph.from_edges(["A", "B", "C"], [("A", "B", 2)])

    dist, prev = dijkstra(g, "A")

    assert dist["A"] == 0
    assert dist["B"] == 2
    # Unreachable vertex keeps the infinite sentinel and has no parent
    assert dist["C"] == math.inf
    assert "C" not in prev
    assert "A" not in prev


def test_shortest_path_costs_matches_shortest_paths():
    g = AdjacencyListGraph.from_edges(
        ["A", "B", "C", "D"],
        [("A", "B", 1), ("A", "C", 4), ("B", "C", 2), ("B", "D", 5), ("C", "D", 1)],
    )
    engine = SimpleDijkstraEngine()

    costs = engine.shortest_path_costs(g, "A")
    dist, _ = engine.shortest_paths(g, "A")

    assert dict(costs) == dict(dist) == {"A": 0, "B": 1, "C": 3, "D": 4}


def test_dijkstra_is_repeatable():
    g = AdjacencyListGraph.from_edges(
        ["A", "B", "C"], [("A", "B", 2), ("A", "C", 1), ("C", "B", 1), ("B", "A", 3)]
    )

    first = dijkstra(g, "A")
    second = dijkstra(g, "A")

    assert dict(first[0]) == dict(second[0])
    assert dict(first[1]) == dict(second[1])


def test_returned_maps_are_read_only():
    g = AdjacencyListGraph.from_edges(["A", "B"], [("A", "B", 1)])
    dist, prev = dijkstra(g, "A")

    with pytest.raises(TypeError):
        dist["B"] = 0  # type: ignore[index]
    with pytest.raises(TypeError):
        prev["B"] = "B"  # type: ignore[index]


def test_zero_weight_edges():
    g = AdjacencyListGraph.from_edges(["A", "B", "C"], [("A", "B", 0), ("B", "C", 0)])

    dist, prev = dijkstra(g, "A")

    assert dist == {"A": 0, "B": 0, "C": 0}
    assert prev == {"B": "A", "C": "B"}


def test_unknown_source_rejected():
    g = AdjacencyListGraph.from_edges(["A", "B"], [("A", "B", 1)])

    with pytest.raises(ValueError):
        dijkstra(g, "Z")
