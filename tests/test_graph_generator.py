"""
Tests for generate_graph: edge counts, simplicity, weights and strong connectivity.
"""

import itertools

import pytest

from graph_generator import MAX_WEIGHT, MIN_WEIGHT, generate_graph, max_edge_count
from metrics import shortest_path


@pytest.mark.parametrize(
    "n,s",
    [(2, 0), (2, 2), (5, 3), (5, 5), (10, 15), (10, 40), (4, 12)],
)
def test_vertex_and_edge_counts(n, s):
    g = generate_graph(n, s, seed=n * 100 + s)

    assert sorted(g.vertices(), key=int) == [str(i) for i in range(1, n + 1)]
    assert g.edge_count() == max(s, n)


def test_no_self_loops_or_duplicate_edges():
    g = generate_graph(12, 60, seed=3)

    pairs = [(src, dst) for src, dst, _ in g.edges()]
    assert all(src != dst for src, dst in pairs)
    assert len(pairs) == len(set(pairs))


def test_weights_within_bounds():
    g = generate_graph(15, 80, seed=11)

    assert all(MIN_WEIGHT <= w <= MAX_WEIGHT for _, _, w in g.edges())


@pytest.mark.parametrize("seed", range(5))
def test_generated_graph_is_strongly_connected(seed):
    g = generate_graph(8, 8, seed=seed)

    for u, v in itertools.permutations(g.vertices(), 2):
        assert shortest_path(g, u, v) is not None


def test_cycle_gives_every_vertex_an_outgoing_edge():
    g = generate_graph(9, 0, seed=5)

    assert all(len(g.outgoing(v)) == 1 for v in g.vertices())


def test_same_seed_reproduces_graph():
    assert generate_graph(10, 25, seed=42) == generate_graph(10, 25, seed=42)


def test_complete_graph_at_capacity():
    g = generate_graph(4, max_edge_count(4), seed=1)

    assert g.edge_count() == 12
    for u, v in itertools.permutations(g.vertices(), 2):
        assert v in g.outgoing(u)


def test_single_vertex_has_no_edges():
    g = generate_graph(1, 0)

    assert list(g.vertices()) == ["1"]
    assert g.edge_count() == 0


@pytest.mark.parametrize("n", [0, -1, -10])
def test_non_positive_vertex_count_rejected(n):
    with pytest.raises(ValueError):
        generate_graph(n, 5)


def test_negative_edge_count_rejected():
    with pytest.raises(ValueError):
        generate_graph(3, -1)


@pytest.mark.parametrize("n,s", [(1, 1), (2, 3), (4, 13)])
def test_edge_count_above_capacity_rejected(n, s):
    with pytest.raises(ValueError):
        generate_graph(n, s)
