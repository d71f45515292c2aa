"""
Random strongly-connected digraph generation.

Vertices are labelled "1".."n". A random Hamiltonian cycle guarantees strong
connectivity; extra edges are added by rejection sampling until the edge
target is met.
"""

from typing import List, Optional
import random

from adjacency_list_graph import AdjacencyListGraph, GraphBuilder
from graph import Vertex


MIN_WEIGHT = 1
MAX_WEIGHT = 10


def max_edge_count(vertex_count: int) -> int:
    """Number of ordered pairs of distinct vertices, i.e. edges in a complete digraph."""
    return vertex_count * (vertex_count - 1)


def generate_graph(
    vertex_count: int,
    edge_count: int,
    seed: Optional[int] = None,
) -> AdjacencyListGraph:
    """
    Generate a strongly-connected directed graph with integer edge weights.

    How it works:
    - Label vertices "1".."vertex_count" and shuffle them into a random order.
    - Link the shuffled order into a directed cycle (last points back to first)
      so every vertex reaches every other one.
    - Keep drawing ordered (src, dst) pairs and add the ones that are not
      self-loops or existing edges until the edge target is reached.
    - Every edge gets an independent weight drawn uniformly from
      [MIN_WEIGHT, MAX_WEIGHT].
    - If seed is provided, rng draws are deterministic for reproducibility.

    The edge target is max(edge_count, vertex_count), since the cycle alone
    needs vertex_count edges. A single vertex has no cycle edge, so it yields
    a graph without edges.

    Args:
        vertex_count: Number of vertices, must be positive.
        edge_count: Requested number of edges, silently raised to vertex_count.
        seed: Optional RNG seed to reproduce a particular graph.

    Returns:
        Frozen AdjacencyListGraph.

    Raises:
        ValueError: if vertex_count is not positive, edge_count is negative, or
            edge_count exceeds vertex_count * (vertex_count - 1).
    """
    if vertex_count <= 0:
        raise ValueError("Number of vertices must be positive.")
    if edge_count < 0:
        raise ValueError("Number of edges must be non-negative.")
    capacity = max_edge_count(vertex_count)
    if edge_count > capacity:
        raise ValueError(
            f"A graph with {vertex_count} vertices holds at most {capacity} edges, "
            f"got {edge_count}."
        )
    target = min(max(edge_count, vertex_count), capacity)

    rng = random.Random(seed)
    vertices: List[Vertex] = [str(i) for i in range(1, vertex_count + 1)]
    builder = GraphBuilder()
    for v in vertices:
        builder.add_vertex(v)

    if vertex_count > 1:
        permuted = list(vertices)
        rng.shuffle(permuted)
        for src, dst in zip(permuted, permuted[1:] + permuted[:1]):
            builder.add_edge(src, dst, _random_weight(rng))

    while builder.edge_count() < target:
        src = rng.choice(vertices)
        dst = rng.choice(vertices)
        if src == dst or builder.has_edge(src, dst):
            continue
        builder.add_edge(src, dst, _random_weight(rng))

    return builder.freeze()


def _random_weight(rng: random.Random) -> int:
    return rng.randint(MIN_WEIGHT, MAX_WEIGHT)
