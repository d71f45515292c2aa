"""
Distance-based graph metrics built on single-source Dijkstra.

Each call runs a fresh Dijkstra; nothing is cached between calls, so radius
and diameter cost V independent runs, O(V (V + E) log V) in total.
"""

import math
from typing import List, Optional, Tuple

from algorithms import DijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine
from graph import Graph, Vertex
from paths import reconstruct_path


def shortest_path(
    graph: Graph,
    source: Vertex,
    target: Vertex,
    engine: Optional[DijkstraEngine] = None,
) -> Optional[Tuple[List[Vertex], int]]:
    """
    Shortest path from source to target with its total weight.

    Returns None if target is unreachable from source.
    """
    engine = engine or SimpleDijkstraEngine()
    dist, prev = engine.shortest_paths(graph, source)
    cost = dist.get(target, math.inf)
    if cost == math.inf:
        return None
    return reconstruct_path(prev, source, target), cost


def eccentricity(
    graph: Graph, source: Vertex, engine: Optional[DijkstraEngine] = None
) -> Optional[int]:
    """
    Largest shortest-path distance from source to any vertex.

    Returns None if any vertex of the graph is unreachable from source.
    """
    engine = engine or SimpleDijkstraEngine()
    dist = engine.shortest_path_costs(graph, source)
    if any(d == math.inf for d in dist.values()):
        return None
    return max(dist.values())


def _eccentricities(graph: Graph, engine: Optional[DijkstraEngine]) -> List[int]:
    engine = engine or SimpleDijkstraEngine()
    eccs = [eccentricity(graph, v, engine) for v in graph.vertices()]
    return [e for e in eccs if e is not None]


def radius(graph: Graph, engine: Optional[DijkstraEngine] = None) -> Optional[int]:
    """Minimum defined eccentricity, or None if there is none."""
    eccs = _eccentricities(graph, engine)
    return min(eccs) if eccs else None


def diameter(graph: Graph, engine: Optional[DijkstraEngine] = None) -> Optional[int]:
    """Maximum defined eccentricity, or None if there is none."""
    eccs = _eccentricities(graph, engine)
    return max(eccs) if eccs else None
