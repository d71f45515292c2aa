"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface. Edge weights must be
non-negative.
"""

from types import MappingProxyType
from typing import Dict, Mapping
import heapq
import math

from graph import Graph, Vertex
from algorithms import DijkstraEngine


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O((V + E) log V).
    """

    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Mapping[Vertex, float]:
        """
        Compute only the cost map from source.
        """
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> tuple[Mapping[Vertex, float], Mapping[Vertex, Vertex]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Every vertex of the graph appears in the distance map; vertices the
        source cannot reach keep math.inf. The predecessor map only holds
        reachable vertices other than the source, so walking parents back from
        any of them ends at the source. Both maps are read-only snapshots and
        nothing is shared between calls.

        Raises:
            ValueError: if source is not a vertex of graph.
        """
        if source not in graph:
            raise ValueError(f"Source vertex {source!r} is not in the graph.")

        dist: Dict[Vertex, float] = {v: math.inf for v in graph.vertices()}
        dist[source] = 0
        prev: Dict[Vertex, Vertex] = {}
        pq = [(0, source)]  # priority queue of (distance, vertex)

        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u > dist[u]:
                continue

            for v, w in graph.outgoing(u).items():
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        return MappingProxyType(dist), MappingProxyType(prev)


def dijkstra(
    graph: Graph, source: Vertex
) -> tuple[Mapping[Vertex, float], Mapping[Vertex, Vertex]]:
    """Run SimpleDijkstraEngine from source; see SimpleDijkstraEngine.shortest_paths."""
    return SimpleDijkstraEngine().shortest_paths(graph, source)
