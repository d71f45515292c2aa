"""
Concrete directed, weighted graph implementation.

AdjacencyListGraph is the frozen graph handed to callers. GraphBuilder is the
mutable scratch structure used while a graph is being assembled.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from graph import Graph, Vertex


class AdjacencyListGraph(Graph):
    """
    Immutable directed, weighted graph backed by a vertex -> (neighbour -> weight) mapping.

    Raises:
        ValueError: on dangling edges, self-loops or negative/non-integer weights.
    """

    def __init__(self, adjacency: Mapping[Vertex, Mapping[Vertex, int]]) -> None:
        adj: Dict[Vertex, Mapping[Vertex, int]] = {}
        for src, neighbours in adjacency.items():
            for dst, weight in neighbours.items():
                if dst not in adjacency:
                    raise ValueError(f"Edge {src} -> {dst} points at an unknown vertex.")
                if dst == src:
                    raise ValueError(f"Self-loop on vertex {src} is not allowed.")
                if isinstance(weight, bool) or not isinstance(weight, int):
                    raise ValueError(f"Edge {src} -> {dst} has non-integer weight {weight!r}.")
                if weight < 0:
                    raise ValueError(f"Edge {src} -> {dst} has negative weight {weight}.")
            adj[src] = MappingProxyType(dict(neighbours))
        self._adj = adj

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Vertex],
        edges: Iterable[Tuple[Vertex, Vertex, int]],
    ) -> "AdjacencyListGraph":
        """Build a graph from a vertex list plus (src, dst, weight) triples."""
        builder = GraphBuilder()
        for v in vertices:
            builder.add_vertex(v)
        for src, dst, weight in edges:
            builder.add_edge(src, dst, weight)
        return builder.freeze()

    # --- Graph interface -----------------------------------------------------

    def vertices(self) -> Iterable[Vertex]:
        return self._adj.keys()

    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        return self._adj.get(vertex, MappingProxyType({}))

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyListGraph):
            return NotImplemented
        return {k: dict(v) for k, v in self._adj.items()} == {
            k: dict(v) for k, v in other._adj.items()
        }

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(vertices={len(self)}, edges={self.edge_count()})"


class GraphBuilder:
    """
    Mutable adjacency list used while assembling a graph; freeze() hands out the result.
    """

    def __init__(self) -> None:
        self._adj: Dict[Vertex, Dict[Vertex, int]] = {}
        self._edges = 0

    def add_vertex(self, vertex: Vertex) -> None:
        """Ensure vertex exists in the graph."""
        self._adj.setdefault(vertex, {})

    def add_edge(self, src: Vertex, dst: Vertex, weight: int) -> None:
        """
        Add or update a directed edge src -> dst with weight.
        Auto-adds vertices if they don't exist.
        """
        self.add_vertex(src)
        self.add_vertex(dst)
        if dst not in self._adj[src]:
            self._edges += 1
        self._adj[src][dst] = weight

    def has_edge(self, src: Vertex, dst: Vertex) -> bool:
        return dst in self._adj.get(src, {})

    def edge_count(self) -> int:
        return self._edges

    def freeze(self) -> AdjacencyListGraph:
        return AdjacencyListGraph(self._adj)
