"""
Directed, weighted graph abstraction.

Vertices are string labels.
Edges are directed: u -> v with a non-negative integer weight.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Mapping, Tuple

Vertex = str


class Graph(ABC):
    """Directed, weighted graph over string vertices."""

    @abstractmethod
    def vertices(self) -> Iterable[Vertex]:
        """Return all vertices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, vertex: Vertex) -> Mapping[Vertex, int]:
        """
        Outgoing neighbours and edge weights for a given vertex.

        Returns: mapping destination -> weight, in insertion order.
        """
        raise NotImplementedError

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, int]]:
        """Yield every edge as (src, dst, weight)."""
        for src in self.vertices():
            for dst, weight in self.outgoing(src).items():
                yield src, dst, weight

    def edge_count(self) -> int:
        return sum(len(self.outgoing(v)) for v in self.vertices())

    def __len__(self) -> int:
        return sum(1 for _ in self.vertices())

    def __contains__(self, vertex: object) -> bool:
        return any(v == vertex for v in self.vertices())
