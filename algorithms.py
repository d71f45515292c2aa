"""
Algorithm interfaces for shortest-path computation.

Keeps graph algorithms separate from graph generation and reporting.
"""

from abc import ABC, abstractmethod
from typing import Mapping

from graph import Graph, Vertex


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: Vertex) -> Mapping[Vertex, float]:
        """
        Compute shortest-path costs from source to every vertex of the graph.

        Returns:
            Mapping vertex -> path_cost(source -> vertex); math.inf when unreachable.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: Vertex
    ) -> tuple[Mapping[Vertex, float], Mapping[Vertex, Vertex]]:
        """
        Compute shortest-path costs plus the predecessor chain for each vertex.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError
