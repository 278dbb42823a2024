"""
Algorithm interfaces for location routing.

Keeps graph algorithms separate from query wiring and map loading.
"""

from abc import ABC, abstractmethod
from typing import List

from graph import Graph, Weight
from path_tree import ShortestPathTree


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    def shortest_path_costs(self, graph: Graph, source: int) -> List[Weight]:
        """
        Compute shortest-path costs from source to every node.

        Returns:
            List indexed by node; unreachable nodes hold path_tree.INFINITY.
        """
        return list(self.shortest_paths(graph, source).distances)

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathTree:
        """
        Compute shortest-path costs plus the predecessor chain for each node.

        Returns:
            A ShortestPathTree holding the final distance and predecessor tables.
        """
        raise NotImplementedError
