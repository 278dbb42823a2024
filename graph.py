"""
Undirected, weighted graph abstraction for location routing.

Nodes are dense integer indices in [0, node_count).
Edges are undirected: (u, v) with a non-negative weight.
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Iterable, Sequence, Tuple, Union

from errors import InvalidArgument, OutOfRange

Weight = Union[int, float]
Edge = Tuple[int, int, Weight]


def check_index(node: object, node_count: int, role: str = "node") -> int:
    """
    Return node as an int index in [0, node_count).

    Raises InvalidArgument for a non-integer (bool included) and OutOfRange
    for an integer outside the range.
    """
    if isinstance(node, bool) or not isinstance(node, Integral):
        raise InvalidArgument(f"{role} index must be an integer, got {node!r}")
    if not 0 <= node < node_count:
        raise OutOfRange(f"{role} {node} outside [0, {node_count})")
    return int(node)


class Graph(ABC):
    """Undirected, weighted graph over integer node indices."""

    @property
    @abstractmethod
    def node_count(self) -> int:
        """Number of nodes fixed at construction."""
        raise NotImplementedError

    def nodes(self) -> Iterable[int]:
        """Return all node indices in the graph."""
        return range(self.node_count)

    @abstractmethod
    def incident(self, node: int) -> Sequence[Tuple[int, Weight]]:
        """
        Incident edges of a node as (neighbor, weight) pairs.

        Order is insertion order; multi-edges appear once per insertion.
        """
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Iterable[Edge]:
        """Every inserted edge exactly once, as (u, v, weight)."""
        raise NotImplementedError
