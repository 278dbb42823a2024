"""
Concrete undirected, weighted graph implementation for location routing.

Implements the Graph interface using a per-node adjacency list. The graph is
append-only: edges are inserted and never removed or reweighted.
"""

from numbers import Integral, Real
from typing import Iterable, List, Optional, Tuple
import math

from errors import InvalidArgument
from graph import Edge, Graph, Weight, check_index


def _check_count(node_count: object) -> int:
    if isinstance(node_count, bool) or not isinstance(node_count, Integral):
        raise InvalidArgument(f"node count must be an integer, got {node_count!r}")
    if node_count < 0:
        raise InvalidArgument(f"node count must be >= 0, got {node_count}")
    return int(node_count)


def _check_weight(weight: object) -> Weight:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidArgument(f"edge weight must be a number, got {weight!r}")
    if isinstance(weight, Integral):
        weight = int(weight)
    else:
        weight = float(weight)
        if not math.isfinite(weight):
            raise InvalidArgument(f"edge weight must be finite, got {weight}")
    if weight < 0:
        raise InvalidArgument(f"edge weight must be >= 0, got {weight}")
    return weight


class AdjacencyListGraph(Graph):
    """
    Undirected, weighted graph backed by one list of (neighbor, weight)
    pairs per node.

    Adjacency is symmetric: add_edge(u, v, w) appends (v, w) to u's list and
    (u, w) to v's list. Multi-edges and self-loops are kept as inserted.
    """

    def __init__(self, node_count: int) -> None:
        self._node_count = _check_count(node_count)
        self._adj: List[List[Tuple[int, Weight]]] = [[] for _ in range(self._node_count)]
        self._edges: List[Edge] = []

    @classmethod
    def from_edges(cls, node_count: int, edges: Iterable[Edge]) -> "AdjacencyListGraph":
        """Build a graph and insert the given (u, v, weight) triples in order."""
        g = cls(node_count)
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    # --- Mutation API --------------------------------------------------------

    def add_edge(self, u: int, v: int, weight: Weight) -> None:
        """
        Insert an undirected edge u <-> v with the given weight.

        Raises OutOfRange for a bad index and InvalidArgument for a negative
        or non-finite weight. All checks run before anything is appended, so
        a rejected call leaves the graph untouched.
        """
        u = self.check_node(u)
        v = self.check_node(v)
        weight = _check_weight(weight)

        self._adj[u].append((v, weight))
        self._adj[v].append((u, weight))
        self._edges.append((u, v, weight))

    # --- Graph interface -----------------------------------------------------

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def incident(self, node: int) -> Tuple[Tuple[int, Weight], ...]:
        return tuple(self._adj[self.check_node(node)])  # defensive copy

    def edges(self) -> Iterable[Edge]:
        return tuple(self._edges)

    # --- Helpers -------------------------------------------------------------

    def check_node(self, node: object) -> int:
        """Return node as an int index, see graph.check_index."""
        return check_index(node, self._node_count)

    def has_edge(self, u: int, v: int, weight: Optional[Weight] = None) -> bool:
        """True if some u <-> v edge exists (with exactly `weight`, if given)."""
        for neighbor, w in self._adj[self.check_node(u)]:
            if neighbor == v and (weight is None or w == weight):
                return True
        return False

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(node_count={self._node_count}, edges={len(self._edges)})"
