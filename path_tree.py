"""
Shortest-path tree produced by one single-source query, plus path recovery.

A tree holds the final distance table and predecessor table of a query. One
tree answers any number of destinations without re-running relaxation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union
import math

from graph import Weight, check_index

# Larger than any achievable path sum; also compares correctly against ints.
INFINITY = math.inf


def reconstruct_path(
    predecessors: Sequence[Optional[int]], source: int, destination: int
) -> Optional[List[int]]:
    """
    Walk predecessor links back from destination and return source..destination.

    Returns None when the walk ends anywhere but at source, which means the
    destination was never reached. The walk is bounded by the table length,
    so a predecessor cycle is also reported as no path. The table is not
    modified.
    """
    path = [destination]
    node = destination
    for _ in range(len(predecessors)):
        parent = predecessors[node]
        if parent is None:
            break
        path.append(parent)
        node = parent
    else:
        return None

    if node != source:
        return None
    path.reverse()
    return path


@dataclass(frozen=True)
class PathFound:
    """Destination reached: total distance and the node sequence."""

    source: int
    destination: int
    distance: Weight
    path: Tuple[int, ...]

    @property
    def reachable(self) -> bool:
        return True


@dataclass(frozen=True)
class Unreachable:
    """No path connects source to destination."""

    source: int
    destination: int

    @property
    def reachable(self) -> bool:
        return False


PathResult = Union[PathFound, Unreachable]


@dataclass(frozen=True)
class ShortestPathTree:
    source: int
    distances: Tuple[Weight, ...]
    predecessors: Tuple[Optional[int], ...]

    @property
    def node_count(self) -> int:
        return len(self.distances)

    def distance_to(self, destination: int) -> Weight:
        """Best distance from source, INFINITY if unreachable."""
        return self.distances[check_index(destination, self.node_count, "destination")]

    def reachable(self, destination: int) -> bool:
        return self.distance_to(destination) != INFINITY

    def path_to(self, destination: int) -> Optional[List[int]]:
        if not self.reachable(destination):
            return None
        return reconstruct_path(self.predecessors, self.source, destination)

    def result_for(self, destination: int) -> PathResult:
        path = self.path_to(destination)
        if path is None:
            return Unreachable(self.source, destination)
        return PathFound(self.source, destination, self.distances[destination], tuple(path))
