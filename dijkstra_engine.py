"""
Heap-based ShortestPathEngine implementation for location routing.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from typing import List, Optional, Tuple
import heapq
import logging

from algorithms import ShortestPathEngine
from graph import Graph, Weight, check_index
from path_tree import INFINITY, ShortestPathTree

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    A decrease-key is a fresh push; the superseded entry stays in the heap
    and is discarded when popped. Heap entries are (distance, node), so
    equal distances are settled in ascending node order and the reported
    path among several optimal ones is reproducible.

    Complexity:
        O(E log E) over the edges reachable from the source.
    """

    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathTree:
        """
        Relax edges outward from source until the frontier is empty.

        Unreached nodes keep distance INFINITY and predecessor None. The
        source has predecessor None as well, since it has no parent.
        """
        n = graph.node_count
        source = check_index(source, n, "source")

        dist: List[Weight] = [INFINITY] * n
        prev: List[Optional[int]] = [None] * n
        dist[source] = 0
        pq: List[Tuple[Weight, int]] = [(0, source)]  # priority queue of (distance, node)

        settled = 0
        stale = 0
        while pq:
            d_u, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != dist[u]:
                stale += 1
                continue
            settled += 1

            for v, w in graph.incident(u):
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        logger.debug(
            "dijkstra source=%d nodes=%d settled=%d stale=%d", source, n, settled, stale
        )
        return ShortestPathTree(source=source, distances=tuple(dist), predecessors=tuple(prev))
