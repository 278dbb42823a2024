"""
Query entry point for location routing.

shortest_path() answers one (source, destination) question; render_result()
turns the answer into the plain-text diagnostic form.
"""

from typing import Optional

from algorithms import ShortestPathEngine
from dijkstra_engine import SimpleDijkstraEngine
from graph import Graph, check_index
from path_tree import (
    INFINITY,
    PathFound,
    PathResult,
    ShortestPathTree,
    Unreachable,
    reconstruct_path,
)

__all__ = [
    "INFINITY",
    "PathFound",
    "PathResult",
    "ShortestPathTree",
    "Unreachable",
    "reconstruct_path",
    "render_result",
    "shortest_path",
]


def shortest_path(
    graph: Graph,
    source: int,
    destination: int,
    engine: Optional[ShortestPathEngine] = None,
) -> PathResult:
    """
    Shortest path from source to destination.

    The destination is checked here and the source by the engine, both
    before any relaxation runs. Returns PathFound with the distance and the
    node sequence (source and destination inclusive), or Unreachable when
    destination is disconnected from source.
    """
    destination = check_index(destination, graph.node_count, "destination")
    engine = engine or SimpleDijkstraEngine()
    return engine.shortest_paths(graph, source).result_for(destination)


def render_result(result: PathResult) -> str:
    if isinstance(result, Unreachable):
        return f"No path exists from {result.source} to {result.destination}"
    nodes = " ".join(str(n) for n in result.path)
    return f"Shortest path length is: {result.distance}\nPath is: {nodes}"
