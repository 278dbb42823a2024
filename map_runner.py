"""
CLI to answer shortest-path queries over a location map.

Reads a YAML map (location count, undirected weighted edges, queries),
builds the graph, runs one Dijkstra pass per distinct query source and
prints or writes the answers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence
import csv
import logging
import sys

from adjacency_list_graph import AdjacencyListGraph
from algorithms import ShortestPathEngine
from dijkstra_engine import SimpleDijkstraEngine
from errors import ConfigError
from graph import Edge
from path_tree import PathFound, PathResult, ShortestPathTree
from routing import render_result

logger = logging.getLogger(__name__)

DEFAULT_MAP = Path(__file__).parent / "maps" / "demo.yml"


@dataclass(frozen=True)
class Query:
    source: int
    destination: int


@dataclass(frozen=True)
class MapConfig:
    locations: int
    edges: Sequence[Edge]
    queries: Sequence[Query]


def _require(data: Mapping[str, object], key: str, where: str) -> object:
    if key not in data:
        raise ConfigError(f"{where}: missing key '{key}'")
    return data[key]


def _section(data: Mapping[str, object], key: str, path: Path) -> list:
    section = data.get(key)
    if section is None:
        return []
    if not isinstance(section, list):
        raise ConfigError(f"{path}: '{key}' must be a list, got {section!r}")
    return section


def load_map_config(path: Path) -> MapConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    locations = _require(data, "locations", str(path))
    if isinstance(locations, bool) or not isinstance(locations, int):
        raise ConfigError(f"{path}: 'locations' must be an integer, got {locations!r}")

    edges: List[Edge] = []
    for i, row in enumerate(_section(data, "edges", path)):
        if not isinstance(row, (list, tuple)) or len(row) != 3:
            raise ConfigError(f"{path}: edge #{i} must be [u, v, weight], got {row!r}")
        u, v, w = row
        edges.append((u, v, w))

    queries: List[Query] = []
    for i, q in enumerate(_section(data, "queries", path)):
        if not isinstance(q, dict):
            raise ConfigError(f"{path}: query #{i} must be a mapping, got {q!r}")
        where = f"{path}: query #{i}"
        queries.append(
            Query(
                source=_require(q, "source", where),  # type: ignore[arg-type]
                destination=_require(q, "destination", where),  # type: ignore[arg-type]
            )
        )

    return MapConfig(locations=locations, edges=edges, queries=queries)


def build_graph(config: MapConfig) -> AdjacencyListGraph:
    return AdjacencyListGraph.from_edges(config.locations, config.edges)


def answer_queries(
    graph: AdjacencyListGraph,
    queries: Iterable[Query],
    engine: ShortestPathEngine | None = None,
) -> List[PathResult]:
    """
    Answer queries in order, reusing one shortest-path tree per source.
    """
    engine = engine or SimpleDijkstraEngine()
    trees: Dict[int, ShortestPathTree] = {}
    results: List[PathResult] = []
    for q in queries:
        source = graph.check_node(q.source)
        destination = graph.check_node(q.destination)
        if source not in trees:
            trees[source] = engine.shortest_paths(graph, source)
        results.append(trees[source].result_for(destination))
    logger.info("answered %d queries with %d engine runs", len(results), len(trees))
    return results


def result_row(result: PathResult) -> Dict[str, object]:
    if isinstance(result, PathFound):
        return {
            "source": result.source,
            "destination": result.destination,
            "reachable": True,
            "distance": result.distance,
            "path": " ".join(str(n) for n in result.path),
        }
    return {
        "source": result.source,
        "destination": result.destination,
        "reachable": False,
        "distance": "",
        "path": "",
    }


def run_queries(config_path: Path, results_csv: Path | None = None) -> List[Dict[str, object]]:
    cfg = load_map_config(config_path)
    graph = build_graph(cfg)
    logger.info(
        "loaded map %s: %d locations, %d edges, %d queries",
        config_path,
        graph.node_count,
        graph.edge_count,
        len(cfg.queries),
    )
    rows = [result_row(r) for r in answer_queries(graph, cfg.queries)]
    if results_csv is not None:
        write_results_csv(rows, results_csv)
    return rows


def write_results_csv(rows: Iterable[Dict[str, object]], path: Path) -> None:
    fieldnames = ["source", "destination", "reachable", "distance", "path"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    config_path = Path(args[0]) if args else DEFAULT_MAP
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    cfg = load_map_config(config_path)
    graph = build_graph(cfg)
    for result in answer_queries(graph, cfg.queries):
        print(render_result(result))


if __name__ == "__main__":
    main()
