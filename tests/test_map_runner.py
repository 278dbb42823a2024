from pathlib import Path

import pandas as pd
import pytest

from errors import ConfigError, OutOfRange
from map_runner import DEFAULT_MAP, load_map_config, main, run_queries


def test_demo_map_answers_both_queries():
    rows = run_queries(DEFAULT_MAP)
    assert [(r["source"], r["destination"]) for r in rows] == [(1, 7), (0, 8)]
    assert rows[0]["distance"] == 11
    assert rows[1] == {
        "source": 0,
        "destination": 8,
        "reachable": True,
        "distance": 14,
        "path": "0 1 2 8",
    }


def test_results_csv_round_trips_through_pandas(tmp_path: Path):
    """Runner writes one CSV row per query, unreachable ones without a distance."""
    cfg = tmp_path / "map.yml"
    cfg.write_text(
        """
locations: 4
edges:
  - [0, 1, 2]
  - [1, 2, 3]
queries:
  - {source: 0, destination: 2}
  - {source: 0, destination: 3}
"""
    )
    out = tmp_path / "out" / "results.csv"

    rows = run_queries(cfg, results_csv=out)
    assert len(rows) == 2

    df = pd.read_csv(out)
    assert list(df.columns) == ["source", "destination", "reachable", "distance", "path"]
    assert df.loc[0, "distance"] == 5
    assert df.loc[0, "path"] == "0 1 2"
    assert not bool(df.loc[1, "reachable"])
    assert pd.isna(df.loc[1, "distance"])


def test_missing_locations_key(tmp_path: Path):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("edges: []\n")
    with pytest.raises(ConfigError, match="locations"):
        load_map_config(cfg)


def test_malformed_edge_row(tmp_path: Path):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("locations: 2\nedges:\n  - [0, 1]\n")
    with pytest.raises(ConfigError, match="edge #0"):
        load_map_config(cfg)


@pytest.mark.parametrize(
    "text, key",
    [
        ("locations: 2\nedges: 5\n", "edges"),
        ("locations: 2\nqueries: 3\n", "queries"),
        ("locations: 2\nedges: {a: 1}\n", "edges"),
    ],
)
def test_section_must_be_a_list(tmp_path: Path, text, key):
    cfg = tmp_path / "bad.yml"
    cfg.write_text(text)
    with pytest.raises(ConfigError, match=f"'{key}' must be a list"):
        load_map_config(cfg)


def test_empty_sections_are_allowed(tmp_path: Path):
    cfg = tmp_path / "empty.yml"
    cfg.write_text("locations: 3\nedges:\nqueries:\n")
    config = load_map_config(cfg)
    assert config.edges == [] and config.queries == []


def test_query_outside_map(tmp_path: Path):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("locations: 2\nqueries:\n  - {source: 0, destination: 5}\n")
    with pytest.raises(OutOfRange):
        run_queries(cfg)


def test_main_prints_rendered_results(capsys):
    main([str(DEFAULT_MAP)])
    out = capsys.readouterr().out
    assert "Shortest path length is: 11\nPath is: 1 7" in out
    assert "Shortest path length is: 14\nPath is: 0 1 2 8" in out
