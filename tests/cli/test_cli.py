from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path

import pytest

from timegraph import cli
from timegraph.io import build_graph

FLIGHTS = """DAY,ORIGIN,DEST,CARRIER,DEP_TIME
1,SEA,SFO,AS,0905
1,SFO,LAX,UA,1200
2,SFO,JFK,DL,0700
1,JFK,SEA,B6,0800
"""


@pytest.fixture
def data(tmp_path: Path) -> Path:
    path = tmp_path / "flights.csv"
    path.write_text(FLIGHTS)
    return path


@pytest.fixture
def graph():
    return build_graph(
        {"A", "B", "C", "D"},
        {"A": {"B": 1, "D": 3}, "B": {"D": 2}, "D": {"A": 4}},
    )


def test_no_args_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: timegraph" in capsys.readouterr().out


def test_query_prints_legs(data, capsys):
    cli.main(["query", "SEA", "JFK", str(data)])
    assert capsys.readouterr().out.splitlines() == [
        "SEA to SFO time: 10905",
        "SFO to JFK time: 20700",
    ]


def test_query_json(data, capsys):
    cli.main(["query", "SEA", "LAX", str(data), "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["start"] == "SEA"
    assert payload["destination"] == "LAX"
    assert payload["length"] == 10905 + 11200
    assert [leg["dst"] for leg in payload["edges"]] == ["SFO", "LAX"]


def test_query_no_path_exits_one(data, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["query", "SFO", "SEA", str(data)])
    assert exc_info.value.code == 1
    assert capsys.readouterr().out.strip() == cli.NO_PATH


def test_query_aborted_exits_two(data, caplog):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["query", "SEA", "JFK", str(data), "--max-expansions", "1"])
    assert exc_info.value.code == 2
    assert any("aborted" in r.getMessage() for r in caplog.records)


def test_query_budget_from_config(data, tmp_path):
    config = tmp_path / "c.yaml"
    config.write_text("search:\n  max_expansions: 1\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--config", str(config), "query", "SEA", "JFK", str(data)])
    assert exc_info.value.code == 2


def test_bad_config_exits_one(data, tmp_path, caplog):
    config = tmp_path / "c.yaml"
    config.write_text("bogus: 1\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-c", str(config), "inspect", str(data)])
    assert exc_info.value.code == 1
    assert any("Failed to load config" in r.getMessage() for r in caplog.records)


def test_string_budget_in_config_exits_one(data, tmp_path, caplog):
    config = tmp_path / "c.yaml"
    config.write_text("search:\n  max_expansions: '10'\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["-c", str(config), "query", "SEA", "JFK", str(data)])
    assert exc_info.value.code == 1
    assert any("max_expansions" in r.getMessage() for r in caplog.records)


def test_negative_budget_flag_exits_one(data, caplog):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["query", "SEA", "JFK", str(data), "--max-expansions", "-1"])
    assert exc_info.value.code == 1
    assert any("Invalid --max-expansions" in r.getMessage() for r in caplog.records)


def test_budget_flag_overrides_config(data, tmp_path, capsys):
    config = tmp_path / "c.yaml"
    config.write_text("search:\n  max_expansions: 1\n")
    cli.main(
        ["-c", str(config), "query", "SEA", "SFO", str(data), "--max-expansions", "5"]
    )
    assert capsys.readouterr().out.strip() == "SEA to SFO time: 10905"


def test_missing_data_exits_one(tmp_path, caplog):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path / "nope.csv")])
    assert exc_info.value.code == 1
    assert any("Data file not found" in r.getMessage() for r in caplog.records)


def test_neighbors(data, capsys):
    cli.main(["neighbors", "SFO", str(data)])
    assert capsys.readouterr().out.strip() == "JFK(20700) LAX(11200)"


def test_neighbors_unknown_label(data):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["neighbors", "ZZZ", str(data)])
    assert exc_info.value.code == 1


def test_inspect(data, capsys):
    cli.main(["inspect", str(data)])
    assert capsys.readouterr().out.splitlines() == ["Nodes: 4", "Edges: 4"]


def test_repl_answers_until_exit(graph):
    stdin = StringIO("A D\nA C\n\nA\nA Z\nexit\nA B\n")
    out = StringIO()
    cli.run_repl(graph, stdin=stdin, out=out)
    assert out.getvalue().splitlines() == [
        cli.PROMPT,
        "A to D time: 3",
        cli.NO_PATH,
    ]


def test_repl_stops_at_eof(graph):
    out = StringIO()
    cli.run_repl(graph, stdin=StringIO("A B"), out=out)
    assert out.getvalue().splitlines() == [cli.PROMPT, "A to B time: 1"]


def test_repl_warns_on_unknown_label(graph, caplog):
    cli.run_repl(graph, stdin=StringIO("A Z\n"), out=StringIO())
    assert any("Unknown airport(s): Z" in r.getMessage() for r in caplog.records)


def test_repl_command(data, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", StringIO("SEA SFO\nexit\n"))
    cli.main(["repl", str(data)])
    assert capsys.readouterr().out.splitlines() == [
        cli.PROMPT,
        "SEA to SFO time: 10905",
    ]


def test_verbose_and_quiet_switch_levels(data, caplog):
    with caplog.at_level(logging.DEBUG, logger="timegraph"):
        cli.main(["--verbose", "inspect", str(data)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="timegraph"):
        cli.main(["--quiet", "inspect", str(data)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)
