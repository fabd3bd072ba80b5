"""Where timegraph diagnostics go and which verbosity shows them."""

import logging
from io import StringIO
from pathlib import Path

import pytest

from timegraph import cli
from timegraph.logging import (
    ROOT_LOGGER_NAME,
    get_logger,
    level_from_flags,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)

FLIGHTS = """DAY,ORIGIN,DEST,CARRIER,DEP_TIME
1,SEA,SFO,AS,0905
2,SFO,JFK,DL,0700
"""


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def data(tmp_path: Path) -> Path:
    path = tmp_path / "flights.csv"
    path.write_text(FLIGHTS)
    return path


@pytest.mark.parametrize(
    "verbose,quiet,level",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_level_from_flags(verbose, quiet, level):
    assert level_from_flags(verbose, quiet) == level


def test_query_results_on_stdout_ingestion_summary_on_stderr(data, capsys):
    cli.main(["query", "SEA", "JFK", str(data)])
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "SEA to SFO time: 10905",
        "SFO to JFK time: 20700",
    ]
    assert "Parsed" in captured.err
    assert "Parsed" not in captured.out


def test_quiet_hides_ingestion_summary(data, capsys):
    cli.main(["--quiet", "query", "SEA", "SFO", str(data)])
    captured = capsys.readouterr()
    assert captured.out.strip() == "SEA to SFO time: 10905"
    assert "Parsed" not in captured.err


def test_verbose_search_trace_stays_off_stdout(data, capsys):
    cli.main(["--verbose", "query", "SEA", "JFK", str(data), "--json"])
    captured = capsys.readouterr()
    assert "DEBUG" in captured.err
    # stdout must remain parseable JSON
    assert captured.out.lstrip().startswith("{")
    assert "DEBUG" not in captured.out


def test_unknown_label_reported_on_stderr(data, capsys):
    with pytest.raises(SystemExit):
        cli.main(["neighbors", "ZZZ", str(data)])
    captured = capsys.readouterr()
    assert "Unknown label: ZZZ" in captured.err
    assert captured.out == ""


def test_module_loggers_follow_global_level():
    search_logger = get_logger("timegraph.algorithms.search")
    io_logger = get_logger("timegraph.io")
    assert search_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert search_logger.getEffectiveLevel() == logging.WARNING
    assert io_logger.getEffectiveLevel() == logging.WARNING


def test_custom_handler_replaces_stderr():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "%(levelname)s|%(name)s|%(message)s"
    setup_root_logger(format_string=fmt, handler=handler)
    setup_root_logger()  # ignored until reset

    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert root.handlers == [handler]
    get_logger("timegraph.io").warning("skipped row")
    assert capture.getvalue().strip() == "WARNING|timegraph.io|skipped row"


def test_reset_logging_drops_handlers():
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root.handlers) == 1

    reset_logging()
    assert root.handlers == []
    assert root.level == logging.NOTSET
