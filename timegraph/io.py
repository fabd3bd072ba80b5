"""Flight-record ingestion.

Reads a delimited file of scheduled legs into the two structures the graph
builder consumes: the set of airport labels and, per origin, the timestamp of
the first leg seen to each destination.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Set, Tuple, Union

import pandas as pd

from timegraph.config import INGEST_CONFIG, IngestConfig
from timegraph.logging import get_logger
from timegraph.model.graph import Graph

logger = get_logger(__name__)

Times = Dict[str, Dict[str, int]]


def _column(frame: pd.DataFrame, position: int, name: str, source: str) -> pd.Series:
    if position >= frame.shape[1]:
        raise ValueError(
            f"{source}: expected a {name} column at position {position}, "
            f"found only {frame.shape[1]} columns"
        )
    return frame.iloc[:, position].str.strip()


def _to_int(values: pd.Series, name: str, source: str) -> pd.Series:
    # to_numeric alone would accept "09.75" or "1e3" as floats
    bad = ~values.str.fullmatch(r"\d+").fillna(False).astype(bool)
    if bad.any():
        row = int(bad.idxmax()) + 2  # header line plus one-based numbering
        raise ValueError(
            f"{source}: line {row}: {name} '{values[bad.idxmax()]}' is not an integer"
        )
    return pd.to_numeric(values).astype("int64")


def parse_flights(
    path: Union[str, Path], config: Optional[IngestConfig] = None
) -> Tuple[Set[str], Times]:
    """Parse a flight-records file.

    The first line is a header. Rows with an empty time field are skipped.
    Each kept row contributes its origin and destination to the label set and
    a timestamp ``day * day_multiplier + time``; only the first timestamp seen
    for an (origin, destination) pair is kept.

    Args:
        path: Location of the delimited file.
        config: Column layout. Defaults to ``INGEST_CONFIG``.

    Returns:
        A tuple of (cities, times):
          - cities: All origin and destination labels of kept rows.
          - times: Maps origin -> destination -> timestamp.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a column is missing or a day/time is not an integer.
    """
    config = config or INGEST_CONFIG
    source = str(path)

    frame = pd.read_csv(
        path,
        sep=config.delimiter,
        header=0,
        dtype=str,
        keep_default_na=False,
    )
    total = len(frame)

    time_col = _column(frame, config.time_column, "time", source)
    frame = frame[time_col != ""]

    legs = pd.DataFrame(
        {
            "origin": _column(frame, config.origin_column, "origin", source),
            "destination": _column(
                frame, config.destination_column, "destination", source
            ),
            "day": _to_int(_column(frame, config.day_column, "day", source), "day", source),
            "time": _to_int(
                _column(frame, config.time_column, "time", source), "time", source
            ),
        }
    )
    legs["timestamp"] = legs["day"] * config.day_multiplier + legs["time"]

    cities: Set[str] = set(legs["origin"]) | set(legs["destination"])

    first_legs = legs.drop_duplicates(subset=["origin", "destination"], keep="first")
    times: Times = {}
    for origin, destination, timestamp in zip(
        first_legs["origin"], first_legs["destination"], first_legs["timestamp"]
    ):
        times.setdefault(origin, {})[destination] = int(timestamp)

    logger.info(
        "Parsed %s: %d rows, %d kept, %d airports, %d routes",
        source,
        total,
        len(legs),
        len(cities),
        len(first_legs),
    )
    return cities, times


def build_graph(
    cities: Iterable[str],
    times: Mapping[str, Mapping[str, int]],
    graph: Optional[Graph] = None,
) -> Graph:
    """Fill a graph with one node per city and one edge per timed route.

    Args:
        cities: Node labels.
        times: Maps origin -> destination -> edge label. Each pair is
            connected exactly once.
        graph: Graph to extend. A new one is created if None.

    Returns:
        Graph: The populated graph.
    """
    graph = graph if graph is not None else Graph()
    for city in sorted(cities):
        graph.add_node(city)

    for origin, destinations in times.items():
        for destination, timestamp in destinations.items():
            graph.connect(origin, destination, timestamp)

    logger.debug(
        "Built graph with %d nodes and %d edges", graph.size(), graph.edge_count()
    )
    return graph


def load_graph(
    path: Union[str, Path], config: Optional[IngestConfig] = None
) -> Graph:
    """Parse a flight-records file and build its graph."""
    cities, times = parse_flights(path, config)
    return build_graph(cities, times)
