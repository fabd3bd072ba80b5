"""Command-line interface for timegraph."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional, TextIO

from timegraph.algorithms.search import SearchAborted, find_path
from timegraph.config import Config, load_config
from timegraph.io import load_graph
from timegraph.logging import get_logger, level_from_flags, set_global_log_level
from timegraph.model.graph import Graph

logger = get_logger(__name__)

PROMPT = "Enter airport codes: '<from> <to>' for shortest path ('exit' to quit)"
NO_PATH = "no path found"


def _load(data: Path, config: Config) -> Graph:
    """Load the graph or exit with status 1 on ingestion errors."""
    try:
        return load_graph(data, config.ingest)
    except FileNotFoundError:
        logger.error("Data file not found: %s", data)
        sys.exit(1)
    except ValueError as e:
        logger.error("Failed to load data: %s", e)
        sys.exit(1)


def _query(
    graph: Graph,
    src: str,
    dst: str,
    config: Config,
    as_json: bool = False,
    out: Optional[TextIO] = None,
) -> int:
    """Run one search, print the result, and return the exit status.

    Returns:
        0 if a path was found, 1 if none exists, 2 if the search was aborted.
    """
    out = out or sys.stdout
    try:
        path = find_path(graph, src, dst, max_expansions=config.search.max_expansions)
    except SearchAborted as e:
        logger.warning("%s", e)
        return 2

    if as_json:
        payload = path.to_dict() if path is not None else None
        print(json.dumps(payload, indent=2), file=out)
    elif path is None:
        print(NO_PATH, file=out)
    else:
        for edge in path.edges:
            print(str(edge), file=out)
    return 0 if path is not None else 1


def run_repl(
    graph: Graph,
    config: Optional[Config] = None,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Answer ``<from> <to>`` queries read line by line until ``exit`` or EOF.

    Lines with fewer than two tokens or naming an unknown airport are skipped.
    """
    config = config or Config()
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(PROMPT, file=out)
    for line in stdin:
        line = line.strip()
        if line == "exit":
            break
        tokens = line.split()
        if len(tokens) < 2:
            if tokens:
                logger.warning("Expected '<from> <to>', got '%s'", line)
            continue
        src, dst = tokens[0], tokens[1]
        unknown = [label for label in (src, dst) if label not in graph]
        if unknown:
            logger.warning("Unknown airport(s): %s", ", ".join(unknown))
            continue
        _query(graph, src, dst, config, out=out)


def _inspect(graph: Graph, out: Optional[TextIO] = None) -> None:
    out = out or sys.stdout
    print(f"Nodes: {graph.size()}", file=out)
    print(f"Edges: {graph.edge_count()}", file=out)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``timegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="timegraph",
        description="Find time-monotonic connections in scheduled route data.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--config", "-c", type=Path, default=None, help="Path to config YAML"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{query,neighbors,inspect,repl}",
        help="Available commands",
    )

    query_parser = subparsers.add_parser("query", help="Find one path")
    query_parser.add_argument("src", help="Start label")
    query_parser.add_argument("dst", help="Destination label")
    query_parser.add_argument(
        "--json", action="store_true", help="Print the path as JSON"
    )
    query_parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Abort the search after settling this many nodes",
    )

    neighbors_parser = subparsers.add_parser(
        "neighbors", help="List the outgoing edges of a node"
    )
    neighbors_parser.add_argument("label", help="Node label")

    subparsers.add_parser("inspect", help="Print node and edge counts")
    subparsers.add_parser("repl", help="Answer queries read from stdin")

    for p in subparsers.choices.values():
        p.add_argument("data", type=Path, help="Path to the flight records CSV")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    set_global_log_level(level_from_flags(args.verbose, args.quiet))
    logger.debug("Debug logging enabled")

    try:
        config = load_config(args.config) if args.config else Config()
    except (OSError, ValueError) as e:
        logger.error("Failed to load config %s: %s", args.config, e)
        sys.exit(1)

    if args.command == "query" and args.max_expansions is not None:
        try:
            config.search = replace(config.search, max_expansions=args.max_expansions)
        except ValueError as e:
            logger.error("Invalid --max-expansions: %s", e)
            sys.exit(1)

    graph = _load(args.data, config)

    if args.command == "query":
        status = _query(graph, args.src, args.dst, config, as_json=args.json)
        if status:
            sys.exit(status)
    elif args.command == "neighbors":
        if args.label not in graph:
            logger.error("Unknown label: %s", args.label)
            sys.exit(1)
        print(graph.neighbors(args.label))
    elif args.command == "inspect":
        _inspect(graph)
    elif args.command == "repl":
        run_repl(graph, config)


if __name__ == "__main__":
    main()
