"""timegraph: time-monotonic path search over labeled directed graphs.

Edge labels are timestamps. A path may only take an edge that departs no
earlier than the previous edge, and the search returns the shortest such path
by cumulative label.

Primary API:
    Graph, Node, Edge, Path - Graph model
    find_path() - Shortest time-monotonic path between two labels
    load_graph() - Build a graph from a flight-records CSV

Example:
    from timegraph import Graph, find_path

    g = Graph()
    for label in "ABCD":
        g.add_node(label)
    g.connect("A", "B", 1)
    g.connect("B", "D", 2)
    g.connect("A", "D", 3)

    path = find_path(g, "A", "D")
    assert path is not None and path.length == 3
"""

from __future__ import annotations

from timegraph import cli, logging
from timegraph._version import __version__
from timegraph.algorithms.search import SearchAborted, find_path
from timegraph.config import Config, IngestConfig, SearchConfig, load_config
from timegraph.graph.convert import from_networkx, to_digraph, to_multidigraph
from timegraph.io import build_graph, load_graph, parse_flights
from timegraph.model import Edge, Graph, Node, Path

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "Path",
    # Search
    "find_path",
    "SearchAborted",
    # Ingestion
    "parse_flights",
    "build_graph",
    "load_graph",
    # Configuration
    "Config",
    "IngestConfig",
    "SearchConfig",
    "load_config",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_digraph",
    "to_multidigraph",
    # Utilities
    "cli",
    "logging",
]
