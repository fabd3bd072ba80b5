"""Graph conversion utilities between `Graph` and plain NetworkX graphs.

`to_digraph` consolidates parallel edges into one edge per ordered pair,
keeping the label that first-match lookups would return. `to_multidigraph`
keeps every edge. `from_networkx` builds a `Graph` from any directed NetworkX
graph.
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from timegraph.model.graph import Graph
from timegraph.model.node import EDGE_LABEL_ATTR


def to_digraph(graph: Graph) -> nx.DiGraph:
    """Convert a Graph to a NetworkX DiGraph.

    Each ordered pair with at least one edge becomes a single edge whose
    ``label`` attribute is the label of the earliest added edge for that pair.
    The number of consolidated edges is stored in ``count``.

    Args:
        graph: The Graph to convert.

    Returns:
        A NetworkX DiGraph with the same nodes.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph)

    for src, dst, _, attr in graph.arena.get_edges().values():
        if nx_graph.has_edge(src, dst):
            nx_graph.edges[src, dst]["count"] += 1
        else:
            nx_graph.add_edge(src, dst, count=1, **{EDGE_LABEL_ATTR: attr[EDGE_LABEL_ATTR]})
    return nx_graph


def to_multidigraph(graph: Graph) -> nx.MultiDiGraph:
    """Convert a Graph to a plain NetworkX MultiDiGraph, one edge per edge."""
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(graph)
    for src, dst, key, attr in graph.arena.get_edges().values():
        nx_graph.add_edge(src, dst, key=key, **{EDGE_LABEL_ATTR: attr[EDGE_LABEL_ATTR]})
    return nx_graph


def from_networkx(
    nx_graph: Union[nx.DiGraph, nx.MultiDiGraph],
    label_attr: str = EDGE_LABEL_ATTR,
) -> Graph:
    """Build a Graph from a directed NetworkX graph.

    Args:
        nx_graph: Source graph. Every edge must carry ``label_attr``.
        label_attr: Name of the edge attribute holding the edge label.

    Returns:
        Graph: A new graph with the same nodes and edges.

    Raises:
        ValueError: If the graph is undirected or an edge lacks ``label_attr``.
    """
    if not nx_graph.is_directed():
        raise ValueError("Only directed graphs can be converted.")

    graph = Graph()
    for node in nx_graph.nodes:
        graph.add_node(node)
    for src, dst, data in nx_graph.edges(data=True):
        if label_attr not in data:
            raise ValueError(f"Edge {src}->{dst} has no '{label_attr}' attribute.")
        graph.connect(src, dst, data[label_attr])
    return graph
