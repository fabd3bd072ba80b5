"""Graph model: edges, nodes, graphs and paths."""

from timegraph.model.edge import Edge
from timegraph.model.graph import Graph
from timegraph.model.node import Node
from timegraph.model.path import Path

__all__ = ["Edge", "Graph", "Node", "Path"]
