"""Labeled directed multigraph with forgiving, label-based operations.

`Graph` is the public graph type. It owns a mapping from node label to `Node`
and an arena (`StrictMultiDiGraph`) holding every edge. Operations that name a
label absent from the graph are silent no-ops when they mutate, and return
``None`` or an empty result when they query.

Example graph: nodes A, B, C, D with edges A->B (1), B->D (2), A->D (3) and
D->A (4). C is unreachable because no edge ends at it, and A->D->A is a cycle.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional

from timegraph.graph.strict_multidigraph import NodeID, StrictMultiDiGraph
from timegraph.model.node import Node


class Graph:
    """A system of labeled nodes joined by directed, labeled edges.

    Self-loops, cycles and parallel edges are allowed. Removing a node also
    removes every edge that starts or ends at it.
    """

    def __init__(self) -> None:
        self._arena = StrictMultiDiGraph()
        self._nodes: Dict[NodeID, Node] = {}
        self._check_rep()

    def _check_rep(self) -> None:
        assert self._nodes is not None
        for label, node in self._nodes.items():
            assert label is not None, "graph cannot contain null labels"
            assert node is not None, "graph cannot contain null nodes"
            assert node.label == label, "node stored under a foreign label"

    @property
    def arena(self) -> StrictMultiDiGraph:
        """The underlying edge arena. Mutate through `Graph` methods only."""
        return self._arena

    #
    # Node management
    #
    def add_node(self, label: NodeID) -> None:
        """Add a node with no edges unless one with this label exists."""
        if label in self._nodes:
            return
        node = Node(label, self._arena)
        self._arena.add_node(label)
        self._nodes[label] = node

    def remove_node(self, label: NodeID) -> None:
        """Remove the node and all its incident edges, if present."""
        if label not in self._nodes:
            return
        self._arena.remove_node(label)
        del self._nodes[label]

    def contains_node(self, label: NodeID) -> bool:
        return label in self._nodes

    def get_node(self, label: NodeID) -> Optional[Node]:
        return self._nodes.get(label)

    #
    # Edge management
    #
    def connect(self, src: NodeID, dst: NodeID, label: Any) -> None:
        """Add a directed edge ``src -> dst`` carrying ``label``.

        Does nothing if either node is missing. Connecting the same pair again
        adds a parallel edge rather than replacing the existing one.
        """
        if src not in self._nodes or dst not in self._nodes:
            return
        self._nodes[src].connect(label, self._nodes[dst])

    def disconnect(self, src: NodeID, dst: NodeID) -> None:
        """Remove the first edge ``src -> dst``, if both nodes and the edge exist."""
        if src not in self._nodes or dst not in self._nodes:
            return
        self._nodes[src].disconnect(dst)

    def are_neighbors(self, src: NodeID, dst: NodeID) -> bool:
        """Return True if at least one edge leads from ``src`` to ``dst``."""
        if src not in self._nodes or dst not in self._nodes:
            return False
        return self._arena.first_edge(src, dst) is not None

    def edge_label(self, src: NodeID, dst: NodeID) -> Optional[Any]:
        """Return the label of the first edge ``src -> dst``, or None."""
        if src not in self._nodes or dst not in self._nodes:
            return None
        return self._nodes[src].edge_label(dst)

    def neighbors_sorted(self, src: NodeID) -> List[str]:
        """Return ``dst(label)`` strings for the edges of ``src``, sorted textually.

        Returns an empty list when ``src`` is not in the graph.
        """
        node = self._nodes.get(src)
        if node is None:
            return []
        return node.neighbors_sorted()

    def neighbors(self, src: NodeID) -> str:
        """Return `neighbors_sorted` joined by single spaces."""
        return " ".join(self.neighbors_sorted(src))

    #
    # Summaries
    #
    def nodes(self) -> str:
        """Return the node labels joined by single spaces."""
        return " ".join(str(label) for label in self._nodes)

    def labels(self) -> List[NodeID]:
        return list(self._nodes)

    def size(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        """Return the number of edges, parallel edges included."""
        return sum(node.edge_count() for node in self._nodes.values())

    def copy(self) -> Graph:
        """Return an independent snapshot of this graph."""
        clone = Graph()
        clone._arena = self._arena.copy()
        clone._nodes = {label: Node(label, clone._arena) for label in self._nodes}
        clone._check_rep()
        return clone

    def __contains__(self, label: object) -> bool:
        return label in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.size()}, edges={self.edge_count()})"
