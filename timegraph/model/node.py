"""Graph node bound to the shared edge arena."""

from __future__ import annotations

from typing import Any, List, Optional

from timegraph.graph.strict_multidigraph import NodeID, StrictMultiDiGraph
from timegraph.model.edge import Edge

EDGE_LABEL_ATTR = "label"


class Node:
    """A labeled vertex and its outgoing edges.

    The node does not hold its edges directly. They live in the arena owned by
    the enclosing graph and are looked up by this node's label, so a node only
    ever owns the edges that start at it.

    Several edges to the same destination may coexist. Lookups by destination
    return the first one added; ``edge_count()`` counts every edge.
    """

    __slots__ = ("_label", "_arena")

    def __init__(self, label: NodeID, arena: StrictMultiDiGraph) -> None:
        self._label = label
        self._arena = arena
        self._check_rep()

    def _check_rep(self) -> None:
        assert self._label is not None, "Nodes must have a label"
        assert self._arena is not None, "Nodes must belong to an arena"

    @property
    def label(self) -> NodeID:
        return self._label

    def connect(self, label: Any, node: Node) -> None:
        """Append an edge from this node to ``node`` carrying ``label``.

        Raises:
            ValueError: If either endpoint is not in the arena.
        """
        edge = Edge(label, self._label, node.label)
        self._arena.add_edge(edge.src, edge.dst, **{EDGE_LABEL_ATTR: edge.label})

    def disconnect(self, dst: NodeID) -> None:
        """Remove the first edge to ``dst``, if one exists."""
        found = self._arena.first_edge(self._label, dst)
        if found is not None:
            self._arena.remove_edge_by_id(found[2])

    def edge_label(self, dst: NodeID) -> Optional[Any]:
        """Return the label of the first edge to ``dst``, or None."""
        found = self._arena.first_edge(self._label, dst)
        if found is None:
            return None
        return found[3][EDGE_LABEL_ATTR]

    def edges(self) -> List[Edge]:
        """Return a new list of the outgoing edges, in insertion order."""
        return [
            Edge(attr[EDGE_LABEL_ATTR], src, dst)
            for src, dst, _, attr in self._arena.out_edges_of(self._label)
        ]

    def edge_count(self) -> int:
        return self._arena.out_degree_of(self._label)

    def neighbors_sorted(self) -> List[str]:
        """Return ``dst(label)`` strings sorted lexicographically."""
        return sorted(edge.render() for edge in self.edges())

    def neighbors(self) -> str:
        """Return the sorted neighbor strings joined by single spaces."""
        return " ".join(self.neighbors_sorted())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._label == other._label and self._arena is other._arena

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"Node({self._label!r})"
