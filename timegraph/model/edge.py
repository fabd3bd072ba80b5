"""Directed, labeled edge value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from timegraph.graph.strict_multidigraph import NodeID


@dataclass(frozen=True)
class Edge:
    """Immutable directed connection between two node labels.

    Edges reference their endpoints by label and never own the nodes.

    Attributes:
        label: Edge weight. Interpreted as a timestamp by the path search.
        src: Label of the node where the edge begins.
        dst: Label of the node where the edge ends.
    """

    label: Any
    src: NodeID
    dst: NodeID

    def __post_init__(self) -> None:
        self._check_rep()

    def _check_rep(self) -> None:
        assert self.label is not None, "Edges must have a label"
        assert self.src is not None and self.dst is not None, (
            "Cannot connect to null nodes"
        )

    def render(self) -> str:
        """Return the ``dst(label)`` form used by neighbor listings."""
        return f"{self.dst}({self.label})"

    def __str__(self) -> str:
        return f"{self.src} to {self.dst} time: {self.label}"
