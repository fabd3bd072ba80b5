from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional, Tuple

from timegraph.graph.strict_multidigraph import NodeID
from timegraph.model.edge import Edge


@dataclass(frozen=True)
class Path:
    """
    A route from ``start`` to ``destination`` made of consecutive edges.

    An empty edge sequence is the self path: ``start == destination`` and the
    length is zero. Otherwise the first edge begins at ``start`` and the last
    edge ends at ``destination``. Paths are immutable; `extend` returns a new
    one. Ordering compares ``length`` only.

    Attributes:
        start (NodeID):
            Label of the node the path begins at.
        destination (NodeID):
            Label of the node the path currently ends at.
        edges (Tuple[Edge, ...]):
            The edges in traversal order, held as a value copy.
        length:
            Sum of all edge labels.
        time:
            Label of the last edge, or None for the self path.
    """

    start: NodeID
    destination: NodeID
    edges: Tuple[Edge, ...] = ()
    length: Any = field(init=False, default=0)
    time: Optional[Any] = field(init=False, default=None)

    def __post_init__(self) -> None:
        """Freeze the edge sequence and derive ``length`` and ``time``."""
        edges = tuple(self.edges)
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "length", sum(edge.label for edge in edges))
        object.__setattr__(self, "time", edges[-1].label if edges else None)
        self._check_rep()

    def _check_rep(self) -> None:
        assert self.start is not None and self.destination is not None
        assert self.length >= 0
        for edge in self.edges:
            assert edge is not None, "null edge"
            assert not edge.label < 0, "negative edge weight"
        if self.edges:
            assert self.start == self.edges[0].src, "path does not begin at start"
            assert self.destination == self.edges[-1].dst, (
                "path does not end at destination"
            )
        else:
            assert self.start == self.destination, "zero path must be self referencing"
            assert self.length == 0, "self referencing path must have zero length"

    @classmethod
    def self_path(cls, label: NodeID) -> Path:
        """Return the zero-length path that starts and ends at ``label``."""
        return cls(label, label)

    @classmethod
    def from_edges(cls, start: NodeID, edges: Iterable[Edge]) -> Path:
        """Build a path from ``start`` along ``edges``."""
        edges = tuple(edges)
        return cls(start, edges[-1].dst if edges else start, edges)

    def extend(self, edge: Edge) -> Path:
        """
        Return a new path with ``edge`` appended.

        Args:
            edge: An edge beginning at this path's destination.

        Returns:
            A new Path ending at ``edge.dst``.
        """
        return Path(self.start, edge.dst, self.edges + (edge,))

    def can_extend(self, edge: Edge) -> bool:
        """Return True if ``edge`` departs no earlier than the last edge arrived."""
        return not self.edges or edge.label >= self.time

    def is_monotonic(self) -> bool:
        """Return True if edge labels never decrease along the path."""
        return all(a.label <= b.label for a, b in zip(self.edges, self.edges[1:]))

    @property
    def nodes_seq(self) -> Tuple[NodeID, ...]:
        """Return the node labels visited, from start to destination."""
        return (self.start,) + tuple(edge.dst for edge in self.edges)

    def render(self) -> str:
        """Return one ``"<src> to <dst> time: <label>"`` line per edge."""
        return "\n".join(str(edge) for edge in self.edges)

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "destination": self.destination,
            "length": self.length,
            "time": self.time,
            "edges": [
                {"src": edge.src, "dst": edge.dst, "label": edge.label}
                for edge in self.edges
            ],
        }

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.length < other.length

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.length <= other.length

    def __repr__(self) -> str:
        return f"Path({list(self.nodes_seq)}, length={self.length})"
