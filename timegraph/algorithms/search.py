"""Earliest-connection path search.

Edge labels are read as timestamps. A path may only be extended by an edge
whose label is greater than or equal to the label of the path's last edge, so
every returned path is a feasible chain of scheduled legs. Candidates are
explored in ascending order of cumulative length (the sum of edge labels),
Dijkstra style, and the first candidate to reach the destination is returned.

Notes:
    Each node is settled at most once, by the shortest candidate that reaches
    it. Because the monotonic filter depends on the last edge rather than on
    the length, a settled node can block a longer candidate that would have
    allowed a later connection; the search does not revisit settled nodes.
    Among candidates of equal length the one pushed first is popped first.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Set, Tuple

from timegraph.config import SEARCH_CONFIG
from timegraph.graph.strict_multidigraph import NodeID
from timegraph.logging import get_logger
from timegraph.model.graph import Graph
from timegraph.model.path import Path

logger = get_logger(__name__)


class SearchAborted(RuntimeError):
    """Raised when a search exceeds its expansion budget before finishing.

    The outcome is unknown: a path may or may not exist.
    """

    def __init__(self, src: NodeID, dst: NodeID, expansions: int) -> None:
        super().__init__(
            f"Search from '{src}' to '{dst}' aborted after {expansions} expansions."
        )
        self.src = src
        self.dst = dst
        self.expansions = expansions


def find_path(
    graph: Graph,
    src: NodeID,
    dst: NodeID,
    max_expansions: Optional[int] = None,
) -> Optional[Path]:
    """Find the shortest time-monotonic path from ``src`` to ``dst``.

    Args:
        graph: Graph to search. Must not be mutated while the search runs.
        src: Label of the start node.
        dst: Label of the destination node.
        max_expansions: Maximum number of nodes to settle before giving up.
            Defaults to ``SEARCH_CONFIG.max_expansions`` (unbounded if None).

    Returns:
        The first path popped that ends at ``dst``, the zero-length self path
        if ``src == dst``, or None if no monotonic path exists.

    Raises:
        SearchAborted: If more than ``max_expansions`` nodes would be settled.
    """
    if max_expansions is None:
        max_expansions = SEARCH_CONFIG.max_expansions

    if src == dst:
        return Path.self_path(src)

    if src not in graph:
        logger.debug("Start node '%s' is not in the graph", src)
        return None

    # Entries are (length, push_order, path); push_order keeps ties stable
    # and stops heapq from comparing Path objects.
    push_order = count()
    min_pq: List[Tuple[object, int, Path]] = [(0, next(push_order), Path.self_path(src))]
    settled: Set[NodeID] = set()

    while min_pq:
        _, _, min_path = heappop(min_pq)
        node_id = min_path.destination

        if node_id == dst:
            logger.debug(
                "Found path %s -> %s with length %s over %d edges",
                src,
                dst,
                min_path.length,
                len(min_path.edges),
            )
            return min_path

        if node_id in settled:
            continue

        if max_expansions is not None and len(settled) >= max_expansions:
            raise SearchAborted(src, dst, len(settled))

        settled.add(node_id)
        node = graph.get_node(node_id)
        if node is None:
            continue

        for edge in node.edges():
            if edge.dst in settled:
                continue
            if min_path.can_extend(edge):
                new_path = min_path.extend(edge)
                heappush(min_pq, (new_path.length, next(push_order), new_path))

    logger.debug("No path from %s to %s (settled %d nodes)", src, dst, len(settled))
    return None
