"""Strict multi-directed graph used as the node and edge arena.

`StrictMultiDiGraph` extends `networkx.MultiDiGraph` to enforce explicit node
management, unique integer edge identifiers, and predictable error handling.
Nodes are indexed by their labels and every edge is kept as a
``(source, target, key, attributes)`` tuple, so nodes never hold references to
one another.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Hashable, List, Optional, Tuple

import networkx as nx

NodeID = Hashable
EdgeID = int
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """A multi-directed graph with strict rules and monotonically increasing edge IDs.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - Removing non-existent nodes or edges raises ValueError.
      - Edge keys are integers assigned in insertion order and never reused,
        so sorting by key reproduces the order in which edges were added.
      - ``copy()`` performs a pickle-based deep copy by default.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """Initialize a StrictMultiDiGraph.

        Args:
            *args: Positional arguments forwarded to the MultiDiGraph constructor.
            **kwargs: Keyword arguments forwarded to the MultiDiGraph constructor.

        Attributes:
            _edges: Map edge key to ``(source_node, target_node, edge_key, attribute_dict)``.
        """
        super().__init__(*args, **kwargs)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return a new unique integer edge ID.

        Signature matches NetworkX's ``new_edge_key(self, u, v, key=None)``.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return int(next_edge_id)

    def copy(self, as_view: bool = False, pickle: bool = True) -> StrictMultiDiGraph:
        """Create a copy of this graph.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            StrictMultiDiGraph: A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        to_delete = [
            e_id for e_id, (s, t, _, _) in self._edges.items() if s == n or t == n
        ]
        for e_id in to_delete:
            del self._edges[e_id]

        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge from u_for_edge to v_for_edge.

        Both endpoints must already exist. Parallel edges between the same pair
        are allowed and each receives its own key.

        Args:
            u_for_edge: The source node. Must exist in the graph.
            v_for_edge: The target node. Must exist in the graph.
            key: Explicit edge key. If None, a new key is generated.
            **attr: Arbitrary edge attributes.

        Returns:
            EdgeID: The key associated with this new edge.

        Raises:
            ValueError: If either node does not exist, or if the key is already in use.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],  # pyright: ignore[reportArgumentType]
        )
        return key

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove a directed edge by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, _ = self._edges.pop(key)
        super().remove_edge(src_node, dst_node, key=key)

    #
    # Convenience methods
    #
    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Retrieve a dictionary of all edges by their keys.

        Returns:
            Dict[EdgeID, EdgeTuple]: A mapping of edge key to
                ``(source_node, target_node, edge_key, edge_attributes)``.
        """
        return self._edges

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List all edge keys from node u to node v in insertion order.

        Returns:
            List[EdgeID]: Edge keys from u to v, or an empty list if none exist.
        """
        if u not in self.succ or v not in self.succ[u]:
            return []
        return sorted(self.succ[u][v].keys())

    def first_edge(self, u: NodeID, v: NodeID) -> Optional[EdgeTuple]:
        """Return the earliest added edge from u to v, or None."""
        keys = self.edges_between(u, v)
        if not keys:
            return None
        return self._edges[keys[0]]

    def out_edges_of(self, u: NodeID) -> List[EdgeTuple]:
        """Return all edges leaving u, ordered by insertion.

        Raises:
            ValueError: If u does not exist in the graph.
        """
        if u not in self:
            raise ValueError(f"Node '{u}' does not exist.")
        keys = sorted(key for edges in self.succ[u].values() for key in edges)
        return [self._edges[key] for key in keys]

    def out_degree_of(self, u: NodeID) -> int:
        """Return the number of edges leaving u, parallel edges included.

        Raises:
            ValueError: If u is not in the graph.
        """
        if u not in self:
            raise ValueError(f"Node '{u}' does not exist.")
        return sum(len(edges) for edges in self.succ[u].values())
