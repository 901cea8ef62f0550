"""Graph — the arena-style node/edge container.

Nodes and edges live in handle-keyed stores and share one allocator.
Edge endpoints live in a separate :class:`EdgeIndex` that is always
written together with the edge payload store.

INVARIANT: No stored edge ever references a removed node. Removing a
node removes every incident edge in the same call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from arenagraph.core.cursors import NeighborPayloads, Neighbors
from arenagraph.core.edge_index import EdgeIndex
from arenagraph.core.store import PayloadStore, Slot
from arenagraph.domain.errors import AliasedAccessError, MissingEdgeError, MissingNodeError
from arenagraph.domain.ids import EdgeId, IdAllocator, NodeId

logger = logging.getLogger(__name__)


class Graph[N, E]:
    """In-process graph with caller-chosen node payloads ``N`` and edge payloads ``E``.

    Not thread-safe. A graph assumes one logical owner at a time.

    Args:
        incidence_index: Keep a per-node incident-edge map so adjacency
            queries and node removal cost O(degree) instead of a full scan.
    """

    def __init__(self, *, incidence_index: bool = False) -> None:
        self._ids = IdAllocator()
        self._nodes: PayloadStore[NodeId, N] = PayloadStore(MissingNodeError)
        self._edges: PayloadStore[EdgeId, E] = PayloadStore(MissingEdgeError)
        self._index = EdgeIndex(incidence=incidence_index)

    @property
    def incidence_index(self) -> bool:
        return self._index.uses_incidence

    # -------------------- Nodes --------------------

    def add_node(self, payload: N = None) -> NodeId:  # type: ignore[assignment]
        node_id = NodeId(self._ids.allocate())
        self._nodes.insert(node_id, payload)
        return node_id

    def remove_node(self, node_id: NodeId) -> None:
        """Remove a node and every edge incident to it.

        Removing an absent node is a no-op.
        """
        if node_id not in self._nodes:
            return
        incident = self._index.incident(node_id)
        for edge_id in incident:
            self._index.remove(edge_id)
            self._edges.remove(edge_id)
        self._nodes.remove(node_id)
        logger.debug("Removed node %s with %d incident edges", node_id, len(incident))

    def get_node(self, node_id: NodeId) -> N:
        return self._nodes.get(node_id)

    def get_node_mut(self, node_id: NodeId) -> Slot[NodeId, N]:
        return self._nodes.slot(node_id)

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def node_count(self) -> int:
        return len(self._nodes)

    def for_each_node(self, fn: Callable[[NodeId, N], Any]) -> None:
        """Call ``fn(node_id, payload)`` for every node, in no guaranteed order."""
        for node_id, payload in self._nodes.items():
            fn(node_id, payload)

    def for_each_node_mut(self, fn: Callable[[NodeId, Slot[NodeId, N]], Any]) -> None:
        """Call ``fn(node_id, slot)`` for every node; writes land in the store."""
        for node_id in list(self._nodes.keys()):
            fn(node_id, Slot(self._nodes, node_id))

    # -------------------- Edges --------------------

    def add_edge(
        self,
        left: NodeId,
        right: NodeId,
        payload: E = None,  # type: ignore[assignment]
    ) -> EdgeId:
        """Connect *left* and *right*. Both endpoints must exist."""
        for endpoint in (left, right):
            if endpoint not in self._nodes:
                raise MissingNodeError(endpoint)
        edge_id = EdgeId(self._ids.allocate())
        self._edges.insert(edge_id, payload)
        self._index.add(edge_id, left, right)
        return edge_id

    def remove_edge(self, edge_id: EdgeId) -> None:
        """Remove an edge; its endpoint nodes are untouched. Absent edges are a no-op."""
        self._index.remove(edge_id)
        self._edges.remove(edge_id)

    def get_edge(self, edge_id: EdgeId) -> E:
        return self._edges.get(edge_id)

    def get_edge_mut(self, edge_id: EdgeId) -> Slot[EdgeId, E]:
        return self._edges.slot(edge_id)

    def edge_endpoints(self, edge_id: EdgeId) -> tuple[NodeId, NodeId]:
        return self._index.endpoints(edge_id)

    def has_edge(self, edge_id: EdgeId) -> bool:
        return edge_id in self._edges

    def edge_count(self) -> int:
        return len(self._edges)

    def for_each_edge(self, fn: Callable[[EdgeId, N, N, E], Any]) -> None:
        """Call ``fn(edge_id, left_payload, right_payload, edge_payload)`` for every edge."""
        for edge_id, (left, right) in self._index.items():
            fn(edge_id, self._nodes.get(left), self._nodes.get(right), self._edges.get(edge_id))

    # -------------------- Dual access --------------------

    def access_two_nodes_mut(
        self, first: NodeId, second: NodeId
    ) -> tuple[Slot[NodeId, N], Slot[NodeId, N]]:
        """Return independent writable slots for two distinct nodes.

        Raises:
            AliasedAccessError: If *first* and *second* are the same handle.
            MissingNodeError: If either node does not exist.
        """
        if first == second:
            raise AliasedAccessError(first)
        slots = (self._nodes.slot(first), self._nodes.slot(second))
        logger.debug("Dual access to %s and %s", first, second)
        return slots

    # -------------------- Adjacency --------------------

    def neighbor_ids(self, node_id: NodeId) -> Neighbors:
        """Snapshot of the opposite endpoint of every edge incident to *node_id*.

        A neighbour reached through parallel edges appears once per edge.
        An absent node has no neighbours.
        """
        return Neighbors([self._index.opposite(e, node_id) for e in self._index.incident(node_id)])

    def neighbor_payloads(self, node_id: NodeId) -> NeighborPayloads[N]:
        """Like :meth:`neighbor_ids`, but pairs each neighbour with its payload."""
        entries = []
        for edge_id in self._index.incident(node_id):
            other = self._index.opposite(edge_id, node_id)
            entries.append((other, self._nodes.get(other)))
        return NeighborPayloads(entries)

    # -------------------- Index access --------------------

    def __getitem__(self, handle: NodeId | EdgeId) -> Any:
        if isinstance(handle, NodeId):
            return self._nodes.get(handle)
        if isinstance(handle, EdgeId):
            return self._edges.get(handle)
        raise TypeError(f"Graph indices must be NodeId or EdgeId, not {type(handle).__name__}")

    def __setitem__(self, handle: NodeId | EdgeId, payload: Any) -> None:
        if isinstance(handle, NodeId):
            self._nodes.set(handle, payload)
        elif isinstance(handle, EdgeId):
            self._edges.set(handle, payload)
        else:
            raise TypeError(f"Graph indices must be NodeId or EdgeId, not {type(handle).__name__}")

    def __contains__(self, handle: object) -> bool:
        if isinstance(handle, NodeId):
            return handle in self._nodes
        if isinstance(handle, EdgeId):
            return handle in self._edges
        return False

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
