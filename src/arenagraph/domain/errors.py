"""Precondition errors raised by the graph container.

Looking up an absent handle or aliasing the dual-access accessor is a bug
in the caller's bookkeeping, so these fail fast instead of returning a
sentinel. Removing an absent handle is not an error and raises nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arenagraph.domain.ids import EdgeId, NodeId


class GraphError(Exception):
    """Base class for graph precondition violations."""


class MissingNodeError(GraphError, KeyError):
    """A node handle does not reference a stored node."""

    def __init__(self, node_id: NodeId) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"No such node: {self.node_id}"


class MissingEdgeError(GraphError, KeyError):
    """An edge handle does not reference a stored edge."""

    def __init__(self, edge_id: EdgeId) -> None:
        super().__init__(edge_id)
        self.edge_id = edge_id

    def __str__(self) -> str:
        return f"No such edge: {self.edge_id}"


class AliasedAccessError(GraphError, ValueError):
    """Dual access was requested for the same node twice."""

    def __init__(self, node_id: NodeId) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Dual access requires two distinct nodes, got {self.node_id} twice"
