"""Edge index — endpoint pairs for every live edge.

Incident-edge lookup is a single linear scan over the index by default.
With ``incidence=True`` an incrementally maintained node -> edges map
answers in time proportional to the node's degree instead.
"""

from __future__ import annotations

from collections.abc import Iterator

from arenagraph.domain.errors import MissingEdgeError
from arenagraph.domain.ids import EdgeId, NodeId


class EdgeIndex:
    """Mapping from :class:`EdgeId` to its ordered ``(left, right)`` endpoints."""

    def __init__(self, *, incidence: bool = False) -> None:
        self._pairs: dict[EdgeId, tuple[NodeId, NodeId]] = {}
        # dict-as-ordered-set keeps incident edges in creation order
        self._incidence: dict[NodeId, dict[EdgeId, None]] | None = {} if incidence else None

    @property
    def uses_incidence(self) -> bool:
        return self._incidence is not None

    def add(self, edge_id: EdgeId, left: NodeId, right: NodeId) -> None:
        self._pairs[edge_id] = (left, right)
        if self._incidence is not None:
            self._incidence.setdefault(left, {})[edge_id] = None
            self._incidence.setdefault(right, {})[edge_id] = None

    def remove(self, edge_id: EdgeId) -> bool:
        pair = self._pairs.pop(edge_id, None)
        if pair is None:
            return False
        if self._incidence is not None:
            for node_id in set(pair):
                edges = self._incidence.get(node_id)
                if edges is None:
                    continue
                edges.pop(edge_id, None)
                if not edges:
                    del self._incidence[node_id]
        return True

    def endpoints(self, edge_id: EdgeId) -> tuple[NodeId, NodeId]:
        try:
            return self._pairs[edge_id]
        except KeyError:
            raise MissingEdgeError(edge_id) from None

    def incident(self, node_id: NodeId) -> list[EdgeId]:
        """Every edge with *node_id* at either endpoint, in creation order."""
        if self._incidence is not None:
            return list(self._incidence.get(node_id, ()))
        return [e for e, (left, right) in self._pairs.items() if node_id in (left, right)]

    def opposite(self, edge_id: EdgeId, node_id: NodeId) -> NodeId:
        """The endpoint of *edge_id* that is not *node_id*.

        A self-loop's opposite endpoint is the node itself.
        """
        left, right = self.endpoints(edge_id)
        return right if left == node_id else left

    def items(self) -> Iterator[tuple[EdgeId, tuple[NodeId, NodeId]]]:
        return iter(self._pairs.items())

    def __contains__(self, edge_id: object) -> bool:
        return edge_id in self._pairs

    def __len__(self) -> int:
        return len(self._pairs)
