"""Detached snapshot cursors returned by adjacency queries.

A query scans the edge index once and copies its results into an owned
snapshot. Cursors step through that snapshot and never touch live graph
state, so mutating the graph after the query is never observed.

Cursors are fused: once exhausted they keep reporting exhaustion.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from arenagraph.domain.ids import NodeId


class _SnapshotCursor:
    """Position bookkeeping shared by both cursor kinds."""

    __slots__ = ("_done", "_pos", "_size")

    def __init__(self, size: int) -> None:
        self._size = size
        self._pos = 0
        self._done = False

    def _advance(self) -> int | None:
        if self._done:
            return None
        if self._pos == self._size:
            self._done = True
            return None
        idx = self._pos
        self._pos += 1
        return idx

    @property
    def remaining(self) -> int:
        return 0 if self._done else self._size - self._pos


class NeighborsCursor(_SnapshotCursor):
    """Steps through the neighbour handles captured by :class:`Neighbors`."""

    __slots__ = ("_ids",)

    def __init__(self, ids: Sequence[NodeId]) -> None:
        super().__init__(len(ids))
        self._ids = ids

    def next_node(self, graph: object = None) -> NodeId | None:
        """Return the next neighbour handle, or None when exhausted.

        *graph* is accepted so call sites can pass the graph they are
        walking; the cursor is detached and does not read it.
        """
        idx = self._advance()
        return None if idx is None else self._ids[idx]

    def __iter__(self) -> Iterator[NodeId]:
        return self

    def __next__(self) -> NodeId:
        node_id = self.next_node()
        if node_id is None:
            raise StopIteration
        return node_id


class NeighborPayloadsCursor[T](_SnapshotCursor):
    """Steps through neighbour payloads captured by :class:`NeighborPayloads`.

    Iteration yields payloads; :meth:`next_node` advances the same position
    and yields the neighbour's handle instead.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[tuple[NodeId, T]]) -> None:
        super().__init__(len(entries))
        self._entries = entries

    def next_node(self, graph: object = None) -> NodeId | None:
        idx = self._advance()
        return None if idx is None else self._entries[idx][0]

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        idx = self._advance()
        if idx is None:
            raise StopIteration
        return self._entries[idx][1]


class Neighbors:
    """Owned snapshot of a node's neighbour handles."""

    __slots__ = ("_ids",)

    def __init__(self, ids: Sequence[NodeId]) -> None:
        self._ids = tuple(ids)

    def detach(self) -> NeighborsCursor:
        return NeighborsCursor(self._ids)

    def __iter__(self) -> Iterator[NodeId]:
        return self.detach()

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"Neighbors({', '.join(str(n) for n in self._ids)})"


class NeighborPayloads[T]:
    """Owned snapshot of ``(handle, payload)`` pairs for a node's neighbours."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[tuple[NodeId, T]]) -> None:
        self._entries = tuple(entries)

    def detach(self) -> NeighborPayloadsCursor[T]:
        return NeighborPayloadsCursor(self._entries)

    def __iter__(self) -> Iterator[T]:
        return self.detach()

    def __len__(self) -> int:
        return len(self._entries)
