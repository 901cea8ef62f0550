"""Typed handles and the shared identifier allocator.

Node and edge handles are drawn from one monotonic sequence, so handles
are globally ordered by creation time regardless of kind. The handle
types stay distinct: ``NodeId(3) != EdgeId(3)``.

INVARIANT: Handles are permanent. Once issued, a value is never issued again.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True, slots=True)
class NodeId:
    """Handle of a node stored in a :class:`~arenagraph.core.graph.Graph`."""

    value: int

    def __str__(self) -> str:
        return f"n{self.value}"


@dataclass(frozen=True, order=True, slots=True)
class EdgeId:
    """Handle of an edge stored in a :class:`~arenagraph.core.graph.Graph`."""

    value: int

    def __str__(self) -> str:
        return f"e{self.value}"


class IdAllocator:
    """Strictly increasing integer source, starting at zero."""

    __slots__ = ("_next",)

    def __init__(self) -> None:
        self._next = 0

    def allocate(self) -> int:
        value = self._next
        self._next += 1
        return value
