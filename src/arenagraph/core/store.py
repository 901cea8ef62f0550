"""Handle-keyed payload storage shared by nodes and edges.

A store exclusively owns its payloads. Callers reach a payload only
through its handle, and mutate it in place through a :class:`Slot`.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator


class PayloadStore[K: Hashable, T]:
    """Mapping from handle to payload.

    Args:
        missing: Builds the exception raised when a lookup misses.
    """

    __slots__ = ("_items", "_missing")

    def __init__(self, missing: Callable[[K], Exception]) -> None:
        self._items: dict[K, T] = {}
        self._missing = missing

    def insert(self, key: K, payload: T) -> None:
        self._items[key] = payload

    def get(self, key: K) -> T:
        try:
            return self._items[key]
        except KeyError:
            raise self._missing(key) from None

    def set(self, key: K, payload: T) -> None:
        """Replace the payload of an existing entry."""
        if key not in self._items:
            raise self._missing(key)
        self._items[key] = payload

    def slot(self, key: K) -> Slot[K, T]:
        if key not in self._items:
            raise self._missing(key)
        return Slot(self, key)

    def remove(self, key: K) -> bool:
        """Drop *key* if present. Returns whether anything was removed."""
        return self._items.pop(key, _ABSENT) is not _ABSENT

    def items(self) -> Iterator[tuple[K, T]]:
        return iter(self._items.items())

    def keys(self) -> Iterator[K]:
        return iter(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


class Slot[K: Hashable, T]:
    """Writable reference to one stored payload.

    Reads and writes go straight to the owning store, so a write is
    visible to every later lookup of the same handle. Accessing a slot
    whose entry has since been removed raises the store's missing error.
    """

    __slots__ = ("_key", "_store")

    def __init__(self, store: PayloadStore[K, T], key: K) -> None:
        self._store = store
        self._key = key

    @property
    def value(self) -> T:
        return self._store.get(self._key)

    @value.setter
    def value(self, payload: T) -> None:
        self._store.set(self._key, payload)

    def update(self, fn: Callable[[T], T]) -> T:
        """Replace the payload with ``fn(payload)`` and return the new value."""
        new = fn(self.value)
        self.value = new
        return new

    def __repr__(self) -> str:
        return f"Slot({self._key!r})"


_ABSENT = object()
