"""Tests for PayloadStore and Slot."""

import pytest

from arenagraph.core.store import PayloadStore, Slot
from arenagraph.domain.errors import MissingNodeError
from arenagraph.domain.ids import NodeId


@pytest.fixture
def store() -> PayloadStore[NodeId, int]:
    s: PayloadStore[NodeId, int] = PayloadStore(MissingNodeError)
    s.insert(NodeId(0), 10)
    s.insert(NodeId(1), 20)
    return s


class TestPayloadStore:
    def test_get(self, store: PayloadStore[NodeId, int]) -> None:
        assert store.get(NodeId(0)) == 10

    def test_get_missing_raises_configured_error(self, store: PayloadStore[NodeId, int]) -> None:
        with pytest.raises(MissingNodeError):
            store.get(NodeId(99))

    def test_set_replaces(self, store: PayloadStore[NodeId, int]) -> None:
        store.set(NodeId(0), 11)
        assert store.get(NodeId(0)) == 11

    def test_set_missing_raises(self, store: PayloadStore[NodeId, int]) -> None:
        """set() never creates entries; only insert() does."""
        with pytest.raises(MissingNodeError):
            store.set(NodeId(99), 1)
        assert NodeId(99) not in store

    def test_remove_reports_presence(self, store: PayloadStore[NodeId, int]) -> None:
        assert store.remove(NodeId(0)) is True
        assert store.remove(NodeId(0)) is False
        assert len(store) == 1

    def test_remove_none_payload(self) -> None:
        """A stored None is still an entry."""
        s: PayloadStore[NodeId, None] = PayloadStore(MissingNodeError)
        s.insert(NodeId(0), None)
        assert s.remove(NodeId(0)) is True

    def test_items_and_keys(self, store: PayloadStore[NodeId, int]) -> None:
        assert dict(store.items()) == {NodeId(0): 10, NodeId(1): 20}
        assert set(store.keys()) == {NodeId(0), NodeId(1)}

    def test_contains(self, store: PayloadStore[NodeId, int]) -> None:
        assert NodeId(1) in store
        assert NodeId(2) not in store


class TestSlot:
    def test_read_and_write_through(self, store: PayloadStore[NodeId, int]) -> None:
        slot = store.slot(NodeId(1))
        assert slot.value == 20
        slot.value = 21
        assert store.get(NodeId(1)) == 21

    def test_sees_later_writes(self, store: PayloadStore[NodeId, int]) -> None:
        slot = store.slot(NodeId(1))
        store.set(NodeId(1), 30)
        assert slot.value == 30

    def test_update(self, store: PayloadStore[NodeId, int]) -> None:
        slot = store.slot(NodeId(0))
        assert slot.update(lambda v: v * 2) == 20
        assert store.get(NodeId(0)) == 20

    def test_slot_for_missing_key_raises(self, store: PayloadStore[NodeId, int]) -> None:
        with pytest.raises(MissingNodeError):
            store.slot(NodeId(5))

    def test_stale_slot_raises(self, store: PayloadStore[NodeId, int]) -> None:
        slot = store.slot(NodeId(0))
        store.remove(NodeId(0))
        with pytest.raises(MissingNodeError):
            _ = slot.value
        with pytest.raises(MissingNodeError):
            slot.value = 1

    def test_repr(self, store: PayloadStore[NodeId, int]) -> None:
        slot = Slot(store, NodeId(1))
        assert "NodeId" in repr(slot)
