"""Tests for the edge index in both lookup modes."""

import pytest

from arenagraph.core.edge_index import EdgeIndex
from arenagraph.domain.errors import MissingEdgeError
from arenagraph.domain.ids import EdgeId, NodeId

A, B, C = NodeId(0), NodeId(1), NodeId(2)


@pytest.fixture(params=[False, True], ids=["scan", "incidence"])
def index(request: pytest.FixtureRequest) -> EdgeIndex:
    idx = EdgeIndex(incidence=request.param)
    idx.add(EdgeId(3), A, B)
    idx.add(EdgeId(4), B, C)
    idx.add(EdgeId(5), C, A)
    return idx


class TestEdgeIndex:
    def test_endpoints_keep_order(self, index: EdgeIndex) -> None:
        assert index.endpoints(EdgeId(5)) == (C, A)

    def test_endpoints_missing_raises(self, index: EdgeIndex) -> None:
        with pytest.raises(MissingEdgeError):
            index.endpoints(EdgeId(99))

    def test_incident_either_position(self, index: EdgeIndex) -> None:
        assert index.incident(A) == [EdgeId(3), EdgeId(5)]
        assert index.incident(B) == [EdgeId(3), EdgeId(4)]

    def test_incident_unknown_node(self, index: EdgeIndex) -> None:
        assert index.incident(NodeId(42)) == []

    def test_remove(self, index: EdgeIndex) -> None:
        assert index.remove(EdgeId(3)) is True
        assert EdgeId(3) not in index
        assert index.incident(A) == [EdgeId(5)]
        assert len(index) == 2

    def test_remove_absent_is_noop(self, index: EdgeIndex) -> None:
        assert index.remove(EdgeId(99)) is False
        assert len(index) == 3

    def test_opposite(self, index: EdgeIndex) -> None:
        assert index.opposite(EdgeId(3), A) == B
        assert index.opposite(EdgeId(3), B) == A

    def test_self_loop(self) -> None:
        idx = EdgeIndex(incidence=True)
        idx.add(EdgeId(1), A, A)
        assert idx.incident(A) == [EdgeId(1)]
        assert idx.opposite(EdgeId(1), A) == A
        idx.remove(EdgeId(1))
        assert idx.incident(A) == []

    def test_items(self, index: EdgeIndex) -> None:
        assert dict(index.items())[EdgeId(4)] == (B, C)


class TestModes:
    def test_scan_mode_flag(self) -> None:
        assert EdgeIndex().uses_incidence is False

    def test_incidence_mode_flag(self) -> None:
        assert EdgeIndex(incidence=True).uses_incidence is True
