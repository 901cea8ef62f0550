"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from arenagraph.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="bench", data={"nodes": 10})
        assert result.ok is True
        assert result.data == {"nodes": 10}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        result = ServiceResult(
            ok=False,
            op="bench",
            error=ServiceError(code="INVALID_WORKLOAD", message="bad"),
        )
        assert result.error is not None
        assert result.error.code == "INVALID_WORKLOAD"
        assert result.error.detail == {}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="bench")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult(ok=True, op="config", data={"graph": {"incidence_index": True}})
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["graph"]["incidence_index"] is True
