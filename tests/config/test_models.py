"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from arenagraph.config.models import BenchConfig, GraphConfig


class TestGraphConfig:
    def test_defaults(self) -> None:
        assert GraphConfig().incidence_index is False

    def test_frozen(self) -> None:
        cfg = GraphConfig()
        with pytest.raises(ValidationError):
            cfg.incidence_index = True  # type: ignore[misc]


class TestBenchConfig:
    def test_defaults(self) -> None:
        cfg = BenchConfig()
        assert cfg.nodes == 1000
        assert cfg.edges_per_node == 4
        assert cfg.queries == 200
        assert cfg.seed == 0

    @pytest.mark.parametrize(
        "field,value",
        [("nodes", 0), ("edges_per_node", -1), ("queries", -5)],
    )
    def test_rejects_out_of_range(self, field: str, value: int) -> None:
        with pytest.raises(ValidationError):
            BenchConfig.model_validate({field: value})

    def test_zero_edges_allowed(self) -> None:
        assert BenchConfig(edges_per_node=0).edges_per_node == 0
