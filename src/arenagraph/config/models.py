"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, arenagraph.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section — structural options for a Graph instance."""

    model_config = {"frozen": True, "extra": "forbid"}

    # Maintain a node -> incident edges map so adjacency queries and node
    # removal cost O(degree) instead of O(edges).
    incidence_index: bool = False


class BenchConfig(BaseModel):
    """[bench] section — workload shape for ``arenagraph bench``."""

    model_config = {"frozen": True, "extra": "forbid"}

    nodes: int = Field(default=1000, ge=1)
    edges_per_node: int = Field(default=4, ge=0)
    queries: int = Field(default=200, ge=0)
    seed: int = 0
