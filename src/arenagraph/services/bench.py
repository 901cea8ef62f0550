"""BenchService — times a synthetic workload against the graph container.

Each run builds a random graph, runs adjacency queries, then removes a
tenth of the nodes and confirms no edge outlived its endpoints. With
``compare=True`` the workload runs once per edge-index mode so the
linear-scan and incidence-index costs can be read side by side.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any

from arenagraph.config.models import BenchConfig, GraphConfig
from arenagraph.core.graph import Graph
from arenagraph.domain.ids import EdgeId, NodeId
from arenagraph.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)


class BenchService:
    """Run the ``bench`` workload described by a :class:`BenchConfig`."""

    def __init__(self, config: BenchConfig, graph_config: GraphConfig | None = None) -> None:
        self._config = config
        self._graph_config = graph_config or GraphConfig()

    def run(self, *, compare: bool = False) -> ServiceResult:
        cfg = self._config
        if cfg.edges_per_node and cfg.nodes < 2:
            return ServiceResult(
                ok=False,
                op="bench",
                error=ServiceError(
                    code="INVALID_WORKLOAD",
                    message="Edges need at least two nodes",
                    detail={"nodes": cfg.nodes, "edges_per_node": cfg.edges_per_node},
                ),
            )

        if compare:
            modes = [False, True]
        else:
            modes = [self._graph_config.incidence_index]

        runs = [self._run_once(incidence_index=mode) for mode in modes]

        warnings: list[str] = []
        for run in runs:
            if run["dangling_edges"]:
                warnings.append(f"{run['mode']}: {run['dangling_edges']} dangling edges")

        return ServiceResult(
            ok=not warnings,
            op="bench",
            data={
                "nodes": cfg.nodes,
                "edges": cfg.nodes * cfg.edges_per_node,
                "queries": cfg.queries,
                "runs": runs,
            },
            warnings=warnings,
            error=(
                ServiceError(code="INVARIANT_BROKEN", message="Edges outlived their endpoints")
                if warnings
                else None
            ),
            meta={"seed": cfg.seed},
        )

    def _run_once(self, *, incidence_index: bool) -> dict[str, Any]:
        cfg = self._config
        rng = random.Random(cfg.seed)
        mode = "incidence" if incidence_index else "scan"
        graph: Graph[int, float] = Graph(incidence_index=incidence_index)

        start = time.perf_counter()
        node_ids: list[NodeId] = [graph.add_node(i) for i in range(cfg.nodes)]
        for _ in range(cfg.nodes * cfg.edges_per_node):
            left, right = rng.sample(node_ids, 2)
            graph.add_edge(left, right, rng.random())
        build_ms = _elapsed_ms(start)

        start = time.perf_counter()
        neighbors_seen = 0
        for _ in range(cfg.queries):
            neighbors_seen += len(graph.neighbor_ids(rng.choice(node_ids)))
        query_ms = _elapsed_ms(start)

        victims = rng.sample(node_ids, max(1, cfg.nodes // 10))
        start = time.perf_counter()
        for node_id in victims:
            graph.remove_node(node_id)
        remove_ms = _elapsed_ms(start)

        removed = set(victims)
        edge_ids: list[EdgeId] = []
        graph.for_each_edge(lambda edge_id, *_: edge_ids.append(edge_id))
        dangling = sum(1 for e in edge_ids if not removed.isdisjoint(graph.edge_endpoints(e)))

        logger.debug(
            "Bench %s: build=%.1fms query=%.1fms remove=%.1fms",
            mode,
            build_ms,
            query_ms,
            remove_ms,
        )
        return {
            "mode": mode,
            "build_ms": build_ms,
            "query_ms": query_ms,
            "remove_ms": remove_ms,
            "neighbors_seen": neighbors_seen,
            "remaining_nodes": graph.node_count(),
            "remaining_edges": graph.edge_count(),
            "dangling_edges": dangling,
        }
