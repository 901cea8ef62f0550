"""Command: time a synthetic workload against the graph container."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from arenagraph.commands._base import ArenaCommand
from arenagraph.config.models import BenchConfig
from arenagraph.services.bench import BenchService

if TYPE_CHECKING:
    from arenagraph.commands._context import AppContext


@click.command(
    cls=ArenaCommand,
    examples="""\
  arenagraph bench
  arenagraph bench --nodes 5000 --edges-per-node 8
  arenagraph bench --compare --seed 7
  arenagraph --json bench --queries 1000"""
)
@click.option("--nodes", type=int, default=None, help="Number of nodes to insert.")
@click.option("--edges-per-node", type=int, default=None, help="Random edges per node.")
@click.option("--queries", type=int, default=None, help="Adjacency queries to run.")
@click.option("--seed", type=int, default=None, help="Random seed for the workload.")
@click.option("--compare", is_flag=True, help="Run with and without the incidence index.")
@click.pass_obj
def bench(
    app: AppContext,
    nodes: int | None,
    edges_per_node: int | None,
    queries: int | None,
    seed: int | None,
    compare: bool,
) -> None:
    """Measure insertion, adjacency queries, and cascading removal."""
    overrides = {
        k: v
        for k, v in {
            "nodes": nodes,
            "edges_per_node": edges_per_node,
            "queries": queries,
            "seed": seed,
        }.items()
        if v is not None
    }
    try:
        config = BenchConfig.model_validate({**app.settings.bench.model_dump(), **overrides})
    except ValidationError as exc:
        raise click.UsageError(f"Invalid workload: {exc.errors()[0]['msg']}") from exc
    app.emit(BenchService(config, app.settings.graph).run(compare=compare))
