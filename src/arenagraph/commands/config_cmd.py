"""Command: show the resolved configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arenagraph.commands._base import ArenaCommand
from arenagraph.services.config import ConfigService

if TYPE_CHECKING:
    from arenagraph.commands._context import AppContext


@click.command(
    "config",
    cls=ArenaCommand,
    examples="""\
  arenagraph config
  arenagraph --json config
  arenagraph -c ./arenagraph.toml config""",
)
@click.pass_obj
def config_cmd(app: AppContext) -> None:
    """Print settings merged from flags, environment, and arenagraph.toml."""
    app.emit(ConfigService(app.settings).show())
