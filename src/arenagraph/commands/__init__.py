"""Subcommand modules for arenagraph.

Provides register_commands(), which imports command modules lazily so
``arenagraph --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    from arenagraph.commands.bench import bench
    from arenagraph.commands.config_cmd import config_cmd

    cli.add_command(bench)
    cli.add_command(config_cmd)
