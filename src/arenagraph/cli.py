"""Root CLI group for arenagraph with global flags and command registration."""

from __future__ import annotations

import click

from arenagraph import __version__
from arenagraph.commands import register_commands
from arenagraph.commands._base import ArenaGroup
from arenagraph.commands._context import AppContext
from arenagraph.config.settings import ArenaSettings


@click.group(cls=ArenaGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="arenagraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--trace", is_flag=True, help="Log every graph mutation (very noisy).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    trace: bool,
    config_path: str | None,
) -> None:
    """arenagraph — inspect and benchmark the arena graph container."""
    # Only explicit flags override env vars and TOML.
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "trace": trace,
    }
    settings = ArenaSettings.from_cli(
        config_path=config_path,
        **{k: v for k, v in flags.items() if v},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
