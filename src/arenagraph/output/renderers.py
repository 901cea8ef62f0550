"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from arenagraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from arenagraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="arena.ok"), Text(f"  {result.op}", style="arena.op"))


def _field(console: Console, key: str, value: Any, *, indent: int = 2) -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(Text(f"{' ' * indent}{key}: ", style="arena.key"), Text(str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        _field(console, k, v, indent=4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="arena.error"),
        Text(f"  {result.op}", style="arena.op"),
        Text(f" — {msg}"),
    )
    for warning in result.warnings:
        console.print(Text(f"  {warning}", style="arena.warning"))
    if verbose and err and err.detail:
        for k, v in err.detail.items():
            _field(console, k, v)


# ── bench ─────────────────────────────────────────────────────────────


def _render_bench(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("nodes", "edges", "queries"):
        _field(console, key, d[key])
    console.print()

    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Mode", style="arena.mode", no_wrap=True)
    for col in ("Build", "Query", "Remove"):
        table.add_column(f"{col} (ms)", style="arena.timing", justify="right")
    table.add_column("Neighbors", justify="right")
    table.add_column("Nodes left", justify="right")
    table.add_column("Edges left", justify="right")

    for run in d["runs"]:
        table.add_row(
            run["mode"],
            f"{run['build_ms']:.2f}",
            f"{run['query_ms']:.2f}",
            f"{run['remove_ms']:.2f}",
            str(run["neighbors_seen"]),
            str(run["remaining_nodes"]),
            str(run["remaining_edges"]),
        )
    console.print(table)

    if verbose:
        _render_meta(console, result)


# ── config ────────────────────────────────────────────────────────────


def _render_config(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict):
            console.print(Text(f"  [{key}]", style="arena.op"))
            for k, v in value.items():
                _field(console, k, v, indent=4)
        else:
            _field(console, key, value)
    _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "bench": _render_bench,
    "config": _render_config,
}
