"""Rich Console factory and theme for arenagraph output.

Consoles render to a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ARENA_THEME = Theme(
    {
        "arena.ok": "bold green",
        "arena.error": "bold red",
        "arena.warning": "bold yellow",
        "arena.op": "bold cyan",
        "arena.key": "dim",
        "arena.mode": "bold blue",
        "arena.timing": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ARENA_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
