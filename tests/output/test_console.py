"""Tests for the Rich console factory."""

from arenagraph.output.console import ARENA_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_custom_width(self) -> None:
        assert create_console(width=60).width == 60

    def test_theme_styles_resolve(self) -> None:
        console = create_console(no_color=True)
        console.print("[arena.ok]OK[/arena.ok]")
        assert get_output(console) == "OK\n"

    def test_theme_has_status_styles(self) -> None:
        for name in ("arena.ok", "arena.error", "arena.warning"):
            assert name in ARENA_THEME.styles
