"""Tests for Rich Console factory and theme."""

from io import StringIO

from rich.text import Text

from touilledo.output.console import TODO_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_plain_by_default(self) -> None:
        console = create_console()
        console.print(Text("[0] buy milk", style="todo.done"))
        output = get_output(console)
        assert "\x1b" not in output
        assert output == "[0] buy milk\n"

    def test_force_terminal_emits_styles(self) -> None:
        console = create_console(force_terminal=True)
        console.print(Text("done", style="todo.ok"))
        assert "\x1b" in get_output(console)

    def test_no_color_wins_over_terminal(self) -> None:
        console = create_console(force_terminal=True, no_color=True)
        console.print(Text("done", style="todo.error"))
        assert "\x1b[31" not in get_output(console)

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_has_status_styles(self) -> None:
        for name in ("todo.ok", "todo.error", "todo.op", "todo.done", "todo.index"):
            assert name in TODO_THEME.styles
