"""Rich Console factory and theme for touilledo output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. Colour is only produced when the
caller asks for a terminal; tests and pipes get plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TODO_THEME = Theme(
    {
        "todo.ok": "bold green",
        "todo.error": "bold red",
        "todo.warning": "bold yellow",
        "todo.op": "bold cyan",
        "todo.key": "dim",
        "todo.index": "bold blue",
        "todo.pending": "",
        "todo.done": "dim",
    }
)


def create_console(
    *,
    no_color: bool = False,
    force_terminal: bool = False,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        force_terminal: Emit styles even though the buffer is not a TTY
            (set when the real stdout is a terminal).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TODO_THEME,
        no_color=no_color,
        force_terminal=force_terminal or None,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
