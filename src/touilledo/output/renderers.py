"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.color import ColorSystem
from rich.text import Text

from touilledo.domain.tasks import TaskItem, format_item
from touilledo.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from touilledo.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) unless *color* is set.
    """
    console = create_console(force_terminal=color)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).removesuffix("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Listing still prints the bare lines; mutations print nothing on success.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list":
        return "\n".join(format_item(i, item) for i, item in _items(result))
    return ""


# ── Helpers ───────────────────────────────────────────────────────────


def _items(result: ServiceResult) -> list[tuple[int, TaskItem]]:
    """Rebuild ``(index, TaskItem)`` pairs from a list payload."""
    return [
        (int(entry["index"]), TaskItem(done=bool(entry["done"]), label=str(entry["label"])))
        for entry in result.data.get("items", [])
    ]


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="todo.ok")
    op = Text(f"  {result.op}", style="todo.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="todo.key")
    v = Text(str(value), style="todo.index" if key == "index" else "")
    console.print(k, v, end="", soft_wrap=True)
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="todo.error")
    op = Text(f"  {result.op}", style="todo.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if verbose and err is not None:
        console.print(Text(f"  code: {err.code}", style="todo.key"))
        if err.detail:
            console.print(Text("  detail:", style="todo.key"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"), soft_wrap=True)


# ── Success renderers ─────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the list exactly as ``TaskList.render`` lays it out.

    Lines bypass Rich's text pipeline, which would expand tabs and drop
    control characters from labels; colour only wraps them in the style's
    escape codes.
    """
    color_system = _COLOR_SYSTEMS.get(console.color_system or "")
    for index, item in _items(result):
        line = format_item(index, item)
        if color_system is not None and not console.no_color:
            style = console.get_style("todo.done" if item.done else "todo.pending")
            line = style.render(line, color_system=color_system)
        console.file.write(line + "\n")

    if verbose:
        data = result.data
        console.print(
            Text(
                f"{data.get('count', 0)} item(s): "
                f"{data.get('pending', 0)} pending, {data.get('done', 0)} done",
                style="todo.key",
            )
        )


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("index", "label", "done", "count"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list": _render_list,
    "add": _render_mutation,
    "done": _render_mutation,
    "delete": _render_mutation,
    "clear": _render_mutation,
}
