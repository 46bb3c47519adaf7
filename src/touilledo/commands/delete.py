"""Command: remove an item (named delete to avoid the ``del`` keyword)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touilledo.commands._base import TodoCommand

if TYPE_CHECKING:
    from touilledo.commands._context import AppContext


@click.command(
    "del",
    cls=TodoCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  touilledo del 2
  touilledo --json del 0""",
)
@click.argument("todo_id")
@click.pass_obj
def delete(app: AppContext, todo_id: str) -> None:
    """Remove item TODO_ID. Every later item's id drops by one."""
    app.emit(app.todos.delete_item(todo_id))
