"""Command: toggle the done flag of an item."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touilledo.commands._base import TodoCommand

if TYPE_CHECKING:
    from touilledo.commands._context import AppContext


@click.command(
    cls=TodoCommand,
    context_settings={"ignore_unknown_options": True},
    examples="""\
  touilledo done 0
  touilledo d 3
  touilledo done 3   # again: back to pending""",
)
@click.argument("todo_id")
@click.pass_obj
def done(app: AppContext, todo_id: str) -> None:
    """Mark item TODO_ID done, or pending again if it already is. Alias: d."""
    app.emit(app.todos.toggle_item(todo_id))
