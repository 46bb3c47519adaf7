"""Command: replace the stored list with an empty one."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touilledo.commands._base import TodoCommand

if TYPE_CHECKING:
    from touilledo.commands._context import AppContext


@click.command(cls=TodoCommand)
@click.pass_obj
def clear(app: AppContext) -> None:
    """Remove every item. Also initializes a store that was never written."""
    app.emit(app.todos.clear_items())
