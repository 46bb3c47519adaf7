"""Command: add an item to the end of the list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from touilledo.commands._base import TodoCommand

if TYPE_CHECKING:
    from touilledo.commands._context import AppContext


@click.command(
    cls=TodoCommand,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
    examples="""\
  touilledo new buy milk
  touilledo n call the plumber about the -5 degree pipes
  touilledo new read the --help page
  touilledo new -- --examples is a word too
  touilledo --json new water the plants""",
)
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def new(app: AppContext, words: tuple[str, ...]) -> None:
    """Add a todo labelled WORDS (joined by single spaces). Alias: n.

    Options are only read before the first word; use ``--`` when the label
    itself starts with one.
    """
    app.emit(app.todos.add_item(" ".join(words)))
