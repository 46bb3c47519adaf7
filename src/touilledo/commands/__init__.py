"""Subcommand modules for touilledo.

Provides register_commands() which uses deferred imports to keep
``touilledo --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from touilledo.commands._base import TodoGroup


def register_commands(cli: TodoGroup) -> None:
    """Register the item commands and their short aliases on the root group."""
    from touilledo.commands.clear import clear
    from touilledo.commands.delete import delete
    from touilledo.commands.done import done
    from touilledo.commands.new import new

    cli.add_command(new)
    cli.add_command(done)
    cli.add_command(delete)
    cli.add_command(clear)

    cli.add_alias("n", "new")
    cli.add_alias("d", "done")
