"""Custom Click base classes with --examples and alias support.

Provides TodoCommand and TodoGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
TodoGroup also resolves short aliases (``n`` for ``new``, ``d`` for
``done``) to their canonical commands.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TodoCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class TodoGroup(click.Group):
    """Click Group subclass with ``--examples`` and command aliases.

    Sets ``command_class = TodoCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    Aliases are hidden from the command list; ``resolve_command`` reports
    the canonical name as ``ctx.invoked_subcommand``.
    """

    command_class = TodoCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.aliases: dict[str, str] = {}
        if examples:
            _add_examples_option(self, examples)

    def add_alias(self, alias: str, name: str) -> None:
        """Make *alias* invoke the registered command *name*."""
        self.aliases[alias] = name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        _name, cmd, rest = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, rest
