"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Holds the process-wide store handle (opened lazily,
closed when the root context tears down) and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from touilledo.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from touilledo.config.settings import TodoSettings
    from touilledo.infrastructure.store import TodoStore
    from touilledo.services.result import ServiceResult
    from touilledo.services.todo import TodoService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The store is lazily
    opened on first use so ``--help`` and ``--version`` never touch Redis.
    """

    def __init__(self, settings: TodoSettings) -> None:
        self.settings = settings
        self._store: TodoStore | None = None

        from touilledo.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> TodoStore:
        """The store gateway (connection opened on first access).

        An unusable store URL is fatal: the failure is emitted and the
        process exits with status 1.
        """
        if self._store is None:
            from touilledo.infrastructure.store import StorageError, TodoStore
            from touilledo.services.base import store_failure

            try:
                self._store = TodoStore.from_settings(self.settings)
            except StorageError as exc:
                self.emit(store_failure("connect", exc))
        assert self._store is not None
        return self._store

    @property
    def todos(self) -> TodoService:
        from touilledo.services.todo import TodoService

        return TodoService(self.store)

    def close(self) -> None:
        """Release the store connection, if one was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Non-fatal failure (bad id): writes to stderr, returns normally.
        * Fatal failure (store or format): writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=sys.stdout.isatty(),
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return

        click.echo(output, err=True)
        if result.error is None or result.error.fatal:
            raise SystemExit(1)
