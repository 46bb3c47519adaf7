"""Root CLI group for touilledo with global flags and command registration."""

from __future__ import annotations

import click
from click.core import ParameterSource

from touilledo import __version__
from touilledo.commands import register_commands
from touilledo.commands._base import TodoGroup
from touilledo.commands._context import AppContext
from touilledo.config.settings import TodoSettings

_ROOT_EXAMPLES = """\
  touilledo                      # print the list
  touilledo new buy milk
  touilledo done 0
  touilledo del 0
  touilledo clear
  TOUILLEDO_URL=redis://:secret@cache:6379/2 touilledo"""


def _given(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return *value* only if the flag was typed, so env and TOML can set it."""
    if ctx.get_parameter_source(name) is ParameterSource.DEFAULT:
        return None
    return value


@click.group(cls=TodoGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="touilledo")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--url", default=None, help="Store URL (overrides TOUILLEDO_URL).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    url: str | None,
    config_path: str | None,
) -> None:
    """touilledo — a to-do list kept as one document in Redis.

    Without a command, prints the list. Item ids are positions: deleting an
    item renumbers every item after it.
    """
    flags = {"json_output": json_output, "quiet": quiet, "verbose": verbose, "log_json": log_json}
    settings = TodoSettings.from_cli(
        config_path=config_path,
        url=url,
        **{name: _given(ctx, name, value) for name, value in flags.items()},
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        app.emit(app.todos.list_items())


register_commands(cli)
