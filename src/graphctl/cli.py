"""graphctl entry point: global flags, settings, and the command tree."""

from __future__ import annotations

from typing import Any

import click

from graphctl import __version__
from graphctl.commands import register_commands
from graphctl.commands._base import GraphGroup
from graphctl.commands._context import AppContext
from graphctl.config.settings import GraphSettings


@click.group(
    cls=GraphGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    examples="""\
  graphctl shell
  graphctl --json shell -f network.txt
  graphctl -c ./graphctl.toml -v shell""",
)
@click.version_option(version=__version__, prog_name="graphctl")
@click.option("--json", "json_output", is_flag=True, help="Emit each result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ids, orders, and paths.")
@click.option("-v", "--verbose", is_flag=True, help="Show error detail and span timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="Use this TOML file instead of searching for graphctl.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """graphctl builds weighted graphs and queries paths through them.

    Graphs live in memory for one `shell` session.
    """
    ctx.obj = AppContext(GraphSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
