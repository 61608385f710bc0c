"""Command: interactive shell over one in-memory graph.

Each input line is split with shell quoting rules and dispatched to the
session command group. The graph lives for the duration of the shell;
nothing is saved when it exits.
"""

from __future__ import annotations

import shlex
from typing import TYPE_CHECKING, TextIO

import click

from graphctl.commands import build_session_group
from graphctl.commands._base import GraphCommand

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_EXIT_WORDS = frozenset({"exit", "quit"})


def run_line(app: AppContext, group: click.Group, line: str) -> bool:
    """Run one shell line. Returns False when the session should end."""
    try:
        args = shlex.split(line, comments=True)
    except ValueError as exc:
        click.echo(f"ERROR: {exc}", err=True)
        return True

    if not args:
        return True
    if args[0].lower() in _EXIT_WORDS:
        return False
    if args[0].lower() == "help":
        args = [*args[1:], "--help"]

    try:
        group.main(args=args, prog_name="", obj=app, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
    except click.Abort:
        click.echo("Aborted.", err=True)
    return True


def run_session(app: AppContext, stream: TextIO, *, prompt: str | None = None) -> None:
    """Read lines from *stream* until EOF or an exit word."""
    group = build_session_group()
    while True:
        if prompt:
            click.echo(prompt, nl=False)
        line = stream.readline()
        if not line:
            break
        if not run_line(app, group, line):
            break


@click.command(
    cls=GraphCommand,
    examples="""\
  graphctl shell
  graphctl shell -f network.txt
  printf 'node add A\\nnode add B\\nedge add A B 3\\npath A B\\n' | graphctl shell""",
)
@click.option(
    "-f",
    "--file",
    "script",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Read commands from a file instead of stdin.",
)
@click.pass_obj
def shell(app: AppContext, script: TextIO | None) -> None:
    """Edit and query a graph interactively.

    Type 'help' for the command list and 'exit' to leave.
    """
    app.interactive = True
    stream = script or click.get_text_stream("stdin")
    prompt = app.settings.shell.prompt if stream.isatty() else None
    if prompt:
        click.echo("graphctl shell. Type 'help' for commands, 'exit' to leave.")
    run_session(app, stream, prompt=prompt)
