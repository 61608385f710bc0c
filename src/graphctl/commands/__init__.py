"""Subcommand modules for graphctl.

``register_commands`` wires the top-level commands onto the root group;
``build_session_group`` assembles the graph-editing commands that the
shell dispatches each input line to.
"""

from __future__ import annotations

import click


def register_commands(cli: click.Group) -> None:
    """Register top-level commands. Imports are deferred to keep ``--help`` fast."""
    from graphctl.commands.shell import shell

    cli.add_command(shell)


def build_session_group() -> click.Group:
    """Return a fresh group holding every command available inside the shell."""
    from graphctl.commands._base import GraphGroup
    from graphctl.commands.edge import edge
    from graphctl.commands.node import node
    from graphctl.commands.query import adjacency, bfs, dfs, distances, matrix, path, show

    group = GraphGroup(
        name="",
        help="Commands available inside the graphctl shell. Type 'exit' to leave.",
    )
    for cmd in (node, edge, show, adjacency, matrix, distances, dfs, bfs, path):
        group.add_command(cmd)
    return group
