"""Command group: add, remove, move, and list nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import FINITE_FLOAT, GraphGroup

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_NODE_EXAMPLES = """\
  node add A
  node add B --x 120 --y 40
  node move B 200 80
  node remove A
  node list"""


@click.group(cls=GraphGroup, examples=_NODE_EXAMPLES)
def node() -> None:
    """Manage graph nodes."""


@node.command(
    examples="""\
  node add A
  node add "Router 1" --x 10 --y 20"""
)
@click.argument("node_id")
@click.option("--x", "x", default=0.0, type=FINITE_FLOAT, help="Display x coordinate.")
@click.option("--y", "y", default=0.0, type=FINITE_FLOAT, help="Display y coordinate.")
@click.pass_obj
def add(app: AppContext, node_id: str, x: float, y: float) -> None:
    """Add a node with a unique id."""
    app.emit(app.service.add_node(node_id, x=x, y=y))


@node.command()
@click.argument("node_id")
@click.pass_obj
def remove(app: AppContext, node_id: str) -> None:
    """Remove a node and every edge touching it."""
    app.emit(app.service.remove_node(node_id))


@node.command()
@click.argument("node_id")
@click.argument("x", type=FINITE_FLOAT)
@click.argument("y", type=FINITE_FLOAT)
@click.pass_obj
def move(app: AppContext, node_id: str, x: float, y: float) -> None:
    """Set a node's display coordinates."""
    app.emit(app.service.move_node(node_id, x, y))


@node.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List nodes in insertion order."""
    app.emit(app.service.list_nodes())
