"""Graph views, traversals, and shortest-path queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import GraphCommand
from graphctl.services.graph import PathAlgorithm

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext


@click.command(cls=GraphCommand)
@click.pass_obj
def show(app: AppContext) -> None:
    """Print every node and edge."""
    app.emit(app.service.show())


@click.command(cls=GraphCommand)
@click.pass_obj
def adjacency(app: AppContext) -> None:
    """Print each node's neighbors with edge weights."""
    app.emit(app.service.adjacency())


@click.command(cls=GraphCommand)
@click.pass_obj
def matrix(app: AppContext) -> None:
    """Print the adjacency matrix (∞ where no direct edge exists)."""
    app.emit(app.service.matrix())


@click.command(cls=GraphCommand)
@click.pass_obj
def distances(app: AppContext) -> None:
    """Print all-pairs shortest distances (Floyd-Warshall)."""
    app.emit(app.service.distances())


@click.command(cls=GraphCommand, examples="  dfs A")
@click.argument("start_id")
@click.pass_obj
def dfs(app: AppContext, start_id: str) -> None:
    """Depth-first traversal order from START_ID."""
    app.emit(app.service.traverse(start_id))


@click.command(cls=GraphCommand, examples="  bfs A")
@click.argument("start_id")
@click.pass_obj
def bfs(app: AppContext, start_id: str) -> None:
    """Breadth-first traversal order from START_ID."""
    app.emit(app.service.traverse(start_id, breadth_first=True))


@click.command(
    cls=GraphCommand,
    examples="""\
  path A D
  path A D --algorithm bfs
  path A D -a floyd""",
)
@click.argument("start_id")
@click.argument("end_id")
@click.option(
    "-a",
    "--algorithm",
    type=click.Choice([a.value for a in PathAlgorithm], case_sensitive=False),
    default=PathAlgorithm.DIJKSTRA.value,
    show_default=True,
    help="bfs counts hops; dijkstra and floyd minimize total weight.",
)
@click.pass_obj
def path(app: AppContext, start_id: str, end_id: str, algorithm: str) -> None:
    """Shortest path from START_ID to END_ID."""
    app.emit(app.service.shortest_path(start_id, end_id, algorithm=algorithm.lower()))
