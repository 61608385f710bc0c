"""Command group: add, remove, and list edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from graphctl.commands._base import FINITE_FLOAT, GraphGroup

if TYPE_CHECKING:
    from graphctl.commands._context import AppContext

_EDGE_EXAMPLES = """\
  edge add A B
  edge add A B 2.5
  edge add A C 4 --directed
  edge remove A B
  edge list"""


@click.group(cls=GraphGroup, examples=_EDGE_EXAMPLES)
def edge() -> None:
    """Manage weighted edges between nodes."""


@edge.command(
    examples="""\
  edge add A B
  edge add A B 2.5
  edge add A C 4 --directed"""
)
@click.argument("start_id")
@click.argument("end_id")
@click.argument("weight", required=False, default=None, type=FINITE_FLOAT)
@click.option(
    "--directed/--undirected",
    default=None,
    help="Edge direction (default from [edges] directed).",
)
@click.pass_obj
def add(
    app: AppContext,
    start_id: str,
    end_id: str,
    weight: float | None,
    directed: bool | None,
) -> None:
    """Connect two existing nodes.

    WEIGHT defaults to the configured ``[edges] default_weight``.
    """
    defaults = app.settings.edges
    app.emit(
        app.service.add_edge(
            start_id,
            end_id,
            weight=defaults.default_weight if weight is None else weight,
            directed=defaults.directed if directed is None else directed,
        )
    )


@edge.command()
@click.argument("start_id")
@click.argument("end_id")
@click.pass_obj
def remove(app: AppContext, start_id: str, end_id: str) -> None:
    """Remove the edge from START_ID to END_ID.

    Undirected edges match in either order.
    """
    app.emit(app.service.remove_edge(start_id, end_id))


@edge.command(name="list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List edges in insertion order."""
    app.emit(app.service.list_edges())
