"""Rich Console factory and theme for graphctl output.

Consoles render into a StringIO buffer so renderers keep a
``ServiceResult -> str`` contract. Rich drops color codes on its own
when output is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRAPH_THEME = Theme(
    {
        "graph.ok": "bold green",
        "graph.error": "bold red",
        "graph.warning": "bold yellow",
        "graph.op": "bold cyan",
        "graph.key": "dim",
        "graph.id": "bold blue",
        "graph.weight": "magenta",
        "graph.inf": "dim",
        "graph.directed": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width for stable output.
    """
    return Console(
        file=StringIO(),
        theme=GRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
