"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`;
unknown ops fall back to a generic key-value renderer. Each writes to a
StringIO-backed Console and the caller gets plain text back.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from graphctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, precision: int = 2) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, precision=precision)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: ids, orders, or paths, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "path" in data:
        return " ".join(data["path"])
    if "order" in data:
        return " ".join(data["order"])
    items = data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if not isinstance(item, dict):
        return ""
    if "id" in item:
        return str(item["id"])
    if "start_id" in item:
        return f"{item['start_id']} {item['end_id']}"
    return ""


def _number(value: float | None, precision: int) -> str:
    if value is None:
        return "∞"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.{precision}f}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="graph.ok"), Text(f"  {result.op}", style="graph.op"), sep="")


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="graph.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="graph.id")
    elif key in ("weight", "distance"):
        v = Text(str(value), style="graph.weight")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = f"{prefix}[{style}]{duration:>8.3f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _matrix_table(
    node_order: list[str],
    matrix: list[list[float | None]],
    precision: int,
) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("", style="graph.id", no_wrap=True)
    for node_id in node_order:
        table.add_column(node_id, justify="right")
    for node_id, row in zip(node_order, matrix, strict=True):
        cells = [
            Text("∞", style="graph.inf") if w is None else Text(_number(w, precision))
            for w in row
        ]
        table.add_row(Text(node_id, style="graph.id"), *cells)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="graph.error"),
        Text(f"  {result.op}", style="graph.op"),
        Text(" — "),
        msg,
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    """Render node/edge add, remove, and move results."""
    _status_line(console, result)
    for key in ("id", "start_id", "end_id", "weight", "directed", "x", "y", "edges_removed"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


# ── Inspection renderers ──────────────────────────────────────────────


def _render_nodes(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="graph.id", no_wrap=True)
    table.add_column("X", justify="right")
    table.add_column("Y", justify="right")
    for item in items:
        table.add_row(
            str(item["id"]), _number(item["x"], precision), _number(item["y"], precision)
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} nodes")
    if verbose:
        _render_meta(console, result)


def _render_edges(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Start", style="graph.id", no_wrap=True)
    table.add_column("End", style="graph.id", no_wrap=True)
    table.add_column("Weight", style="graph.weight", justify="right")
    table.add_column("Directed", style="graph.directed")
    for item in items:
        table.add_row(
            str(item["start_id"]),
            str(item["end_id"]),
            _number(item["weight"], precision),
            "yes" if item["directed"] else "no",
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} edges")
    if verbose:
        _render_meta(console, result)


def _render_show(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    """Render the graph summary (nodes line, then one edge per line)."""
    d = result.data
    nodes = ", ".join(escape(nid) for nid in d.get("nodes", []))
    console.print(f"Nodes ({d.get('node_count', 0)}): {nodes}")
    console.print(f"Edges ({d.get('edge_count', 0)}):")
    for edge in d.get("edges", []):
        console.print(f"  {escape(edge)}")
    if verbose:
        _render_meta(console, result)


def _render_adjacency(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    for item in result.data.get("items", []):
        neighbors = ", ".join(
            f"{n['id']}({_number(n['weight'], precision)})" for n in item["neighbors"]
        )
        console.print(
            Text(str(item["id"]), style="graph.id"), Text(f" -> {neighbors or '-'}"), sep=""
        )
    if verbose:
        _render_meta(console, result)


def _render_matrix(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    node_order = result.data.get("node_order", [])
    if not node_order:
        console.print("Graph is empty.")
        return
    console.print(_matrix_table(node_order, result.data.get("matrix", []), precision))
    if verbose:
        _render_meta(console, result)


# ── Query renderers ───────────────────────────────────────────────────


def _render_traversal(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    order = result.data.get("order", [])
    start = escape(str(result.data.get("start_id")))
    console.print(f"{result.op.upper()} from [graph.id]{start}[/graph.id]:")
    console.print("  " + " → ".join(escape(nid) for nid in order))
    console.print(f"\n{len(order)} nodes visited")
    if verbose:
        _render_meta(console, result)


def _render_path(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    """Render a shortest path as a chain with its distance."""
    d = result.data
    chain = " → ".join(f"[graph.id]{escape(nid)}[/graph.id]" for nid in d.get("path", []))
    console.print(chain)
    console.print(
        f"\nDistance: {_number(d.get('distance'), precision)}"
        f"  Hops: {d.get('hops', 0)}  ({d.get('algorithm', '?')})"
    )
    if verbose:
        _render_meta(console, result)


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, precision: int = 2
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add_node": _render_mutation,
    "remove_node": _render_mutation,
    "move_node": _render_mutation,
    "add_edge": _render_mutation,
    "remove_edge": _render_mutation,
    # Inspection
    "list_nodes": _render_nodes,
    "list_edges": _render_edges,
    "show": _render_show,
    "adjacency": _render_adjacency,
    "matrix": _render_matrix,
    "distances": _render_matrix,
    # Queries
    "dfs": _render_traversal,
    "bfs": _render_traversal,
    "shortest_path": _render_path,
}
