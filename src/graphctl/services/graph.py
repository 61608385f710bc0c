"""GraphService: graph mutations and queries in the ServiceResult contract.

Thin layer over :class:`GraphEngine`: it checks ids up front so that
failures carry a precise error code, converts domain values to JSON-safe
payloads, and traces every call.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import Any

from graphctl.domain.models import Edge, NoPath, PathResult
from graphctl.services.base import BaseService
from graphctl.services.result import ServiceResult
from graphctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class PathAlgorithm(StrEnum):
    """Shortest-path strategies selectable by callers."""

    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    FLOYD = "floyd"


def _finite_or_none(value: float) -> float | None:
    return None if math.isinf(value) else value


def _edge_payload(edge: Edge) -> dict[str, Any]:
    return {
        "start_id": edge.start_id,
        "end_id": edge.end_id,
        "weight": edge.weight,
        "directed": edge.directed,
    }


class GraphService(BaseService):
    """Handles graph mutation, inspection, traversal, and path queries."""

    def _missing(self, op: str, node_id: str, label: str = "node") -> ServiceResult:
        return ServiceResult.fail(
            op,
            "NOT_FOUND",
            f"Node '{node_id}' ({label}) not found in graph",
            id=node_id,
        )

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    @traced
    def add_node(self, node_id: str, *, x: float = 0.0, y: float = 0.0) -> ServiceResult:
        op = "add_node"
        if not self._engine.add_node(node_id, x=x, y=y):
            return ServiceResult.fail(
                op, "DUPLICATE", f"Node '{node_id}' already exists", id=node_id
            )
        return ServiceResult(ok=True, op=op, data={"id": node_id, "x": x, "y": y})

    @traced
    def remove_node(self, node_id: str) -> ServiceResult:
        """Remove a node; reports how many incident edges went with it."""
        op = "remove_node"
        incident = sum(1 for e in self._engine.get_edges() if e.touches(node_id))
        if not self._engine.remove_node(node_id):
            return self._missing(op, node_id)
        logger.debug("Node %s removed along with %d edge(s)", node_id, incident)
        return ServiceResult(ok=True, op=op, data={"id": node_id, "edges_removed": incident})

    @traced
    def move_node(self, node_id: str, x: float, y: float) -> ServiceResult:
        op = "move_node"
        if not self._engine.move_node(node_id, x, y):
            return self._missing(op, node_id)
        return ServiceResult(ok=True, op=op, data={"id": node_id, "x": x, "y": y})

    @traced
    def list_nodes(self) -> ServiceResult:
        items = [{"id": n.id, "x": n.x, "y": n.y} for n in self._engine.get_nodes()]
        return ServiceResult(ok=True, op="list_nodes", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    @traced
    def add_edge(
        self,
        start_id: str,
        end_id: str,
        *,
        weight: float = 1.0,
        directed: bool = False,
    ) -> ServiceResult:
        """Add an edge, distinguishing missing endpoints from duplicates."""
        op = "add_edge"
        missing = list(
            dict.fromkeys(
                nid for nid in (start_id, end_id) if not self._engine.has_node(nid)
            )
        )
        if missing:
            return ServiceResult.fail(
                op,
                "MISSING_ENDPOINT",
                f"Endpoint(s) not in graph: {', '.join(missing)}",
                missing=missing,
            )

        edge = Edge(start_id=start_id, end_id=end_id, weight=weight, directed=directed)
        if not self._engine.add_edge(start_id, end_id, weight=weight, directed=directed):
            arrow = "->" if directed else "--"
            return ServiceResult.fail(
                op, "DUPLICATE", f"Edge {start_id} {arrow} {end_id} already exists"
            )
        return ServiceResult(ok=True, op=op, data=_edge_payload(edge))

    @traced
    def remove_edge(self, start_id: str, end_id: str) -> ServiceResult:
        op = "remove_edge"
        edge = self._engine.store.find_edge(start_id, end_id)
        if edge is None or not self._engine.remove_edge(start_id, end_id):
            return ServiceResult.fail(
                op,
                "NOT_FOUND",
                f"No edge from '{start_id}' to '{end_id}'",
                start_id=start_id,
                end_id=end_id,
            )
        return ServiceResult(ok=True, op=op, data=_edge_payload(edge))

    @traced
    def list_edges(self) -> ServiceResult:
        items = [_edge_payload(e) for e in self._engine.get_edges()]
        return ServiceResult(ok=True, op="list_edges", data={"count": len(items), "items": items})

    # ------------------------------------------------------------------
    # Whole-graph views
    # ------------------------------------------------------------------

    @traced
    def show(self) -> ServiceResult:
        """Summarize the graph: nodes in insertion order and edges as text."""
        nodes = self._engine.get_nodes()
        edges = self._engine.get_edges()
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "node_count": len(nodes),
                "edge_count": len(edges),
                "nodes": [n.id for n in nodes],
                "edges": [str(e) for e in edges],
            },
        )

    @traced
    def adjacency(self) -> ServiceResult:
        adjacency = self._engine.adjacency_list()
        items = [
            {
                "id": node_id,
                "neighbors": [{"id": nid, "weight": w} for nid, w in neighbors],
            }
            for node_id, neighbors in adjacency.items()
        ]
        return ServiceResult(ok=True, op="adjacency", data={"count": len(items), "items": items})

    @traced
    def matrix(self) -> ServiceResult:
        """Adjacency matrix; missing edges are ``None`` in the payload."""
        adj = self._engine.adjacency_matrix()
        return ServiceResult(
            ok=True,
            op="matrix",
            data={
                "node_order": list(adj.node_order),
                "matrix": [[_finite_or_none(w) for w in row] for row in adj.matrix],
            },
        )

    @traced
    def distances(self) -> ServiceResult:
        """All-pairs shortest distances from Floyd-Warshall."""
        with trace_span("floyd_warshall") as span:
            table = self._engine.floyd_warshall()
            if span:
                span.annotate("nodes", len(table.node_order))
        return ServiceResult(
            ok=True,
            op="distances",
            data={
                "node_order": list(table.node_order),
                "matrix": [[_finite_or_none(d) for d in row] for row in table.dist],
            },
        )

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    @traced
    def traverse(self, start_id: str, *, breadth_first: bool = False) -> ServiceResult:
        """Visit every node reachable from *start_id* in DFS or BFS order."""
        op = "bfs" if breadth_first else "dfs"
        if not self._engine.has_node(start_id):
            return self._missing(op, start_id, "start")

        if breadth_first:
            order = self._engine.breadth_first_search(start_id)
        else:
            order = self._engine.depth_first_search(start_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"start_id": start_id, "count": len(order), "order": order},
        )

    # ------------------------------------------------------------------
    # Shortest path
    # ------------------------------------------------------------------

    @traced
    def shortest_path(
        self,
        start_id: str,
        end_id: str,
        *,
        algorithm: str = PathAlgorithm.DIJKSTRA,
    ) -> ServiceResult:
        """Find a shortest path with the chosen algorithm.

        ``bfs`` counts hops and ignores weights; ``dijkstra`` and ``floyd``
        minimize total weight.
        """
        op = "shortest_path"
        try:
            algo = PathAlgorithm(algorithm)
        except ValueError:
            choices = ", ".join(a.value for a in PathAlgorithm)
            return ServiceResult.fail(
                op,
                "UNKNOWN_ALGORITHM",
                f"Unknown algorithm '{algorithm}' (choose from {choices})",
            )

        for nid, label in [(start_id, "start"), (end_id, "end")]:
            if not self._engine.has_node(nid):
                return self._missing(op, nid, label)

        with trace_span(algo.value) as span:
            if algo is PathAlgorithm.BFS:
                outcome = self._engine.bfs_shortest_path(start_id, end_id)
            elif algo is PathAlgorithm.DIJKSTRA:
                outcome = self._engine.dijkstra(start_id, end_id)
            else:
                table = self._engine.floyd_warshall()
                outcome = self._engine.rebuild_floyd_path(table, start_id, end_id)
            if span:
                span.annotate("found", isinstance(outcome, PathResult))

        if outcome is NoPath.NOT_FOUND:
            return self._missing(op, start_id, "start")
        if not isinstance(outcome, PathResult):
            return ServiceResult.fail(
                op,
                "NO_PATH",
                f"No path between '{start_id}' and '{end_id}'",
                algorithm=algo.value,
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "algorithm": algo.value,
                "start_id": start_id,
                "end_id": end_id,
                "path": list(outcome.path),
                "distance": outcome.distance,
                "hops": outcome.hops,
            },
        )
