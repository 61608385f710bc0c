"""GraphEngine: the public graph API over a :class:`GraphStore`.

Every query takes a fresh snapshot of the store, so results reflect the
graph at call time and nothing is cached across calls. Floyd-Warshall
tables are the one value a caller may hold on to; they are immutable and
go stale silently if the graph changes afterwards.
"""

from __future__ import annotations

from graphctl.domain import adjacency, paths, traversal
from graphctl.domain.models import (
    AdjacencyList,
    AdjacencyMatrix,
    Edge,
    FloydTable,
    Node,
    PathOutcome,
)
from graphctl.infrastructure.graph.store import GraphStore


class GraphEngine:
    """Mutation, inspection, and query surface for one graph."""

    def __init__(self, store: GraphStore | None = None) -> None:
        self._store = store if store is not None else GraphStore()

    @property
    def store(self) -> GraphStore:
        return self._store

    # --- Mutation ---

    def add_node(self, node_id: str, x: float = 0.0, y: float = 0.0) -> bool:
        return self._store.add_node(Node(id=node_id, x=x, y=y))

    def remove_node(self, node_id: str) -> bool:
        return self._store.remove_node(node_id)

    def move_node(self, node_id: str, x: float, y: float) -> bool:
        return self._store.move_node(node_id, x, y)

    def add_edge(
        self,
        start_id: str,
        end_id: str,
        weight: float = 1.0,
        directed: bool = False,
    ) -> bool:
        return self._store.add_edge(
            Edge(start_id=start_id, end_id=end_id, weight=weight, directed=directed)
        )

    def remove_edge(self, start_id: str, end_id: str) -> bool:
        return self._store.remove_edge(start_id, end_id)

    # --- Inspection ---

    def get_node_by_id(self, node_id: str) -> Node | None:
        return self._store.get_node_by_id(node_id)

    def has_node(self, node_id: str) -> bool:
        return self._store.has_node(node_id)

    def get_nodes(self) -> list[Node]:
        return self._store.get_nodes()

    def get_edges(self) -> list[Edge]:
        return self._store.get_edges()

    # --- Queries ---

    def adjacency_list(self) -> AdjacencyList:
        return adjacency.build_adjacency_list(self._store.snapshot())

    def adjacency_matrix(self) -> AdjacencyMatrix:
        return adjacency.build_adjacency_matrix(self._store.snapshot())

    def depth_first_search(self, start_id: str) -> list[str]:
        return traversal.depth_first_search(self._store.snapshot(), start_id)

    def breadth_first_search(self, start_id: str) -> list[str]:
        return traversal.breadth_first_search(self._store.snapshot(), start_id)

    def bfs_shortest_path(self, start_id: str, end_id: str) -> PathOutcome:
        return paths.bfs_shortest_path(self._store.snapshot(), start_id, end_id)

    def dijkstra(self, start_id: str, end_id: str) -> PathOutcome:
        return paths.dijkstra(self._store.snapshot(), start_id, end_id)

    def floyd_warshall(self) -> FloydTable:
        return paths.floyd_warshall(self._store.snapshot())

    def rebuild_floyd_path(self, table: FloydTable, start_id: str, end_id: str) -> PathOutcome:
        return paths.rebuild_floyd_path(table, start_id, end_id)
