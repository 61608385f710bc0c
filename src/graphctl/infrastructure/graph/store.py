"""GraphStore: owner of the node and edge collections.

INVARIANTS:
  1. Node ids are unique.
  2. Both endpoints of every stored edge exist in the node map.
  3. Edge keys (:attr:`Edge.key`) are unique, so an undirected edge and
     its reversal cannot both be stored.
  4. Removing a node first removes every incident edge.

Expected failures (duplicate, missing endpoint, unknown id) are reported
as ``False``/``None``; nothing here raises for them. Callers only ever
receive copies of the collections.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from graphctl.domain.models import Edge, EdgeKey, GraphSnapshot, Node

logger = logging.getLogger(__name__)


class GraphStore:
    """Insertion-ordered node and edge maps keyed by value."""

    def __init__(self) -> None:
        self._nodes: dict[str, Node] = {}
        self._edges: dict[EdgeKey, Edge] = {}

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node: Node) -> bool:
        """Insert *node*; False if a node with the same id exists."""
        if node.id in self._nodes:
            logger.debug("Rejected duplicate node %s", node.id)
            return False
        self._nodes[node.id] = node
        return True

    def remove_node(self, node_id: str) -> bool:
        """Remove a node and every edge incident to it."""
        if node_id not in self._nodes:
            return False
        incident = [key for key, edge in self._edges.items() if edge.touches(node_id)]
        for key in incident:
            del self._edges[key]
        del self._nodes[node_id]
        logger.debug("Removed node %s with %d incident edge(s)", node_id, len(incident))
        return True

    def move_node(self, node_id: str, x: float, y: float) -> bool:
        """Update display coordinates; edges are unaffected."""
        node = self._nodes.get(node_id)
        if node is None:
            return False
        self._nodes[node_id] = replace(node, x=x, y=y)
        return True

    def get_node_by_id(self, node_id: str) -> Node | None:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def get_nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, edge: Edge) -> bool:
        """Insert *edge*; False if an equal edge exists or an endpoint is missing."""
        if edge.key in self._edges:
            logger.debug("Rejected duplicate edge %s", edge)
            return False
        if edge.start_id not in self._nodes or edge.end_id not in self._nodes:
            logger.debug("Rejected edge with missing endpoint %s", edge)
            return False
        self._edges[edge.key] = edge
        return True

    def find_edge(self, start_id: str, end_id: str) -> Edge | None:
        """First edge, in insertion order, addressable as ``start_id -> end_id``.

        Undirected edges match in either order; directed edges only as stored.
        """
        for edge in self._edges.values():
            if edge.connects(start_id, end_id):
                return edge
        return None

    def remove_edge(self, start_id: str, end_id: str) -> bool:
        """Remove the edge found by :meth:`find_edge`; False if there is none."""
        edge = self.find_edge(start_id, end_id)
        if edge is None:
            return False
        del self._edges[edge.key]
        return True

    def get_edges(self) -> list[Edge]:
        return list(self._edges.values())

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ------------------------------------------------------------------
    # Whole-graph
    # ------------------------------------------------------------------

    def snapshot(self) -> GraphSnapshot:
        """Immutable copy of the current nodes and edges for algorithms."""
        return GraphSnapshot(nodes=tuple(self._nodes.values()), edges=tuple(self._edges.values()))
