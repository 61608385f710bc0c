"""Graph value types: nodes, edges, snapshots, and query results.

Edges reference nodes by id only. Identity for edges is a value key
(:attr:`Edge.key`), so reversed undirected insertions collide in any
dict or set keyed by it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum

# (first_id, second_id, directed). Undirected keys sort the two ids.
type EdgeKey = tuple[str, str, bool]

# Per-node ordered (neighbor_id, weight) pairs.
type AdjacencyList = dict[str, list[tuple[str, float]]]


@dataclass(frozen=True)
class Node:
    """A graph vertex. ``x``/``y`` are display coordinates, opaque to algorithms."""

    id: str
    x: float = field(default=0.0, compare=False)
    y: float = field(default=0.0, compare=False)


@dataclass(frozen=True)
class Edge:
    """A weighted connection between two node ids."""

    start_id: str
    end_id: str
    weight: float = 1.0
    directed: bool = False

    @property
    def key(self) -> EdgeKey:
        """Canonical identity used by the store for duplicate detection."""
        if self.directed:
            return (self.start_id, self.end_id, True)
        low, high = sorted((self.start_id, self.end_id))
        return (low, high, False)

    def touches(self, node_id: str) -> bool:
        return node_id in (self.start_id, self.end_id)

    def connects(self, start_id: str, end_id: str) -> bool:
        """True if this edge can be addressed as ``start_id -> end_id``.

        Directed edges match only their stored order; undirected edges
        match either order.
        """
        if (self.start_id, self.end_id) == (start_id, end_id):
            return True
        return not self.directed and (self.end_id, self.start_id) == (start_id, end_id)

    def __str__(self) -> str:
        arrow = "->" if self.directed else "--"
        return f"{self.start_id} {arrow} {self.end_id} (w={self.weight:g})"


@dataclass(frozen=True)
class GraphSnapshot:
    """Immutable copy of a graph's nodes and edges in insertion order."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    @property
    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]


@dataclass(frozen=True)
class AdjacencyMatrix:
    """Dense weight matrix indexed by a fixed node ordering."""

    matrix: tuple[tuple[float, ...], ...]
    node_order: tuple[str, ...]

    def index_of(self, node_id: str) -> int | None:
        try:
            return self.node_order.index(node_id)
        except ValueError:
            return None

    def weight(self, start_id: str, end_id: str) -> float:
        """Direct edge weight, ``inf`` if absent or either id is unknown."""
        i, j = self.index_of(start_id), self.index_of(end_id)
        if i is None or j is None:
            return math.inf
        return self.matrix[i][j]


@dataclass(frozen=True)
class PathResult:
    """A found path: ordered node ids and its total distance."""

    path: tuple[str, ...]
    distance: float

    @property
    def hops(self) -> int:
        return len(self.path) - 1


class NoPath(StrEnum):
    """Explicit outcome when a shortest-path query yields no path."""

    UNREACHABLE = "unreachable"
    NOT_FOUND = "not_found"


type PathOutcome = PathResult | NoPath


@dataclass(frozen=True)
class FloydTable:
    """All-pairs distances and next-hop pointers from Floyd-Warshall.

    Attributes:
        dist: ``dist[i][j]`` is the shortest distance, ``inf`` if unreachable.
        next_hop: ``next_hop[i][j]`` is the index following ``i`` on the
            shortest path to ``j``, or -1 when there is none.
        node_order: Maps matrix indices back to node ids.
    """

    dist: tuple[tuple[float, ...], ...]
    next_hop: tuple[tuple[int, ...], ...]
    node_order: tuple[str, ...]

    def index_of(self, node_id: str) -> int | None:
        try:
            return self.node_order.index(node_id)
        except ValueError:
            return None
