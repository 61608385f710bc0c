"""Shortest-path algorithms: unweighted BFS, Dijkstra, Floyd-Warshall.

Every entry point returns either a :class:`PathResult` or a :class:`NoPath`
member; none raises for missing ids or disconnected graphs.
"""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque

from graphctl.domain.adjacency import build_adjacency_list, build_adjacency_matrix
from graphctl.domain.models import FloydTable, GraphSnapshot, NoPath, PathOutcome, PathResult


def _walk_parents(parents: dict[str, str | None], end_id: str) -> tuple[str, ...]:
    """Follow parent pointers from *end_id* back to the root, then reverse."""
    path: list[str] = []
    node: str | None = end_id
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return tuple(path)


# ---------------------------------------------------------------------------
# Unweighted BFS
# ---------------------------------------------------------------------------


def bfs_shortest_path(graph: GraphSnapshot, start_id: str, end_id: str) -> PathOutcome:
    """Fewest-hops path from *start_id* to *end_id*, ignoring weights.

    Distance is the hop count (path length minus one).
    """
    if start_id == end_id:
        return PathResult(path=(start_id,), distance=0)

    adjacency = build_adjacency_list(graph)
    parents: dict[str, str | None] = {start_id: None}
    queue: deque[str] = deque([start_id])

    while queue:
        current = queue.popleft()
        if current == end_id:
            path = _walk_parents(parents, end_id)
            return PathResult(path=path, distance=len(path) - 1)
        for neighbor_id, _weight in adjacency.get(current, ()):
            if neighbor_id not in parents:
                parents[neighbor_id] = current
                queue.append(neighbor_id)

    return NoPath.UNREACHABLE


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------


def dijkstra(graph: GraphSnapshot, start_id: str, end_id: str) -> PathOutcome:
    """Least-weight path from *start_id* to *end_id*.

    Assumes non-negative weights; negative weights are neither rejected
    nor corrected, but finalized nodes are never relaxed again so the
    call always returns. Heap entries are ``(distance, sequence, id)``: equal
    distances pop in push order. A relaxation pushes a fresh entry and
    leaves the old one in place; popped entries whose distance no longer
    matches the best known distance are skipped.
    """
    adjacency = build_adjacency_list(graph)
    dist: dict[str, float] = {node_id: math.inf for node_id in adjacency}
    dist[start_id] = 0.0
    parents: dict[str, str | None] = {start_id: None}
    finalized: set[str] = set()

    counter = itertools.count()
    heap: list[tuple[float, int, str]] = [(0.0, next(counter), start_id)]

    while heap:
        current_dist, _seq, current = heapq.heappop(heap)
        if current in finalized or current_dist > dist[current]:
            continue
        finalized.add(current)
        if current == end_id:
            break
        for neighbor_id, weight in adjacency.get(current, ()):
            if neighbor_id in finalized:
                continue
            candidate = current_dist + weight
            if candidate < dist.get(neighbor_id, math.inf):
                dist[neighbor_id] = candidate
                parents[neighbor_id] = current
                heapq.heappush(heap, (candidate, next(counter), neighbor_id))

    final = dist.get(end_id, math.inf)
    if math.isinf(final):
        return NoPath.UNREACHABLE
    return PathResult(path=_walk_parents(parents, end_id), distance=final)


# ---------------------------------------------------------------------------
# Floyd-Warshall
# ---------------------------------------------------------------------------


def floyd_warshall(graph: GraphSnapshot) -> FloydTable:
    """Compute all-pairs shortest distances and next-hop pointers."""
    adjacency = build_adjacency_matrix(graph)
    n = len(adjacency.node_order)
    dist = [list(row) for row in adjacency.matrix]
    # A self-loop writes its weight onto the diagonal; staying put costs 0.
    for i in range(n):
        dist[i][i] = min(dist[i][i], 0.0)
    next_hop = [
        [j if i != j and not math.isinf(dist[i][j]) else -1 for j in range(n)]
        for i in range(n)
    ]

    for k in range(n):
        dist_k = dist[k]
        for i in range(n):
            dist_ik = dist[i][k]
            if math.isinf(dist_ik):
                continue
            dist_i = dist[i]
            for j in range(n):
                through = dist_ik + dist_k[j]
                if through < dist_i[j]:
                    dist_i[j] = through
                    next_hop[i][j] = next_hop[i][k]

    return FloydTable(
        dist=tuple(tuple(row) for row in dist),
        next_hop=tuple(tuple(row) for row in next_hop),
        node_order=adjacency.node_order,
    )


def rebuild_floyd_path(table: FloydTable, start_id: str, end_id: str) -> PathOutcome:
    """Reconstruct the shortest path between two ids from a :class:`FloydTable`.

    Returns ``NoPath.NOT_FOUND`` when either id is missing from the table's
    node ordering and ``NoPath.UNREACHABLE`` when no path exists.
    """
    start, end = table.index_of(start_id), table.index_of(end_id)
    if start is None or end is None:
        return NoPath.NOT_FOUND
    if math.isinf(table.dist[start][end]):
        return NoPath.UNREACHABLE

    path: list[str] = [table.node_order[start]]
    current = start
    # A simple path visits each index at most once.
    for _ in range(len(table.node_order)):
        if current == end:
            return PathResult(path=tuple(path), distance=table.dist[start][end])
        current = table.next_hop[current][end]
        if current < 0:
            break
        path.append(table.node_order[current])

    return NoPath.UNREACHABLE
