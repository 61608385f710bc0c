"""Depth-first and breadth-first visitation over an adjacency list."""

from __future__ import annotations

from collections import deque

from graphctl.domain.adjacency import build_adjacency_list
from graphctl.domain.models import GraphSnapshot


def depth_first_search(graph: GraphSnapshot, start_id: str) -> list[str]:
    """Return node ids in DFS pre-order from *start_id*.

    Uses an explicit stack of neighbor iterators so recursion depth is
    independent of graph size while keeping the exact order of the
    recursive form. An id that is not in the graph is still emitted,
    yielding ``[start_id]``.
    """
    adjacency = build_adjacency_list(graph)
    visited: set[str] = {start_id}
    order: list[str] = [start_id]
    stack = [iter(adjacency.get(start_id, ()))]

    while stack:
        for neighbor_id, _weight in stack[-1]:
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                order.append(neighbor_id)
                stack.append(iter(adjacency.get(neighbor_id, ())))
                break
        else:
            stack.pop()

    return order


def breadth_first_search(graph: GraphSnapshot, start_id: str) -> list[str]:
    """Return node ids in BFS (level) order from *start_id*.

    Same contract as :func:`depth_first_search` for absent start ids.
    """
    adjacency = build_adjacency_list(graph)
    visited: set[str] = {start_id}
    order: list[str] = []
    queue: deque[str] = deque([start_id])

    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor_id, _weight in adjacency.get(current, ()):
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                queue.append(neighbor_id)

    return order
