"""Adjacency views derived from a graph snapshot.

Pure functions, rebuilt on every call and never cached. Neighbor order
follows edge-insertion order, which fixes traversal and relaxation order
for every algorithm downstream.
"""

from __future__ import annotations

import math

from graphctl.domain.models import AdjacencyList, AdjacencyMatrix, GraphSnapshot


def build_adjacency_list(graph: GraphSnapshot) -> AdjacencyList:
    """Map each node id to its ordered ``(neighbor_id, weight)`` pairs.

    Every node gets an entry, isolated nodes included. An undirected edge
    contributes the forward pair to its start node and the reverse pair
    to its end node.
    """
    adjacency: AdjacencyList = {node.id: [] for node in graph.nodes}
    for edge in graph.edges:
        adjacency[edge.start_id].append((edge.end_id, edge.weight))
        if not edge.directed:
            adjacency[edge.end_id].append((edge.start_id, edge.weight))
    return adjacency


def build_adjacency_matrix(graph: GraphSnapshot) -> AdjacencyMatrix:
    """Build an n×n weight matrix over the node-insertion ordering.

    Off-diagonal cells start at ``inf`` and the diagonal at 0. Each edge
    writes its weight (both cells when undirected); a later edge with the
    same cell overwrites the earlier value.
    """
    order = tuple(graph.node_ids)
    index = {node_id: i for i, node_id in enumerate(order)}
    n = len(order)

    rows = [[0.0 if i == j else math.inf for j in range(n)] for i in range(n)]
    for edge in graph.edges:
        i, j = index[edge.start_id], index[edge.end_id]
        rows[i][j] = edge.weight
        if not edge.directed:
            rows[j][i] = edge.weight

    return AdjacencyMatrix(matrix=tuple(tuple(row) for row in rows), node_order=order)
