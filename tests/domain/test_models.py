"""Tests for graph value types."""

from __future__ import annotations

import math

import pytest

from graphctl.domain.models import AdjacencyMatrix, Edge, FloydTable, Node, PathResult


class TestNode:
    def test_equality_by_id_only(self) -> None:
        assert Node("A", 1.0, 2.0) == Node("A", 5.0, 9.0)
        assert Node("A") != Node("B")

    def test_hash_matches_equality(self) -> None:
        assert len({Node("A", 1, 1), Node("A", 2, 2), Node("B")}) == 2

    def test_default_coordinates(self) -> None:
        node = Node("A")
        assert (node.x, node.y) == (0.0, 0.0)

    def test_frozen(self) -> None:
        node = Node("A")
        with pytest.raises(AttributeError):
            node.id = "B"  # type: ignore[misc]


class TestEdgeKey:
    def test_undirected_key_is_order_independent(self) -> None:
        assert Edge("A", "B").key == Edge("B", "A").key == ("A", "B", False)

    def test_undirected_key_ignores_weight(self) -> None:
        assert Edge("A", "B", weight=1).key == Edge("B", "A", weight=7).key

    def test_directed_key_keeps_order(self) -> None:
        assert Edge("A", "B", directed=True).key == ("A", "B", True)
        assert Edge("B", "A", directed=True).key == ("B", "A", True)

    def test_directed_and_undirected_never_collide(self) -> None:
        keys = {
            Edge("A", "B").key,
            Edge("A", "B", directed=True).key,
            Edge("B", "A", directed=True).key,
        }
        assert len(keys) == 3

    def test_ids_sorted_lexicographically(self) -> None:
        assert Edge("b10", "b2").key == ("b10", "b2", False)


class TestEdgeMatching:
    def test_touches_either_endpoint(self) -> None:
        edge = Edge("A", "B")
        assert edge.touches("A")
        assert edge.touches("B")
        assert not edge.touches("C")

    def test_undirected_connects_both_orders(self) -> None:
        edge = Edge("B", "A")
        assert edge.connects("B", "A")
        assert edge.connects("A", "B")

    def test_directed_connects_stored_order_only(self) -> None:
        edge = Edge("A", "B", directed=True)
        assert edge.connects("A", "B")
        assert not edge.connects("B", "A")

    def test_str(self) -> None:
        assert str(Edge("A", "B", 2.5)) == "A -- B (w=2.5)"
        assert str(Edge("A", "B", 3, directed=True)) == "A -> B (w=3)"


class TestResults:
    def test_path_result_hops(self) -> None:
        assert PathResult(path=("A", "B", "C"), distance=5.0).hops == 2
        assert PathResult(path=("A",), distance=0).hops == 0

    def test_matrix_weight_lookup(self) -> None:
        matrix = AdjacencyMatrix(matrix=((0.0, 2.0), (math.inf, 0.0)), node_order=("A", "B"))
        assert matrix.weight("A", "B") == 2.0
        assert math.isinf(matrix.weight("B", "A"))
        assert math.isinf(matrix.weight("A", "Z"))

    def test_floyd_table_index_of(self) -> None:
        table = FloydTable(dist=((0.0,),), next_hop=((-1,),), node_order=("A",))
        assert table.index_of("A") == 0
        assert table.index_of("B") is None
