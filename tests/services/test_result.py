"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from graphctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="add_node", data={"id": "A"})
        assert result.ok is True
        assert result.op == "add_node"
        assert result.data == {"id": "A"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="Node 'A' not found")
        result = ServiceResult(ok=False, op="remove_node", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_fail_shorthand(self) -> None:
        result = ServiceResult.fail("add_edge", "MISSING_ENDPOINT", "bad", missing=["Z"])
        assert result.ok is False
        assert result.op == "add_edge"
        assert result.error is not None
        assert result.error.code == "MISSING_ENDPOINT"
        assert result.error.detail == {"missing": ["Z"]}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="shortest_path",
            data={"path": ["A", "B"], "distance": 2.5},
            meta={"duration_ms": 3},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["path"] == ["A", "B"]
        assert parsed["meta"]["duration_ms"] == 3

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_default_detail(self) -> None:
        assert ServiceError(code="NO_PATH", message="none").detail == {}
