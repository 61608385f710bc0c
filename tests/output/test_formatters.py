"""Tests for the format_result dispatcher and OutputSettings."""

import json

from graphctl.output.formatters import OutputSettings, format_result
from graphctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.precision == 2


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok("add_node", id="A", x=0.0, y=0.0), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "add_node"
        assert data["data"]["id"] == "A"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("add_edge", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["ok"] is True


class TestFormatResultQuiet:
    def test_quiet_path(self) -> None:
        result = _ok("shortest_path", path=["A", "B", "C"], distance=3)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "A B C"

    def test_quiet_error(self) -> None:
        output = format_result(_err("remove_node", "gone"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: remove_node")
        assert "gone" in output


class TestFormatResultDefault:
    def test_rich_by_default(self) -> None:
        output = format_result(_ok("add_node", id="A", x=0.0, y=0.0))
        assert "OK" in output
        assert "add_node" in output

    def test_precision_passed_through(self) -> None:
        result = _ok(
            "shortest_path", path=["A", "B"], distance=1.23456, hops=1, algorithm="dijkstra"
        )
        output = format_result(result, settings=OutputSettings(precision=3))
        assert "Distance: 1.235" in output
