"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from graphctl.config.models import EdgesConfig, OutputConfig, ShellConfig


class TestDefaults:
    def test_section_defaults(self) -> None:
        assert EdgesConfig().default_weight == 1.0
        assert EdgesConfig().directed is False
        assert ShellConfig().prompt == "graph> "
        assert OutputConfig().precision == 2

    def test_sparse_section(self) -> None:
        cfg = EdgesConfig.model_validate({"directed": True})
        assert cfg.directed is True
        assert cfg.default_weight == 1.0

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            EdgesConfig().directed = True  # type: ignore[misc]


class TestValidation:
    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_weight_rejected(self, weight: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            EdgesConfig(default_weight=weight)

    def test_negative_weight_allowed(self) -> None:
        assert EdgesConfig(default_weight=-2.0).default_weight == -2.0

    @pytest.mark.parametrize("precision", [-1, 11])
    def test_precision_bounds(self, precision: int) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(precision=precision)
