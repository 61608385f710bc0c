"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here and ``graphctl.toml`` holds only
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, field_validator


class EdgesConfig(BaseModel):
    """[edges] section (defaults applied by ``edge add``)."""

    model_config = {"frozen": True}

    default_weight: float = 1.0
    directed: bool = False

    @field_validator("default_weight")
    @classmethod
    def _finite_weight(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("default_weight must be a finite number")
        return value


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    prompt: str = "graph> "


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    precision: int = Field(default=2, ge=0, le=10)

