"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: every GraphService method returns a ServiceResult. Expected
failures (duplicates, unknown ids, unreachable targets) are carried in
``error``; they are values, never exceptions.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured failure payload.

    ``code`` is one of ``DUPLICATE``, ``MISSING_ENDPOINT``, ``NOT_FOUND``,
    ``NO_PATH``, ``UNKNOWN_ALGORITHM``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"add_edge"``, ``"shortest_path"``).
        data: JSON-safe payload on success.
        warnings: Non-fatal issues.
        error: Failure details when ``ok`` is False.
        meta: Optional metadata such as the telemetry span tree.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def fail(
        cls,
        op: str,
        code: str,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Shorthand for a failed result with a single error."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
