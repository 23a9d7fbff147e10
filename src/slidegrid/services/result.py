"""ServiceResult: what LayoutService hands to the CLI.

The engine (catalog, composer, resolver) raises. LayoutService catches
those errors and reports them as a failed result carrying an
:class:`ErrorCode`, so every output mode renders success and failure
the same way.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Self

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    CYCLE = "CYCLE"
    INVALID_LAYOUT = "INVALID_LAYOUT"
    LAYOUT_ERROR = "LAYOUT_ERROR"


class ServiceError(BaseModel):
    """Machine-readable code, human message, structured detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one LayoutService operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, used to pick a renderer (e.g. ``"show_layout"``).
        data: Operation payload; empty on failure.
        warnings: Non-fatal findings, such as grid-area conflicts.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], warnings: list[str] | None = None) -> Self:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> Self:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
