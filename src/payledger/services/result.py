"""ServiceResult and ServiceError — the contract between services and drivers.

INVARIANT: Every service operation returns a ServiceResult.  Expected
failures (bad input, unknown names, I/O and parse problems) are reported
through ``error`` with one of the :class:`ErrorCode` values; they are
never raised to the caller.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure taxonomy shared by every service."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_HOURS = "INVALID_HOURS"
    NOT_FOUND = "NOT_FOUND"
    IO_FAILURE = "IO_FAILURE"
    PARSE_FAILURE = "PARSE_FAILURE"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"accrue_hours"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
    """Build a failed ServiceResult."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )
