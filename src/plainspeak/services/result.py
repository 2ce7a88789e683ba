"""ServiceResult — what every HumanizeService operation returns.

INVARIANT: a successful result carries the rendered string under
``data["text"]``; a failed one carries an :class:`ErrorCode`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure kinds."""

    INVALID_DURATION = "INVALID_DURATION"
    INVALID_INPUT = "INVALID_INPUT"


class ServiceError(BaseModel):
    """Why an operation failed, plus the offending input in ``detail``."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one humanization call.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"humanize_duration"``, ``"to_words"``, ...).
        data: Inputs echoed back plus ``text``, the rendered output.
        warnings: Non-fatal notes, printed to stderr by the CLI.
        error: Set when ``ok`` is False.
        meta: Telemetry span tree when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, text: str, *, warnings: list[str] | None = None, **data: Any
    ) -> ServiceResult:
        return cls(ok=True, op=op, data={**data, "text": text}, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @property
    def text(self) -> str:
        """The rendered string, or empty for failures."""
        return str(self.data.get("text", ""))
