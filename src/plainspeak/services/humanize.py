"""HumanizeService — structured wrappers around the domain transforms.

Domain functions raise on bad input. The service turns those errors into
failed ServiceResults so the CLI never sees a traceback for user input.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from plainspeak.domain.durations import (
    InvalidDurationError,
    Precision,
    duration_clauses,
    join_clauses,
)
from plainspeak.domain.numerals import to_words
from plainspeak.domain.quantities import quantity_phrase
from plainspeak.domain.text import capitalize, strip_html_tags
from plainspeak.services.result import ErrorCode, ServiceResult
from plainspeak.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def _failure(op: str, code: ErrorCode, exc: Exception, **detail: object) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc)
    return ServiceResult.failure(op, code, str(exc), **detail)


class HumanizeService:
    """Humanization operations with ServiceResult output.

    Usage::

        svc = HumanizeService(default_precision=Precision.MINUTE)
        svc.duration(timedelta(seconds=90)).text  # "1 minute"
    """

    def __init__(self, default_precision: Precision | str = Precision.SECOND) -> None:
        self._default_precision = Precision.parse(default_precision)

    @property
    def default_precision(self) -> Precision:
        return self._default_precision

    @traced
    def words(self, n: int) -> ServiceResult:
        """Spell out *n* in English words."""
        return ServiceResult.success("to_words", to_words(n), value=n)

    @traced
    def quantity(self, value: int | float, unit: str) -> ServiceResult:
        """Render *value* with a singular or plural *unit*."""
        try:
            text = quantity_phrase(value, unit)
        except TypeError as exc:
            return _failure("quantity", ErrorCode.INVALID_INPUT, exc, value=repr(value))
        return ServiceResult.success("quantity", text, value=value, unit=unit)

    @traced
    def duration(
        self,
        duration: timedelta,
        precision: Precision | str | None = None,
    ) -> ServiceResult:
        """Humanize *duration* down to *precision* (or the service default)."""
        op = "humanize_duration"
        try:
            resolved = (
                self._default_precision if precision is None else Precision.parse(precision)
            )
            with trace_span("duration_clauses") as span:
                clauses = duration_clauses(duration, resolved)
                if span:
                    span.annotate("clauses", len(clauses))
        except InvalidDurationError as exc:
            return _failure(
                op, ErrorCode.INVALID_DURATION, exc, seconds=duration.total_seconds()
            )
        except ValueError as exc:
            return _failure(op, ErrorCode.INVALID_INPUT, exc, precision=str(precision))

        warnings: list[str] = []
        if not clauses:
            warnings.append(f"Duration {duration} has no whole {resolved.noun}s to show")
        return ServiceResult.success(
            op,
            join_clauses(clauses),
            warnings=warnings,
            seconds=duration.total_seconds(),
            precision=resolved.noun,
            clauses=clauses,
        )

    @traced
    def capitalize(self, text: str, *, all_words: bool = True) -> ServiceResult:
        """Capitalize every word of *text*, or only its first letter."""
        try:
            result = capitalize(text, all_words)
        except ValueError as exc:
            return _failure("capitalize", ErrorCode.INVALID_INPUT, exc)
        return ServiceResult.success("capitalize", result)

    @traced
    def strip_tags(self, text: str) -> ServiceResult:
        """Remove HTML tags from *text*."""
        return ServiceResult.success("strip_tags", strip_html_tags(text))
