"""Duration humanization — elapsed time as a natural-language phrase.

A duration is broken down through a fixed cascade of units, coarsest
first::

    year -> month -> week -> day -> hour -> minute -> second

The caller's :class:`Precision` is the finest unit that takes part.
Calendar units are fixed-length approximations (365-day year, 30-day
month, 7-day week); no calendar arithmetic is attempted.

When the duration is shorter than one of the requested precision unit,
the cascade stops early and returns a single fractional clause
(``"0.5 days"``) instead of an empty phrase.

INVARIANT: every function here is pure. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

from plainspeak.domain.quantities import quantity_phrase

logger = logging.getLogger(__name__)

CLAUSE_SEPARATOR = ", "
FINAL_SEPARATOR = " and "


class InvalidDurationError(ValueError):
    """Raised when asked to humanize a zero or negative duration."""


class Precision(IntEnum):
    """Ordered duration units, coarsest first.

    ``precision >= Precision.DAY`` means days (and every coarser unit)
    are included in the rendered phrase.
    """

    YEAR = 0
    MONTH = 1
    WEEK = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6

    @property
    def noun(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Precision | str) -> Precision:
        """Resolve a member or a case-insensitive unit name (``"day"``)."""
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            names = ", ".join(p.noun for p in cls)
            msg = f"Unknown precision {value!r}; expected one of: {names}"
            raise ValueError(msg) from None


CountFn = Callable[[timedelta, Mapping[Precision, int]], int]


@dataclass(frozen=True)
class _Unit:
    precision: Precision
    span: timedelta
    count: CountFn


def _calendar_count(days_per_unit: int, carry: Mapping[Precision, int]) -> CountFn:
    """Whole units in the span, less what coarser units already consumed."""

    def count(duration: timedelta, counts: Mapping[Precision, int]) -> int:
        whole = duration.days // days_per_unit
        return whole - sum(counts.get(unit, 0) * factor for unit, factor in carry.items())

    return count


def _hours_of_day(duration: timedelta, _counts: Mapping[Precision, int]) -> int:
    return duration.seconds // 3600


def _minutes_of_hour(duration: timedelta, _counts: Mapping[Precision, int]) -> int:
    return duration.seconds // 60 % 60


def _seconds_of_minute(duration: timedelta, _counts: Mapping[Precision, int]) -> int:
    return duration.seconds % 60


_CASCADE: tuple[_Unit, ...] = (
    _Unit(Precision.YEAR, timedelta(days=365), _calendar_count(365, {})),
    _Unit(
        Precision.MONTH,
        timedelta(days=30),
        _calendar_count(30, {Precision.YEAR: 12}),
    ),
    _Unit(
        Precision.WEEK,
        timedelta(days=7),
        _calendar_count(7, {Precision.YEAR: 52, Precision.MONTH: 4}),
    ),
    _Unit(
        Precision.DAY,
        timedelta(days=1),
        _calendar_count(1, {Precision.YEAR: 365, Precision.MONTH: 30, Precision.WEEK: 7}),
    ),
    _Unit(Precision.HOUR, timedelta(hours=1), _hours_of_day),
    _Unit(Precision.MINUTE, timedelta(minutes=1), _minutes_of_hour),
    _Unit(Precision.SECOND, timedelta(seconds=1), _seconds_of_minute),
)


def join_clauses(clauses: list[str]) -> str:
    """Join clauses as ``"a, b and c"``.

    One clause is returned as-is; no clauses give an empty string.
    """
    if not clauses:
        return ""
    if len(clauses) == 1:
        return clauses[0]
    return CLAUSE_SEPARATOR.join(clauses[:-1]) + FINAL_SEPARATOR + clauses[-1]


def _validated(
    duration: timedelta, precision: Precision | str
) -> tuple[timedelta, Precision]:
    if duration <= timedelta(0):
        msg = f"Cannot humanize a zero or negative duration: {duration!r}"
        raise InvalidDurationError(msg)
    return duration, Precision.parse(precision)


def _walk(
    duration: timedelta, precision: Precision
) -> tuple[dict[Precision, int], str | None]:
    """Run the cascade; return raw counts and the fractional clause, if any."""
    counts: dict[Precision, int] = {}
    for unit in _CASCADE:
        if precision < unit.precision:
            break
        total = duration / unit.span
        if total >= 1:
            counts[unit.precision] = unit.count(duration, counts)
        elif precision == unit.precision:
            logger.debug(
                "Duration %s shorter than one %s; using fractional clause",
                duration,
                unit.precision.noun,
            )
            return counts, quantity_phrase(total, unit.precision.noun)
    return counts, None


def unit_counts(
    duration: timedelta,
    precision: Precision | str = Precision.SECOND,
) -> dict[Precision, int]:
    """Raw per-unit counts, coarsest first, for every unit the cascade reached.

    Counts may be zero or negative: 30-day months and 7-day weeks overlap,
    so a carry can overshoot (390 days gives ``WEEK: -1``). Once days are
    counted, ``365*y + 30*mo + 7*w + d`` always equals ``duration.days``.

    Raises:
        InvalidDurationError: If *duration* is zero or negative.
    """
    counts, _fraction = _walk(*_validated(duration, precision))
    return counts


def duration_clauses(
    duration: timedelta,
    precision: Precision | str = Precision.SECOND,
) -> list[str]:
    """Break *duration* down into rendered unit clauses.

    Units with a count below one are skipped. If the duration is shorter
    than one *precision* unit, the result is a single fractional clause
    for that unit.

    Raises:
        InvalidDurationError: If *duration* is zero or negative.
        ValueError: If *precision* is not a known unit name.
    """
    counts, fraction = _walk(*_validated(duration, precision))
    if fraction is not None:
        return [fraction]
    return [quantity_phrase(count, unit.noun) for unit, count in counts.items() if count > 0]


def humanize_duration(
    duration: timedelta,
    precision: Precision | str = Precision.SECOND,
) -> str:
    """Render *duration* as e.g. ``"2 days, 3 hours and 12 minutes"``.

    Args:
        duration: A strictly positive elapsed time.
        precision: Finest unit to include. Defaults to seconds.

    Raises:
        InvalidDurationError: If *duration* is zero or negative.
    """
    return join_clauses(duration_clauses(duration, precision))
