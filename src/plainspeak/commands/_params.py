"""Click parameter types shared by commands."""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Any

import click

from plainspeak.domain.durations import Precision

# Fixed-length units, matching the humanizer's approximations.
_UNIT_SPANS: dict[str, timedelta] = {
    "y": timedelta(days=365),
    "mo": timedelta(days=30),
    "w": timedelta(weeks=1),
    "d": timedelta(days=1),
    "h": timedelta(hours=1),
    "m": timedelta(minutes=1),
    "s": timedelta(seconds=1),
}

_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(mo|[ywdhms])")
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


def parse_duration(spec: str) -> timedelta:
    """Parse a compact duration such as ``3d4h``, ``90s`` or ``1.5h``.

    A bare number is read as seconds.

    Raises:
        ValueError: If *spec* contains anything but number/unit pairs
            or the total is too large for a timedelta.
    """
    text = spec.strip().lower().replace(" ", "")
    if _NUMBER_RE.fullmatch(text):
        text += "s"

    parts: list[tuple[float, str]] = []
    pos = 0
    for match in _PART_RE.finditer(text):
        if match.start() != pos:
            break
        parts.append((float(match.group(1)), match.group(2)))
        pos = match.end()
    if not text or pos != len(text):
        msg = f"Invalid duration {spec!r}; expected e.g. '3d4h', '90s' or '1.5h'"
        raise ValueError(msg)
    try:
        return sum((amount * _UNIT_SPANS[unit] for amount, unit in parts), timedelta(0))
    except OverflowError:
        msg = f"Duration {spec!r} is too large"
        raise ValueError(msg) from None


class DurationType(click.ParamType):
    """Click type accepting compact duration specs."""

    name = "duration"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> timedelta:
        if isinstance(value, timedelta):
            return value
        try:
            return parse_duration(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


PRECISION_CHOICE = click.Choice([p.noun for p in Precision], case_sensitive=False)


_OPTION_UNITS = {
    "years": "y",
    "weeks": "w",
    "days": "d",
    "hours": "h",
    "minutes": "m",
    "seconds": "s",
}


def add_unit_options(base: timedelta | None, **amounts: float) -> timedelta:
    """Add ``--years``/``--days``/... option values to *base*.

    Raises:
        click.BadParameter: If the total cannot be represented.
    """
    total = base or timedelta(0)
    for name, amount in amounts.items():
        try:
            total += amount * _UNIT_SPANS[_OPTION_UNITS[name]]
        except (OverflowError, ValueError) as exc:
            msg = f"{amount:g} {name} is out of range ({exc})"
            raise click.BadParameter(msg, param_hint=f"--{name}") from exc
    return total
