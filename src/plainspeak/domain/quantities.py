"""Quantity phrases — a number followed by a (possibly pluralized) unit."""

from __future__ import annotations

from decimal import Decimal

_VOWELS = frozenset("aeiou")


def pluralize(unit: str) -> str:
    """Pluralize *unit*: consonant + ``y`` becomes ``ies``, anything else gets ``s``.

    Irregular plurals are not handled.

    Examples:
        >>> pluralize("day")
        'days'
        >>> pluralize("century")
        'centuries'
    """
    if len(unit) > 1 and unit.endswith("y") and unit[-2].lower() not in _VOWELS:
        return unit[:-1] + "ies"
    return unit + "s"


def format_number(value: int | float) -> str:
    """Render *value* in plain decimal form.

    No thousands separators and no exponent: ``1e-06`` prints as
    ``0.000001``. Integral floats drop their fractional part.
    """
    if isinstance(value, bool):
        msg = f"Expected a number, got bool: {value!r}"
        raise TypeError(msg)
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    # repr is the shortest round-tripping form; Decimal drops its exponent.
    return format(Decimal(repr(float(value))), "f")


def quantity_phrase(quantity: int | float, unit: str) -> str:
    """Combine *quantity* and *unit*, pluralizing unless the quantity is 1.

    An empty *unit* degenerates to the bare number.

    Examples:
        >>> quantity_phrase(1, "day")
        '1 day'
        >>> quantity_phrase(2.5, "hour")
        '2.5 hours'
    """
    number = format_number(quantity)
    if unit and quantity != 1:
        unit = pluralize(unit)
    return f"{number} {unit}".strip()
