"""Command: render a quantity with a pluralized unit."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plainspeak.commands._base import PlainCommand

if TYPE_CHECKING:
    from plainspeak.commands._context import AppContext


@click.command(
    cls=PlainCommand,
    examples="""\
  plainspeak quantity 2 century
  plainspeak quantity 1 day
  plainspeak quantity 2.5 hour""",
)
@click.argument("value", type=float)
@click.argument("unit", default="")
@click.pass_obj
def quantity(app: AppContext, value: float, unit: str) -> None:
    """Render VALUE followed by UNIT, pluralized unless VALUE is 1."""
    app.emit(app.service.quantity(value, unit))
