"""Command: humanize an elapsed time."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

import click

from plainspeak.commands._base import PlainCommand
from plainspeak.commands._params import PRECISION_CHOICE, DurationType, add_unit_options

if TYPE_CHECKING:
    from plainspeak.commands._context import AppContext


@click.command(
    cls=PlainCommand,
    examples="""\
  plainspeak duration 90s
  plainspeak duration 3d4h --precision day
  plainspeak duration --days 2 --hours 3 --minutes 12
  plainspeak duration 400d --precision week
  plainspeak duration 30m --precision hour""",
)
@click.argument("spec", type=DurationType(), required=False)
@click.option("--years", type=float, default=0.0, help="Years of 365 days.")
@click.option("--weeks", type=float, default=0.0, help="Weeks to add.")
@click.option("--days", type=float, default=0.0, help="Days to add.")
@click.option("--hours", type=float, default=0.0, help="Hours to add.")
@click.option("--minutes", type=float, default=0.0, help="Minutes to add.")
@click.option("--seconds", type=float, default=0.0, help="Seconds to add.")
@click.option(
    "-p",
    "--precision",
    type=PRECISION_CHOICE,
    default=None,
    help="Finest unit to show (default from [duration] config).",
)
@click.pass_obj
def duration(
    app: AppContext,
    spec: timedelta | None,
    years: float,
    weeks: float,
    days: float,
    hours: float,
    minutes: float,
    seconds: float,
    precision: str | None,
) -> None:
    """Humanize SPEC (e.g. 3d4h) plus any unit options as plain English."""
    total = add_unit_options(
        spec,
        years=years,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )
    app.emit(app.service.duration(total, precision))
