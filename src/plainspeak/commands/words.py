"""Command: spell out an integer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plainspeak.commands._base import PlainCommand

if TYPE_CHECKING:
    from plainspeak.commands._context import AppContext


@click.command(
    cls=PlainCommand,
    examples="""\
  plainspeak words 42
  plainspeak -q words 7
  plainspeak --json words 100""",
)
@click.argument("number", type=int)
@click.pass_obj
def words(app: AppContext, number: int) -> None:
    """Spell out NUMBER in English words (0-99; others stay numeric)."""
    app.emit(app.service.words(number))
