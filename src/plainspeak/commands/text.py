"""Commands: capitalization and HTML tag stripping."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plainspeak.commands._base import PlainCommand

if TYPE_CHECKING:
    from plainspeak.commands._context import AppContext


@click.command(
    "capitalize",
    cls=PlainCommand,
    examples="""\
  plainspeak capitalize 'two days and three hours'
  plainspeak capitalize --first-only 'two days and three hours'""",
)
@click.argument("text", nargs=-1, required=True)
@click.option("--first-only", is_flag=True, help="Only capitalize the first letter.")
@click.pass_obj
def capitalize_cmd(app: AppContext, text: tuple[str, ...], first_only: bool) -> None:
    """Capitalize every word of TEXT."""
    app.emit(app.service.capitalize(" ".join(text), all_words=not first_only))


@click.command(
    "strip-tags",
    cls=PlainCommand,
    examples="""\
  plainspeak strip-tags '<p>Hello <b>world</b></p>'""",
)
@click.argument("text")
@click.pass_obj
def strip_tags(app: AppContext, text: str) -> None:
    """Remove HTML tags from TEXT."""
    app.emit(app.service.strip_tags(text))
