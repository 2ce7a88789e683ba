"""Subcommand modules for plainspeak.

Provides register_commands() which uses deferred imports to keep
``plainspeak --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from plainspeak.commands.duration import duration
    from plainspeak.commands.quantity import quantity
    from plainspeak.commands.text import capitalize_cmd, strip_tags
    from plainspeak.commands.words import words

    cli.add_command(words)
    cli.add_command(quantity)
    cli.add_command(duration)
    cli.add_command(capitalize_cmd)
    cli.add_command(strip_tags)
