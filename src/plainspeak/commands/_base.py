"""PlainCommand — click.Command with an eager ``--examples`` flag.

``--help`` stays short; ``plainspeak duration --examples`` prints sample
invocations and exits before any argument is validated.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class PlainCommand(click.Command):
    """Command that takes an ``examples=`` block and exposes it as ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip() if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing or not self.examples:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.examples, "  "))
        ctx.exit(0)
