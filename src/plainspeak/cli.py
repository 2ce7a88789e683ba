"""``plainspeak`` entry point: global output flags, then one command per transform."""

from __future__ import annotations

import click

from plainspeak import __version__
from plainspeak.commands import register_commands
from plainspeak.commands._context import AppContext
from plainspeak.config.settings import PlainSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="plainspeak")
@click.option("--json", "json_output", is_flag=True, help="Print the full result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the rendered text.")
@click.option("-v", "--verbose", is_flag=True, help="Show inputs, clauses and timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=20),
    default=None,
    help="Console width for human output (default from [output] config).",
)
@click.option("-c", "--config", "config_path", default=None, help="Use this TOML config file.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    width: int | None,
    config_path: str | None,
) -> None:
    """plainspeak — numbers, quantities, and durations as plain English."""
    ctx.obj = AppContext(
        PlainSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            output={"width": width} if width else None,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
