"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from plainspeak.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from plainspeak.services.result import ServiceResult


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the text."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data.get("text", ""))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text.assemble((f"  {key}: ", "plain.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a span tree with its timings."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    line = f"{prefix}{duration:>8.2f}ms  {name}"
    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line, style="dim")

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="plain.error")
    op = Text(f"  {result.op}", style="plain.op")
    console.print(label, op, Text(" — "), msg)
    if verbose and err and err.detail:
        for key, value in err.detail.items():
            _field(console, key, value)


def _render_text(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Single rendered string; inputs only in verbose mode."""
    console.print(Text(str(result.data.get("text", "")), style="plain.text"))
    if verbose:
        for key, value in result.data.items():
            if key != "text":
                _field(console, key, value)


def _render_duration(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    text = result.data.get("text", "")
    console.print(Text(str(text), style="plain.text"))
    if verbose:
        _field(console, "precision", result.data.get("precision", ""))
        _field(console, "seconds", result.data.get("seconds", ""))
        for clause in result.data.get("clauses", []):
            console.print(Text(f"    - {clause}", style="plain.clause"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("OK", style="plain.ok")
    console.print(label, Text(f"  {result.op}", style="plain.op"))
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "to_words": _render_text,
    "quantity": _render_text,
    "capitalize": _render_text,
    "strip_tags": _render_text,
    "humanize_duration": _render_duration,
}
