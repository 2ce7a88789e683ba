"""Shared pytest fixtures for plainspeak tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from plainspeak.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo what the CLI root does to process-wide state.

    ``--verbose`` enables telemetry through a ContextVar and every CLI
    invocation reconfigures the root logger; both leak across tests
    in the same thread without cleanup.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("plainspeak")
    pkg_level = pkg.level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir so no stray plainspeak.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PLAINSPEAK_CONFIG", raising=False)
    return tmp_path
