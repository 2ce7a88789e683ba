"""Tests for the capitalize and strip-tags commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from plainspeak.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestCapitalizeCommand:
    def test_all_words(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["capitalize", "two days and three hours"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Two Days And Three Hours"

    def test_joins_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["capitalize", "one", "two"])
        assert result.stdout.strip() == "One Two"

    def test_first_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["capitalize", "--first-only", "one two"])
        assert result.stdout.strip() == "One two"

    def test_blank_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["capitalize", "   "])
        assert result.exit_code == 1
        assert "capitalize" in result.stderr


@pytest.mark.usefixtures("isolated_cwd")
class TestStripTagsCommand:
    def test_strips(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["strip-tags", "<p>Hello <b>world</b></p>"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Hello world"
