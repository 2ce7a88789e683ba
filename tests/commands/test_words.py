"""Tests for the words and quantity commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from plainspeak.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestWordsCommand:
    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["words", "42"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "forty-two"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "words", "100"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "to_words"
        assert data["data"]["text"] == "100"

    def test_negative_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "words", "--", "-5"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "-5"

    def test_not_an_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["words", "seven"])
        assert result.exit_code == 2


@pytest.mark.usefixtures("isolated_cwd")
class TestQuantityCommand:
    def test_plural(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "quantity", "2", "century"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "2 centuries"

    def test_singular(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "quantity", "1", "day"])
        assert result.stdout.strip() == "1 day"

    def test_fractional(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "quantity", "2.5", "hour"])
        assert result.stdout.strip() == "2.5 hours"

    def test_bare_number(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "quantity", "3"])
        assert result.stdout.strip() == "3"
