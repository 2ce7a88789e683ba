"""Tests for the duration command and its duration parser."""

from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path

import pytest
from click.testing import CliRunner

from plainspeak.cli import cli
from plainspeak.commands._params import parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            ("90s", timedelta(seconds=90)),
            ("90", timedelta(seconds=90)),
            ("3d4h", timedelta(days=3, hours=4)),
            ("1w2d", timedelta(days=9)),
            ("1.5h", timedelta(minutes=90)),
            ("2mo", timedelta(days=60)),
            ("1y", timedelta(days=365)),
            ("5m 30s", timedelta(minutes=5, seconds=30)),
            ("2H", timedelta(hours=2)),
        ],
    )
    def test_valid(self, spec: str, expected: timedelta) -> None:
        assert parse_duration(spec) == expected

    @pytest.mark.parametrize("spec", ["", "abc", "3x", "d3", "3d-4h", "-5s"])
    def test_invalid(self, spec: str) -> None:
        with pytest.raises(ValueError, match="Invalid duration"):
            parse_duration(spec)

    @pytest.mark.parametrize("spec", ["99999999999y", "999999999d999999999d"])
    def test_too_large(self, spec: str) -> None:
        with pytest.raises(ValueError, match="too large"):
            parse_duration(spec)


@pytest.mark.usefixtures("isolated_cwd")
class TestDurationCommand:
    def test_spec(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "90s"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "1 minute and 30 seconds"

    def test_unit_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "duration", "--days", "2", "--hours", "3", "--minutes", "12"]
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "2 days, 3 hours and 12 minutes"

    def test_spec_plus_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "1d", "--hours", "1"])
        assert result.stdout.strip() == "1 day and 1 hour"

    def test_precision(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "3d4h", "--precision", "day"])
        assert result.stdout.strip() == "3 days"

    def test_precision_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "duration", "30m", "-p", "HOUR"])
        assert result.stdout.strip() == "0.5 hours"

    def test_unknown_precision_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "1h", "--precision", "fortnight"])
        assert result.exit_code == 2

    def test_bad_spec_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "soon"])
        assert result.exit_code == 2
        assert "Invalid duration" in result.output

    def test_huge_spec_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration", "99999999999y"])
        assert result.exit_code == 2
        assert "too large" in result.output

    @pytest.mark.parametrize(("option", "value"), [("--days", "1e10"), ("--years", "inf")])
    def test_huge_unit_option_is_usage_error(
        self, cli_runner: CliRunner, option: str, value: str
    ) -> None:
        result = cli_runner.invoke(cli, ["duration", option, value])
        assert result.exit_code == 2
        assert option in result.output
        assert "out of range" in result.output

    def test_zero_duration_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["duration"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "humanize_duration" in result.stderr

    def test_negative_duration_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "duration", "--seconds", "-5"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_DURATION"

    def test_json_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "duration", "8d1m"])
        data = json.loads(result.stdout)
        assert data["data"]["clauses"] == ["1 week", "1 day", "1 minute"]
        assert data["data"]["precision"] == "second"

    def test_config_default_precision(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "plainspeak.toml").write_text('[duration]\nprecision = "hour"\n')
        result = cli_runner.invoke(cli, ["-q", "duration", "3d4h5m"])
        assert result.stdout.strip() == "3 days and 4 hours"

    def test_flag_beats_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "plainspeak.toml").write_text('[duration]\nprecision = "hour"\n')
        result = cli_runner.invoke(cli, ["-q", "duration", "3d4h5m", "-p", "minute"])
        assert result.stdout.strip() == "3 days, 4 hours and 5 minutes"

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "duration", "90s"])
        assert result.exit_code == 0
        assert "meta:" in result.stdout
        assert "HumanizeService.duration" in result.stdout
        assert "- 30 seconds" in result.stdout
