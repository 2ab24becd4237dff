"""Tests for the load command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from rosterctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestLoadCommand:
    def test_human_output(self, cli_runner: CliRunner, sample_roster: Path) -> None:
        result = cli_runner.invoke(cli, ["load", str(sample_roster)])
        assert result.exit_code == 0, result.output
        assert "Smith; J." in result.output
        assert "Loaded people: 3" in result.output
        assert "Unique departments: 2" in result.output

    def test_json_output(self, cli_runner: CliRunner, sample_roster: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "load", str(sample_roster)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "load_people"
        assert [p["id"] for p in data["data"]["people"]] == [1, 2, 3]

    def test_quiet_output(self, cli_runner: CliRunner, sample_roster: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "load", str(sample_roster)])
        assert result.exit_code == 0
        assert result.output.split() == ["1", "2", "3"]

    def test_summary_only(self, cli_runner: CliRunner, sample_roster: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "load", str(sample_roster), "--summary-only"])
        data = json.loads(result.output)
        assert "people" not in data["data"]
        assert data["data"]["count"] == 3

    def test_config_hides_people(self, cli_runner: CliRunner, sample_roster: Path) -> None:
        Path("rosterctl.toml").write_text("[report]\nshow_people = false\n")
        result = cli_runner.invoke(cli, ["--json", "load", str(sample_roster)])
        assert "people" not in json.loads(result.output)["data"]

    def test_default_file(self, cli_runner: CliRunner, write_roster: Callable[..., Path]) -> None:
        write_roster(["1;A;m;01.01.2000;Ops;1"], name="foreign_names.csv")
        result = cli_runner.invoke(cli, ["--json", "load"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["source"] == "foreign_names.csv"

    def test_configured_default_file(
        self, cli_runner: CliRunner, write_roster: Callable[..., Path]
    ) -> None:
        write_roster(["1;A;m;01.01.2000;Ops;1"], name="staff.csv")
        Path("rosterctl.toml").write_text('[input]\ndefault_file = "staff.csv"\n')
        result = cli_runner.invoke(cli, ["--json", "load"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["count"] == 1

    def test_missing_default_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["load"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "foreign_names.csv" in result.stderr

    def test_bad_row_exits_nonzero(
        self, cli_runner: CliRunner, write_roster: Callable[..., Path]
    ) -> None:
        path = write_roster(["1;A;m;01.01.2000;Ops;1", "2;B;m;01.01.2000;Ops"])
        result = cli_runner.invoke(cli, ["--json", "load", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "MALFORMED_COLUMN_COUNT"
        assert data["error"]["detail"]["line_no"] == 2

    def test_error_message_human(
        self, cli_runner: CliRunner, write_roster: Callable[..., Path]
    ) -> None:
        path = write_roster(["1;A;xyz;01.01.2000;Ops;1"])
        result = cli_runner.invoke(cli, ["load", str(path)])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert "xyz" in result.stderr

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner, sample_roster: Path) -> None:
        result = cli_runner.invoke(cli, ["-v", "load", str(sample_roster), "--summary-only"])
        assert result.exit_code == 0
        assert "meta:" in result.stdout
        assert "load_roster" in result.stdout

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["load", "--examples"])
        assert result.exit_code == 0
        assert "rosterctl load staff.csv --summary-only" in result.output

    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["load", "--help"])
        assert result.exit_code == 0
        assert "PATH" in result.output
        assert "--summary-only" in result.output
        assert "--examples" in result.output
