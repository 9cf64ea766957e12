"""Tests for config CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from lineup.cli.main import cli


def test_config_show_yaml(cli_runner: CliRunner) -> None:
    """Test config show in YAML format."""
    result = cli_runner.invoke(cli, ["config", "show"])

    assert result.exit_code == 0, result.output
    data = yaml.safe_load(result.output)
    assert data["schedule"]["group_size"] == 5
    assert data["logging"]["level"] == "WARNING"


def test_config_show_json(cli_runner: CliRunner) -> None:
    """Test config show in JSON format."""
    result = cli_runner.invoke(
        cli, ["--profile", "dev", "config", "show", "-f", "json"]
    )

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["profile"] == "dev"
    assert data["schedule"]["timeout"] == 30.0


def test_config_show_table(cli_runner: CliRunner) -> None:
    """Test config show as a table."""
    result = cli_runner.invoke(cli, ["config", "show", "--format", "table"])

    assert result.exit_code == 0, result.output
    assert "schedule.group_size" in result.output


def test_config_show_key(cli_runner: CliRunner) -> None:
    """Test config show with a dotted key."""
    result = cli_runner.invoke(cli, ["config", "show", "--key", "schedule.header"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "round {index}"


def test_config_show_missing_key(cli_runner: CliRunner) -> None:
    """Test config show with an unknown key."""
    result = cli_runner.invoke(cli, ["config", "show", "--key", "schedule.nope"])

    assert result.exit_code == 1
    assert "Configuration key not found" in result.output


def test_config_show_with_file(cli_runner: CliRunner, mock_config_file: Path) -> None:
    """Test config show merges the config file."""
    result = cli_runner.invoke(
        cli,
        ["-c", str(mock_config_file), "config", "show", "-k", "schedule.indent"],
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "2"


def test_config_show_env(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test environment variables reach config show."""
    monkeypatch.setenv("LINEUP_SCHEDULE__TIMEOUT", "12.5")
    result = cli_runner.invoke(cli, ["config", "show", "-k", "schedule.timeout"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "12.5"


def test_config_validate(cli_runner: CliRunner, mock_config_file: Path) -> None:
    """Test config validate on a valid file."""
    result = cli_runner.invoke(
        cli, ["config", "validate", "--config-file", str(mock_config_file)]
    )

    assert result.exit_code == 0, result.output
    assert "Configuration is valid" in result.output


def test_config_validate_uses_group_option(
    cli_runner: CliRunner, mock_config_file: Path
) -> None:
    """Test config validate falls back to the group --config-file."""
    result = cli_runner.invoke(cli, ["-c", str(mock_config_file), "config", "validate"])

    assert result.exit_code == 0, result.output


def test_config_validate_no_file(cli_runner: CliRunner) -> None:
    """Test config validate requires a file."""
    result = cli_runner.invoke(cli, ["config", "validate"])

    assert result.exit_code == 1
    assert "No configuration file specified" in result.output


def test_config_validate_schema_error(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test schema errors are listed by location."""
    path = tmp_path / "bad.yaml"
    path.write_text("schedule:\n  timeout: -1\n", encoding="utf-8")
    result = cli_runner.invoke(cli, ["config", "validate", "-c", str(path)])

    assert result.exit_code == 1
    assert "schedule → timeout" in result.output


def test_config_validate_bad_header(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test a header with an unknown placeholder is rejected."""
    path = tmp_path / "header.yaml"
    path.write_text('schedule:\n  header: "LT#{n}"\n', encoding="utf-8")
    result = cli_runner.invoke(cli, ["config", "validate", "-c", str(path)])

    assert result.exit_code == 1
    assert "unknown placeholder" in result.output


def test_config_profiles(cli_runner: CliRunner) -> None:
    """Test config profiles lists every profile."""
    result = cli_runner.invoke(cli, ["config", "profiles"])

    assert result.exit_code == 0
    for name in ("default", "dev", "test"):
        assert f"• {name}" in result.output


def test_config_show_verbose(cli_runner: CliRunner, mock_config_file: Path) -> None:
    """Test --verbose reports the configuration source."""
    result = cli_runner.invoke(
        cli, ["-v", "-c", str(mock_config_file), "config", "show", "-f", "json"]
    )

    assert result.exit_code == 0, result.output
    assert "Using configuration:" in result.output
    assert "over profile default" in result.output


def test_config_validate_missing_index(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test pre-flight checks run after schema validation."""
    path = tmp_path / "header.yaml"
    path.write_text('schedule:\n  header: "LT"\n', encoding="utf-8")
    result = cli_runner.invoke(cli, ["config", "validate", "-c", str(path)])

    assert result.exit_code == 1
    assert "does not include {index}" in result.output


def test_config_show_unrelated_env(
    cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test an unrelated LINEUP_* variable does not break loading."""
    monkeypatch.setenv("LINEUP_HOME", "/opt/lineup")
    result = cli_runner.invoke(cli, ["config", "show", "-k", "schedule.indent"])

    assert result.exit_code == 0, result.output
    assert result.output.strip() == "4"
