"""Tests for main CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from stimtab import __version__
from stimtab.cli.main import cli


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test --version option."""
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test --help option."""
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("strings", "markup", "serialize", "page", "config"):
        assert command in result.output


def test_config_show_yaml(cli_runner: CliRunner) -> None:
    """Test showing the default configuration as YAML."""
    result = cli_runner.invoke(cli, ["config", "show"])
    assert result.exit_code == 0
    data = yaml.safe_load(result.stdout)
    assert data["profile"] == "default"
    assert data["markup"]["element"] == "p"


def test_config_show_json_profile(cli_runner: CliRunner) -> None:
    """Test showing a profile as JSON."""
    result = cli_runner.invoke(
        cli, ["--profile", "dev", "config", "show", "-f", "json"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["profile"] == "dev"
    assert data["serialization"]["indent"] == 2


def test_config_file(cli_runner: CliRunner, mock_config_file: Path) -> None:
    """Test that a configuration file overrides the profile."""
    result = cli_runner.invoke(
        cli, ["--config-file", str(mock_config_file), "config", "show", "-f", "json"]
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["markup"]["element"] == "div"
    assert data["serialization"]["variable_name"] == "items"


def test_missing_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test that a missing configuration file is a usage error."""
    result = cli_runner.invoke(
        cli, ["--config-file", str(tmp_path / "missing.yaml"), "config", "show"]
    )
    assert result.exit_code == 2


def test_unknown_profile(cli_runner: CliRunner) -> None:
    """Test that unknown profiles are rejected."""
    result = cli_runner.invoke(cli, ["--profile", "prod", "config", "show"])
    assert result.exit_code == 2


def test_verbose_reports_config(cli_runner: CliRunner) -> None:
    """Test that --verbose reports where the configuration came from."""
    result = cli_runner.invoke(cli, ["--verbose", "config", "show", "-f", "json"])
    assert result.exit_code == 0
    assert "Loaded configuration" in result.stdout


def test_quiet_sets_error(cli_runner: CliRunner) -> None:
    """Test that --quiet switches logging to ERROR."""
    result = cli_runner.invoke(cli, ["--quiet", "config", "show", "-f", "json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["logging"]["level"] == "ERROR"


def test_config_export(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test exporting the effective configuration."""
    output = tmp_path / "exported.yaml"
    result = cli_runner.invoke(
        cli, ["--profile", "dev", "config", "export", str(output)]
    )
    assert result.exit_code == 0
    data = yaml.safe_load(output.read_text())
    assert data["profile"] == "dev"
    assert data["logging"]["level"] == "DEBUG"
    assert "markup" not in data


def test_config_export_all(cli_runner: CliRunner, tmp_path: Path) -> None:
    """Test exporting every value."""
    output = tmp_path / "exported.yaml"
    result = cli_runner.invoke(cli, ["config", "export", str(output), "--all"])
    assert result.exit_code == 0
    assert yaml.safe_load(output.read_text())["markup"]["element"] == "p"


def test_config_profiles(cli_runner: CliRunner) -> None:
    """Test listing profiles."""
    result = cli_runner.invoke(cli, ["config", "profiles"])
    assert result.exit_code == 0
    for name in ("default", "dev", "test"):
        assert name in result.output
