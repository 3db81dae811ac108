"""Pytest fixtures for config module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    """Create a sample YAML config file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML config file.
    """
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
profile: custom
paths:
  data_dir: /test/data
  output_dir: /test/output
markup:
  element: div
  element_id: stim
logging:
  level: DEBUG
"""
    )
    return config_file


@pytest.fixture
def malformed_yaml_file(tmp_path: Path) -> Path:
    """Create a malformed YAML file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created malformed YAML file.
    """
    config_file = tmp_path / "bad.yaml"
    config_file.write_text(
        """
profile: test
  paths:
    data_dir: /test/data
    this is not valid yaml: [
"""
    )
    return config_file


@pytest.fixture
def env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up test environment variables.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch fixture.

    Returns
    -------
    dict[str, str]
        The variables that were set.
    """
    variables = {
        "STIMTAB_LOGGING__LEVEL": "WARNING",
        "STIMTAB_GENERATION__SEED": "7",
        "STIMTAB_MARKUP__UNIQUE_IDS": "true",
    }
    for key, value in variables.items():
        monkeypatch.setenv(key, value)
    return variables
