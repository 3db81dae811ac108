"""Test fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def table_file(tmp_path: Path, sample_table: pd.DataFrame) -> Path:
    """Write the sample stimulus table to CSV.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.
    sample_table : pd.DataFrame
        Stimulus table to write.

    Returns
    -------
    Path
        Path to the CSV file.
    """
    path = tmp_path / "strings.csv"
    sample_table.to_csv(path, index=False)
    return path


@pytest.fixture
def styled_file(tmp_path: Path, styled_table: pd.DataFrame) -> Path:
    """Write the styled stimulus table to CSV.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.
    styled_table : pd.DataFrame
        Stimulus table with a markup column.

    Returns
    -------
    Path
        Path to the CSV file.
    """
    path = tmp_path / "styled.csv"
    styled_table.to_csv(path, index=False)
    return path


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create a configuration file with custom markup defaults.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the YAML file.
    """
    path = tmp_path / "stimtab.yaml"
    path.write_text(
        """
markup:
  element: div
  element_id: stim
serialization:
  variable_name: items
"""
    )
    return path
