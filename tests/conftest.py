"""Root pytest configuration for stimtab tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pandas as pd
import pytest


@pytest.fixture(scope="session")
def tests_dir() -> Path:
    """Get tests directory path.

    Returns
    -------
    Path
        Path to tests directory
    """
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove STIMTAB_ variables inherited from the outer environment.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest monkeypatch fixture.
    """
    for key in list(os.environ):
        if key.startswith("STIMTAB_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_stimtab_logger() -> Iterator[None]:
    """Remove handlers the CLI installs on the package logger."""
    yield
    logger = logging.getLogger("stimtab")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_table() -> pd.DataFrame:
    """Create a stimulus table with content, style, and metadata columns.

    Returns
    -------
    pd.DataFrame
        Three letter-string stimuli.
    """
    return pd.DataFrame(
        {
            "string": ["YRTOX", "QWPLA", "MZKEB"],
            "font_size": ["15pt", "20pt", "15pt"],
            "color": ["black", "red", "blue"],
            "phase": ["encode", "encode", "recognize"],
        }
    )


@pytest.fixture
def styled_table(sample_table: pd.DataFrame) -> pd.DataFrame:
    """Create a stimulus table with a prebuilt markup column.

    Parameters
    ----------
    sample_table : pd.DataFrame
        Base stimulus table.

    Returns
    -------
    pd.DataFrame
        Table with an ``html`` column.
    """
    table = sample_table.copy()
    table["html"] = [
        f'<p id="id_encode" style="font-size: {size};">{text}</p>'
        for text, size in zip(table["string"], table["font_size"], strict=True)
    ]
    return table
