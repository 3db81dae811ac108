"""Pytest fixtures for jsPsych page generation tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from stimtab.deployment.jspsych import PageConfig, TimelineBlock
from stimtab.serialization import SerializedStimulus


@pytest.fixture
def sample_records() -> list[SerializedStimulus]:
    """Create serialized stimuli for two strings.

    Returns
    -------
    list[SerializedStimulus]
        Timeline variable records.
    """
    return [
        SerializedStimulus(
            stimulus='<p id="id_encode" style="font-size: 15pt;">YRTOX</p>',
            data={"string": "YRTOX", "phase": "encode"},
        ),
        SerializedStimulus(
            stimulus='<p id="id_encode" style="font-size: 20pt;">QWPLA</p>',
            data={"string": "QWPLA", "phase": "encode"},
        ),
    ]


@pytest.fixture
def sample_block(sample_records: list[SerializedStimulus]) -> TimelineBlock:
    """Create a timeline block over the sample stimuli.

    Parameters
    ----------
    sample_records : list[SerializedStimulus]
        Timeline variable records.

    Returns
    -------
    TimelineBlock
        Block named "encode".
    """
    return TimelineBlock(
        name="encode", variable_name="stimuli_encode", stimuli=sample_records
    )


@pytest.fixture
def sample_page_config() -> PageConfig:
    """Create a page configuration.

    Returns
    -------
    PageConfig
        Page with a title and single-page instructions.
    """
    return PageConfig(
        title="String Recognition",
        instructions="Press any key after each string.",
    )


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory path.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Output directory that does not exist yet.
    """
    return tmp_path / "experiment"
