"""Tests for jsPsych page configuration models."""

from __future__ import annotations

import pandas as pd
import pytest
from pydantic import ValidationError

from stimtab.deployment.jspsych import (
    FixationConfig,
    InstructionPage,
    InstructionsConfig,
    KeyboardResponseTrial,
    PageConfig,
    TimelineBlock,
)
from stimtab.errors import ColumnNotFoundError, ConfigurationError


class TestKeyboardResponseTrial:
    """Tests for KeyboardResponseTrial."""

    def test_default_parameters(self) -> None:
        """Test that unset optional parameters are omitted."""
        assert KeyboardResponseTrial().parameters() == {
            "choices": "ALL_KEYS",
            "post_trial_gap": 0,
            "response_ends_trial": True,
        }

    def test_custom_parameters(self) -> None:
        """Test set parameters are included."""
        trial = KeyboardResponseTrial(
            choices=["f", "j"], trial_duration=2000, prompt="<p>F or J?</p>"
        )
        parameters = trial.parameters()
        assert parameters["choices"] == ["f", "j"]
        assert parameters["trial_duration"] == 2000
        assert parameters["prompt"] == "<p>F or J?</p>"
        assert "stimulus_duration" not in parameters

    def test_invalid_choices(self) -> None:
        """Test that unknown choice keywords are rejected."""
        with pytest.raises(ValidationError):
            KeyboardResponseTrial(choices="SOME_KEYS")  # type: ignore[arg-type]

    def test_negative_duration(self) -> None:
        """Test duration validation."""
        with pytest.raises(ValidationError):
            KeyboardResponseTrial(trial_duration=-1)


class TestFixationConfig:
    """Tests for FixationConfig."""

    def test_defaults(self) -> None:
        """Test default fixation settings."""
        fixation = FixationConfig()
        assert fixation.enabled is True
        assert "+" in fixation.content
        assert fixation.duration_ms == 500


class TestInstructions:
    """Tests for instruction models."""

    def test_page_without_title(self) -> None:
        """Test rendering a page without a title."""
        assert InstructionPage(content="<p>Hi</p>").to_html() == "<p>Hi</p>"

    def test_page_with_title(self) -> None:
        """Test rendering a page with a title."""
        page = InstructionPage(content="<p>Hi</p>", title="Welcome")
        assert page.to_html() == "<h2>Welcome</h2><p>Hi</p>"

    def test_from_text(self) -> None:
        """Test single-page instructions from text."""
        config = InstructionsConfig.from_text("Press any key.")
        assert [page.content for page in config.pages] == ["Press any key."]
        assert config.allow_backwards is True
        assert config.button_label_next == "Next"


class TestTimelineBlock:
    """Tests for TimelineBlock."""

    def test_defaults(self) -> None:
        """Test default block settings."""
        block = TimelineBlock(name="encode", variable_name="stimuli_encode")
        assert block.stimuli == []
        assert block.randomize_order is False
        assert block.repetitions == 1
        assert block.fixation.enabled is True

    @pytest.mark.parametrize("name", ["1abc", "my-var", "a b", ""])
    def test_invalid_variable_name(self, name: str) -> None:
        """Test that non-identifiers are rejected."""
        with pytest.raises(ValidationError):
            TimelineBlock(name="encode", variable_name=name)

    def test_repetitions_positive(self) -> None:
        """Test repetitions validation."""
        with pytest.raises(ValidationError):
            TimelineBlock(name="encode", variable_name="s", repetitions=0)

    def test_from_table(self, styled_table: pd.DataFrame) -> None:
        """Test building a block from a table."""
        block = TimelineBlock.from_table(
            "encode", styled_table, "html", ["string", "phase"], randomize_order=True
        )
        assert block.variable_name == "stimuli_encode"
        assert len(block.stimuli) == 3
        assert block.stimuli[0].data == {"string": "YRTOX", "phase": "encode"}
        assert block.randomize_order is True

    def test_from_table_variable_name(self, styled_table: pd.DataFrame) -> None:
        """Test an explicit variable name."""
        block = TimelineBlock.from_table(
            "encode", styled_table, "html", [], variable_name="items"
        )
        assert block.variable_name == "items"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("phase 1", "stimuli_phase_1"),
            ("study-1", "stimuli_study_1"),
            ("1st", "stimuli_1st"),
            ("encode$", "stimuli_encode$"),
        ],
    )
    def test_from_table_default_name_sanitized(
        self, styled_table: pd.DataFrame, name: str, expected: str
    ) -> None:
        """Test that block names with other characters give valid variables."""
        block = TimelineBlock.from_table(name, styled_table, "html", [])
        assert block.name == name
        assert block.variable_name == expected

    @pytest.mark.parametrize("variable_name", ["my-var", "1abc", "", "items\n"])
    def test_from_table_invalid_variable_name(
        self, styled_table: pd.DataFrame, variable_name: str
    ) -> None:
        """Test that an explicit non-identifier raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="variable name"):
            TimelineBlock.from_table(
                "encode", styled_table, "html", [], variable_name=variable_name
            )

    def test_from_table_missing_column(self, styled_table: pd.DataFrame) -> None:
        """Test that a missing column raises ColumnNotFoundError."""
        with pytest.raises(ColumnNotFoundError):
            TimelineBlock.from_table("encode", styled_table, "markup", [])


class TestPageConfig:
    """Tests for PageConfig."""

    def test_defaults(self) -> None:
        """Test default page settings."""
        config = PageConfig(title="Experiment")
        assert config.jspsych_version == "7.3.4"
        assert "plugin-html-keyboard-response" in config.plugins
        assert config.instructions_config() is None

    def test_string_instructions(self) -> None:
        """Test that string instructions become one page."""
        config = PageConfig(title="Experiment", instructions="Welcome!")
        instructions = config.instructions_config()
        assert instructions is not None
        assert instructions.pages[0].content == "Welcome!"

    def test_structured_instructions(self) -> None:
        """Test passing an InstructionsConfig through."""
        instructions = InstructionsConfig(
            pages=[InstructionPage(content="A"), InstructionPage(content="B")]
        )
        config = PageConfig(title="Experiment", instructions=instructions)
        assert config.instructions_config() is instructions

    def test_invalid_theme(self) -> None:
        """Test theme validation."""
        with pytest.raises(ValidationError):
            PageConfig(title="Experiment", ui_theme="blue")  # type: ignore[arg-type]

    @pytest.mark.parametrize("version", ["7.3.4", "8.0.0", "8.0.0-rc.1"])
    def test_valid_versions(self, version: str) -> None:
        """Test accepted jsPsych versions."""
        config = PageConfig(title="Experiment", jspsych_version=version)
        assert config.jspsych_version == version

    @pytest.mark.parametrize(
        "version", ["latest", "7.3", '7.3.4"><script>alert(1)</script>', "7.3.4 "]
    )
    def test_invalid_version(self, version: str) -> None:
        """Test that versions that are not release numbers are rejected."""
        with pytest.raises(ValidationError):
            PageConfig(title="Experiment", jspsych_version=version)

    def test_custom_plugins(self) -> None:
        """Test a valid plugin mapping."""
        config = PageConfig(
            title="Experiment", plugins={"plugin-html-button-response": "1.2.0"}
        )
        assert config.plugins == {"plugin-html-button-response": "1.2.0"}

    @pytest.mark.parametrize(
        "plugins",
        [
            {'plugin-x"></script>': "1.0.0"},
            {"Plugin-Upper": "1.0.0"},
            {"@jspsych/plugin-instructions": "1.1.4"},
            {"plugin-instructions": '1.1.4"><script>'},
            {"plugin-instructions": "latest"},
        ],
    )
    def test_invalid_plugins(self, plugins: dict[str, str]) -> None:
        """Test that plugin names and versions are validated."""
        with pytest.raises(ValidationError):
            PageConfig(title="Experiment", plugins=plugins)

    def test_version_checked_on_assignment(self) -> None:
        """Test validation of assigned versions."""
        config = PageConfig(title="Experiment")
        with pytest.raises(ValidationError):
            config.jspsych_version = "7.3.4/../evil"
