"""Configuration models for jsPsych page generation.

This module provides Pydantic models describing the timeline of a generated
jsPsych page: keyboard-response trials, fixation crosses, instruction pages,
and timeline blocks that iterate over serialized stimuli.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stimtab.errors import ConfigurationError
from stimtab.serialization import SerializedStimulus, serialize_stimuli
from stimtab.table import StimulusTable

# Type alias for UI themes
type UITheme = Literal["light", "dark"]

# Type alias for jsPsych key choices
type KeyChoices = Literal["ALL_KEYS", "NO_KEYS"] | list[str]

JS_IDENTIFIER_PATTERN = r"^[A-Za-z_$][A-Za-z0-9_$]*$"

# release versions as published on npm, e.g. "7.3.4" or "8.0.0-rc.1"
VERSION_PATTERN = r"^\d+\.\d+\.\d+([-+.][0-9A-Za-z.-]+)?$"

# unscoped names under the @jspsych npm scope
PLUGIN_PACKAGE_PATTERN = r"^[a-z0-9][a-z0-9-]*$"

_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def _default_plugins() -> dict[str, str]:
    """Return default jsPsych plugin packages and versions."""
    return {
        "plugin-html-keyboard-response": "1.1.3",
        "plugin-instructions": "1.1.4",
    }


def _empty_instruction_pages() -> list[InstructionPage]:
    """Return empty instruction pages list."""
    return []


def _empty_stimuli() -> list[SerializedStimulus]:
    """Return empty stimulus list."""
    return []


class KeyboardResponseTrial(BaseModel):
    """Parameters of an html-keyboard-response trial.

    Attributes
    ----------
    choices : KeyChoices
        Keys that are valid responses (default: "ALL_KEYS").
    prompt : str | None
        HTML shown below the stimulus (default: None).
    stimulus_duration : int | None
        Milliseconds the stimulus stays visible (default: until response).
    trial_duration : int | None
        Milliseconds before the trial ends (default: until response).
    post_trial_gap : int
        Blank interval after the trial in milliseconds (default: 0).
    response_ends_trial : bool
        Whether a response ends the trial (default: True).

    Examples
    --------
    >>> trial = KeyboardResponseTrial(choices=["f", "j"], trial_duration=2000)
    >>> trial.parameters()["choices"]
    ['f', 'j']
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    choices: KeyChoices = Field(default="ALL_KEYS")
    prompt: str | None = Field(default=None)
    stimulus_duration: int | None = Field(default=None, ge=0)
    trial_duration: int | None = Field(default=None, ge=0)
    post_trial_gap: int = Field(default=0, ge=0)
    response_ends_trial: bool = Field(default=True)

    def parameters(self) -> dict[str, Any]:
        """Return the jsPsych plugin parameters that are set.

        Returns
        -------
        dict[str, Any]
            Parameter names and JSON values; unset durations and prompt
            are omitted so jsPsych applies its own defaults.
        """
        return self.model_dump(exclude_none=True)


class FixationConfig(BaseModel):
    """Fixation display shown before each stimulus.

    Attributes
    ----------
    enabled : bool
        Whether to show the fixation (default: True).
    content : str
        HTML content of the fixation (default: a large "+").
    duration_ms : int
        How long the fixation is shown (default: 500).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool = Field(default=True)
    content: str = Field(default='<div style="font-size: 60px;">+</div>')
    duration_ms: int = Field(default=500, ge=0)


class InstructionPage(BaseModel):
    """A single instruction page.

    Attributes
    ----------
    content : str
        HTML content for this page.
    title : str | None
        Optional title displayed above the content.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: str
    title: str | None = None

    def to_html(self) -> str:
        """Render the page as HTML."""
        if self.title is None:
            return self.content
        return f"<h2>{self.title}</h2>{self.content}"


class InstructionsConfig(BaseModel):
    """Multi-page instructions shown before the first block.

    Attributes
    ----------
    pages : list[InstructionPage]
        Instruction pages in order.
    allow_backwards : bool
        Whether participants can return to previous pages (default: True).
    button_label_next : str
        Label of the next button (default: "Next").
    button_label_previous : str
        Label of the previous button (default: "Previous").

    Examples
    --------
    >>> config = InstructionsConfig.from_text("Press any key after each string.")
    >>> len(config.pages)
    1
    """

    model_config = ConfigDict(extra="forbid")

    pages: list[InstructionPage] = Field(default_factory=_empty_instruction_pages)
    allow_backwards: bool = True
    button_label_next: str = "Next"
    button_label_previous: str = "Previous"

    @classmethod
    def from_text(cls, text: str) -> InstructionsConfig:
        """Create single-page instructions from plain text or HTML.

        Parameters
        ----------
        text : str
            Content of the single page.

        Returns
        -------
        InstructionsConfig
            Instructions with one page.
        """
        return cls(pages=[InstructionPage(content=text)])


class TimelineBlock(BaseModel):
    """A timeline block iterating over one set of stimuli.

    Attributes
    ----------
    name : str
        Block name, unique within a page (e.g. "encode").
    variable_name : str
        JavaScript variable holding the block's timeline variables.
    stimuli : list[SerializedStimulus]
        Timeline variable records in presentation order.
    trial : KeyboardResponseTrial
        Parameters of the stimulus trial.
    fixation : FixationConfig
        Fixation shown before each stimulus.
    randomize_order : bool
        Whether jsPsych shuffles the stimuli (default: False).
    repetitions : int
        How many times the block is repeated (default: 1).
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    variable_name: str = Field(pattern=JS_IDENTIFIER_PATTERN)
    stimuli: list[SerializedStimulus] = Field(default_factory=_empty_stimuli)
    trial: KeyboardResponseTrial = Field(default_factory=KeyboardResponseTrial)
    fixation: FixationConfig = Field(default_factory=FixationConfig)
    randomize_order: bool = False
    repetitions: int = Field(default=1, ge=1)

    @classmethod
    def from_table(
        cls,
        name: str,
        table: StimulusTable,
        markup_column: str,
        data_columns: Sequence[str],
        variable_name: str | None = None,
        **kwargs: Any,
    ) -> TimelineBlock:
        """Build a block from a stimulus table with a markup column.

        Parameters
        ----------
        name : str
            Block name.
        table : StimulusTable
            Table holding markup and metadata columns.
        markup_column : str
            Column holding pre-built markup.
        data_columns : Sequence[str]
            Metadata columns attached to each trial.
        variable_name : str | None
            JavaScript variable name (default: ``stimuli_<name>`` with
            characters other than letters, digits, ``_`` and ``$`` replaced by
            ``_``).
        **kwargs : Any
            Remaining block fields.

        Returns
        -------
        TimelineBlock
            Block with one record per table row.

        Raises
        ------
        ColumnNotFoundError
            If a referenced column is missing.
        ConfigurationError
            If ``variable_name`` is not a JavaScript identifier.
        """
        stimuli = serialize_stimuli(table, markup_column, data_columns)
        if variable_name is None:
            variable_name = "stimuli_" + _NON_IDENTIFIER_CHARS.sub("_", name)
        elif not re.fullmatch(JS_IDENTIFIER_PATTERN, variable_name):
            raise ConfigurationError(
                f"Invalid JavaScript variable name for block {name!r}: "
                f"{variable_name!r}"
            )
        return cls(
            name=name,
            variable_name=variable_name,
            stimuli=stimuli,
            **kwargs,
        )


class PageConfig(BaseModel):
    """Configuration for a generated jsPsych page.

    Attributes
    ----------
    title : str
        Page title.
    jspsych_version : str
        jsPsych version loaded from the CDN (default: "7.3.4").
    plugins : dict[str, str]
        jsPsych plugin packages and versions to load, keyed by
        package name without the ``@jspsych/`` scope.
    instructions : str | InstructionsConfig | None
        Instructions shown before the first block. A string is a single page.
    show_data_on_finish : bool
        Whether to display the collected data at the end (default: True).
    ui_theme : UITheme
        Page theme (default: "light").

    Examples
    --------
    >>> config = PageConfig(title="String Recognition", instructions="Welcome!")
    >>> config.instructions_config().pages[0].content
    'Welcome!'
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    title: str
    jspsych_version: str = Field(default="7.3.4", pattern=VERSION_PATTERN)
    plugins: dict[str, str] = Field(default_factory=_default_plugins)
    instructions: str | InstructionsConfig | None = Field(default=None)
    show_data_on_finish: bool = Field(default=True)
    ui_theme: UITheme = Field(default="light")

    @field_validator("plugins")
    @classmethod
    def _check_plugins(cls, v: dict[str, str]) -> dict[str, str]:
        """Check plugin package names and versions before they reach a URL."""
        for package, version in v.items():
            if not re.fullmatch(PLUGIN_PACKAGE_PATTERN, package):
                raise ValueError(f"Invalid jsPsych plugin package: {package!r}")
            if not re.fullmatch(VERSION_PATTERN, version):
                raise ValueError(f"Invalid version for {package}: {version!r}")
        return v

    def instructions_config(self) -> InstructionsConfig | None:
        """Return instructions as an InstructionsConfig, if any."""
        if isinstance(self.instructions, str):
            return InstructionsConfig.from_text(self.instructions)
        return self.instructions
