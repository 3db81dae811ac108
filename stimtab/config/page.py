"""Experiment page configuration models for stimtab."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from stimtab.deployment.jspsych.config import VERSION_PATTERN


class PageDefaultsConfig(BaseModel):
    """Defaults for generated jsPsych pages.

    Parameters
    ----------
    title : str
        Page title.
    jspsych_version : str
        jsPsych version loaded from the CDN, such as "7.3.4".
    ui_theme : Literal["light", "dark"]
        Page colour theme.
    show_data_on_finish : bool
        Whether to display the collected data when the timeline ends.

    Examples
    --------
    >>> config = PageDefaultsConfig()
    >>> config.jspsych_version
    '7.3.4'
    """

    title: str = Field(default="Experiment", description="Page title")
    jspsych_version: str = Field(
        default="7.3.4", pattern=VERSION_PATTERN, description="jsPsych version"
    )
    ui_theme: Literal["light", "dark"] = Field(default="light", description="Theme")
    show_data_on_finish: bool = Field(
        default=True, description="Display data when the timeline ends"
    )
