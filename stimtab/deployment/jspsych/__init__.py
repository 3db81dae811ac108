"""jsPsych page generation.

Builds jsPsych 7 pages whose timeline blocks iterate over serialized
stimulus records.
"""

from stimtab.deployment.jspsych.config import (
    FixationConfig,
    InstructionPage,
    InstructionsConfig,
    KeyboardResponseTrial,
    PageConfig,
    TimelineBlock,
)
from stimtab.deployment.jspsych.generator import JsPsychPageGenerator

__all__ = [
    "FixationConfig",
    "InstructionPage",
    "InstructionsConfig",
    "JsPsychPageGenerator",
    "KeyboardResponseTrial",
    "PageConfig",
    "TimelineBlock",
]
