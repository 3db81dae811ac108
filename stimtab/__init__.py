"""Stimulus tables to jsPsych markup and timeline variables.

This package turns tabular stimulus descriptions into styled HTML markup,
serializes them as script-embeddable timeline variables, and splices them
into a jsPsych experiment page.
"""

from __future__ import annotations

__version__ = "0.1.0"
