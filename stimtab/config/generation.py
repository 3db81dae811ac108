"""Random stimulus generation configuration models for stimtab."""

from __future__ import annotations

import string

from pydantic import BaseModel, Field


class GenerationConfig(BaseModel):
    """Configuration for random string stimuli.

    Parameters
    ----------
    length : int
        Characters per string.
    alphabet : str
        Characters to draw from.
    unique : bool
        Whether strings must be distinct.
    seed : int | None
        Random seed. None draws a fresh seed.

    Examples
    --------
    >>> config = GenerationConfig()
    >>> config.length
    5
    >>> config.alphabet == string.ascii_uppercase
    True
    """

    length: int = Field(default=5, ge=1, description="Characters per string")
    alphabet: str = Field(
        default=string.ascii_uppercase, min_length=1, description="Alphabet"
    )
    unique: bool = Field(default=True, description="Draw distinct strings")
    seed: int | None = Field(default=None, description="Random seed")
