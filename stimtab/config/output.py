"""Timeline variable output configuration models for stimtab."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SerializationConfig(BaseModel):
    """Defaults for timeline variable serialization.

    Parameters
    ----------
    markup_column : str
        Column holding pre-built markup.
    variable_name : str
        JavaScript variable the records are assigned to.
    indent : int | None
        JSON indentation. None writes compact JSON.

    Examples
    --------
    >>> config = SerializationConfig()
    >>> config.variable_name
    'stimuli'
    """

    markup_column: str = Field(default="html", description="Markup column")
    variable_name: str = Field(default="stimuli", description="JavaScript variable")
    indent: int | None = Field(default=None, ge=0, description="JSON indentation")
