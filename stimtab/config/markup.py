"""Markup configuration models for stimtab."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MarkupConfig(BaseModel):
    """Defaults for stimulus markup generation.

    Parameters
    ----------
    content_column : str
        Column holding element content.
    element : str
        Tag name of the wrapping element.
    element_id : str
        Element id shared by every row.
    output_column : str
        Name of the markup column added to tables.
    unique_ids : bool
        Whether to suffix each id with the row position.

    Examples
    --------
    >>> config = MarkupConfig()
    >>> config.element
    'p'
    >>> config.element_id
    'id_encode'
    """

    content_column: str = Field(default="string", description="Content column")
    element: str = Field(default="p", description="Wrapping element")
    element_id: str = Field(default="id_encode", description="Element id")
    output_column: str = Field(default="html", description="Markup column")
    unique_ids: bool = Field(default=False, description="Suffix ids with row index")
