"""Exceptions raised by stimtab."""

from __future__ import annotations


class StimtabError(Exception):
    """Base exception for stimtab errors."""

    pass


class ConfigurationError(StimtabError, ValueError):
    """Exception raised when a transformation is configured inconsistently.

    Raised for mismatched parallel lists (style columns and CSS attributes),
    invalid element or variable names, and invalid generation arguments.
    """

    pass


class ColumnNotFoundError(StimtabError, LookupError):
    """Exception raised when a referenced column is absent from a table.

    Parameters
    ----------
    column
        Name of the missing column.
    available
        Columns present in the table. None if unknown.

    Attributes
    ----------
    column : str
        Name of the missing column.
    available : list[str]
        Columns present in the table.

    Examples
    --------
    >>> try:
    ...     raise ColumnNotFoundError("font_size", available=["string"])
    ... except LookupError as e:
    ...     print(e.column)
    font_size
    """

    def __init__(self, column: str, available: list[str] | None = None) -> None:
        self.column = column
        self.available = list(available) if available is not None else []
        super().__init__(column)

    def __str__(self) -> str:
        """Return formatted error message."""
        message = f"Column '{self.column}' not found in stimulus table"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        return message
