"""Stimulus tables and style mappings.

A stimulus table is a ``pandas.DataFrame`` whose rows are stimuli and whose
columns hold content, style values, metadata, and generated markup. Row order
is significant: it is the presentation order unless the experiment page
randomizes it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from itertools import cycle, islice
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator

from stimtab.errors import ColumnNotFoundError, ConfigurationError

logger = logging.getLogger(__name__)

type StimulusTable = pd.DataFrame

_READ_KWARGS: dict[str, dict[str, Any]] = {
    ".csv": {"sep": ","},
    ".tsv": {"sep": "\t"},
}


class StyleMapping(BaseModel):
    """Pairing of table columns with CSS properties.

    Each source column is paired positionally with the CSS property its
    value is written to. The same mapping applies to every row.

    Attributes
    ----------
    columns : tuple[str, ...]
        Source column names.
    css : tuple[str, ...]
        Target CSS property names, parallel to ``columns``.

    Examples
    --------
    >>> mapping = StyleMapping.from_lists(["font_size"], ["font-size"])
    >>> mapping.declaration({"font_size": "15pt"})
    'font-size: 15pt;'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    columns: tuple[str, ...] = Field(default=(), description="Source columns")
    css: tuple[str, ...] = Field(default=(), description="Target CSS properties")

    @model_validator(mode="after")
    def _check_parallel(self) -> StyleMapping:
        if len(self.columns) != len(self.css):
            raise ValueError(
                f"columns and css must have equal length "
                f"({len(self.columns)} != {len(self.css)})"
            )
        return self

    @classmethod
    def from_lists(cls, columns: Sequence[str], css: Sequence[str]) -> StyleMapping:
        """Build a mapping from parallel lists.

        Parameters
        ----------
        columns : Sequence[str]
            Source column names.
        css : Sequence[str]
            Target CSS property names.

        Returns
        -------
        StyleMapping
            The paired mapping.

        Raises
        ------
        ConfigurationError
            If the lists differ in length.
        """
        if len(columns) != len(css):
            raise ConfigurationError(
                f"column_names and css must have equal length "
                f"({len(columns)} != {len(css)})"
            )
        return cls(columns=tuple(columns), css=tuple(css))

    @classmethod
    def from_dict(cls, mapping: Mapping[str, str]) -> StyleMapping:
        """Build a mapping from ``{column: css_property}`` pairs."""
        return cls(columns=tuple(mapping), css=tuple(mapping.values()))

    def pairs(self) -> list[tuple[str, str]]:
        """Return ``(column, css_property)`` pairs in order."""
        return list(zip(self.columns, self.css, strict=True))

    def declaration(self, row: Mapping[str, Any]) -> str:
        """Render the style declaration for one row.

        Parameters
        ----------
        row : Mapping[str, Any]
            Row values keyed by column name.

        Returns
        -------
        str
            ``"{css}: {value};"`` for every pair, joined by single spaces.
        """
        return " ".join(f"{attr}: {row[col]};" for col, attr in self.pairs())


def require_columns(table: StimulusTable, columns: Iterable[str]) -> None:
    """Check that every column exists in the table.

    Parameters
    ----------
    table : StimulusTable
        Table to check.
    columns : Iterable[str]
        Column names that must be present.

    Raises
    ------
    ColumnNotFoundError
        For the first missing column.
    """
    present = [str(c) for c in table.columns]
    for column in columns:
        if column not in table.columns:
            raise ColumnNotFoundError(column, available=present)


def make_stimulus_table(
    content: Sequence[Any],
    content_column: str = "string",
    **columns: Any,
) -> StimulusTable:
    """Construct a stimulus table from content values.

    Scalar column values are repeated on every row; sequence values must
    have one entry per content value.

    Parameters
    ----------
    content : Sequence[Any]
        Content values, one per stimulus.
    content_column : str
        Name of the content column (default: "string").
    **columns : Any
        Additional columns, as scalars or row-length sequences.

    Returns
    -------
    StimulusTable
        New table with a 0..n-1 index.

    Raises
    ------
    ConfigurationError
        If a sequence column does not match the number of rows, or a column
        name collides with the content column.

    Examples
    --------
    >>> table = make_stimulus_table(["YRTOX", "QWPLA"], font_size="15pt")
    >>> list(table.columns)
    ['string', 'font_size']
    """
    n_rows = len(content)
    data: dict[str, list[Any]] = {content_column: list(content)}

    for name, value in columns.items():
        if name == content_column:
            raise ConfigurationError(
                f"Column '{name}' collides with the content column"
            )
        if isinstance(value, str) or not isinstance(value, Sequence):
            data[name] = [value] * n_rows
        elif len(value) != n_rows:
            raise ConfigurationError(
                f"Column '{name}' has {len(value)} values for {n_rows} rows"
            )
        else:
            data[name] = list(value)

    return pd.DataFrame(data)


def assign_phases(
    table: StimulusTable,
    phases: str | Sequence[str],
    column: str = "phase",
    *,
    repeat: bool = False,
) -> StimulusTable:
    """Label each row with an experiment phase.

    Parameters
    ----------
    table : StimulusTable
        Table to label in place.
    phases : str | Sequence[str]
        One label per row, or a pattern cycled over the rows when
        ``repeat`` is True. A single string labels every row.
    column : str
        Name of the phase column (default: "phase").
    repeat : bool
        Whether to cycle ``phases`` over the rows.

    Returns
    -------
    StimulusTable
        The same table, for chaining.

    Raises
    ------
    ConfigurationError
        If ``phases`` is empty, or does not match the row count when not
        repeating.
    """
    if isinstance(phases, str):
        phases = [phases]
        repeat = True
    if not phases:
        raise ConfigurationError("At least one phase label is required")

    n_rows = len(table)
    if repeat:
        labels = list(islice(cycle(phases), n_rows))
    elif len(phases) != n_rows:
        raise ConfigurationError(
            f"Got {len(phases)} phase labels for {n_rows} rows"
        )
    else:
        labels = list(phases)

    table[column] = labels
    return table


def concat_tables(*tables: StimulusTable) -> StimulusTable:
    """Concatenate tables that share a column set.

    Parameters
    ----------
    *tables : StimulusTable
        Tables in presentation order.

    Returns
    -------
    StimulusTable
        Combined table with a fresh 0..n-1 index.

    Raises
    ------
    ConfigurationError
        If no tables are given or their column sets differ.
    """
    if not tables:
        raise ConfigurationError("At least one table is required")

    expected = set(tables[0].columns)
    for index, table in enumerate(tables[1:], start=1):
        if set(table.columns) != expected:
            raise ConfigurationError(
                f"Table {index} columns {sorted(map(str, table.columns))} differ "
                f"from {sorted(map(str, expected))}"
            )

    columns = list(tables[0].columns)
    return pd.concat([t[columns] for t in tables], ignore_index=True)


def read_table(path: str | Path, **read_kwargs: Any) -> StimulusTable:
    """Read a stimulus table from CSV, TSV or JSON Lines.

    Strings such as ``"NA"`` are kept as text; random letter strings would
    otherwise be read as missing values.

    Parameters
    ----------
    path : str | Path
        Path to a ``.csv``, ``.tsv``, ``.jsonl`` or ``.json`` file.
    **read_kwargs : Any
        Additional keyword arguments passed to the pandas reader.

    Returns
    -------
    StimulusTable
        The loaded table.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ConfigurationError
        If the file extension is not supported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Stimulus table not found: {path}")

    suffix = path.suffix.lower()
    if suffix in _READ_KWARGS:
        kwargs = {"keep_default_na": False, **_READ_KWARGS[suffix], **read_kwargs}
        table = pd.read_csv(path, **kwargs)
    elif suffix == ".jsonl":
        table = pd.read_json(path, lines=True, dtype=False, **read_kwargs)
    elif suffix == ".json":
        table = pd.read_json(path, orient="records", dtype=False, **read_kwargs)
    else:
        raise ConfigurationError(f"Unsupported table format: {path.suffix}")

    logger.debug("Read %d rows from %s", len(table), path)
    return table


def write_table(
    table: StimulusTable, path: str | Path, create_dirs: bool = True
) -> Path:
    """Write a stimulus table as CSV, TSV or JSON Lines.

    Parameters
    ----------
    table : StimulusTable
        Table to write.
    path : str | Path
        Destination; the format follows the extension.
    create_dirs : bool
        If True, create missing parent directories.

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    ConfigurationError
        If the file extension is not supported.
    FileNotFoundError
        If create_dirs is False and the parent directory doesn't exist.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in (*_READ_KWARGS, ".jsonl", ".json"):
        raise ConfigurationError(f"Unsupported table format: {path.suffix}")

    if create_dirs:
        path.parent.mkdir(parents=True, exist_ok=True)
    elif not path.parent.exists():
        raise FileNotFoundError(f"Parent directory does not exist: {path.parent}")

    if suffix in _READ_KWARGS:
        table.to_csv(path, index=False, sep=_READ_KWARGS[suffix]["sep"])
    else:
        table.to_json(
            path,
            orient="records",
            lines=suffix == ".jsonl",
            force_ascii=False,
        )

    logger.debug("Wrote %d rows to %s", len(table), path)
    return path
