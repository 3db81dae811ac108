"""Serialization of stimulus tables to jsPsych timeline variables.

Each table row becomes a record ``{"stimulus": <markup>, "data": {...}}``
whose ``data`` mapping holds the requested metadata columns. jsPsych attaches
``data`` to the trial output, so the metadata travels with each response.

Records are encoded as JSON. ``to_script_literal`` additionally escapes the
characters that could end a ``<script>`` element or a JavaScript string
early, so the result can be pasted into a page verbatim.
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

import numpy as np
import pandas as pd
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    TypeAdapter,
    field_validator,
)

from stimtab.errors import ConfigurationError
from stimtab.table import StimulusTable, require_columns

logger = logging.getLogger(__name__)

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# characters that are legal in JSON strings but unsafe inside a script element
_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_SCRIPT_UNSAFE = re.compile("[" + "".join(_SCRIPT_ESCAPES) + "]")


class SerializedStimulus(BaseModel):
    """One timeline variable record.

    Attributes
    ----------
    stimulus : str
        Markup rendered by the presentation plugin.
    data : dict[str, JsonValue]
        Metadata attached to the trial's recorded data, in column order.

    Examples
    --------
    >>> record = SerializedStimulus(stimulus="<p>YRTOX</p>", data={"phase": "encode"})
    >>> record.model_dump()
    {'stimulus': '<p>YRTOX</p>', 'data': {'phase': 'encode'}}
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    stimulus: str
    data: dict[str, JsonValue] = Field(default_factory=dict)

    @field_validator("data")
    @classmethod
    def _finite_numbers(cls, v: dict[str, JsonValue]) -> dict[str, JsonValue]:
        """Replace infinite and NaN floats, which JSON cannot encode."""
        return {key: to_json_value(value) for key, value in v.items()}


_RECORDS_ADAPTER = TypeAdapter(list[SerializedStimulus])


def to_json_value(value: Any) -> JsonValue:
    """Represent a table cell as a JSON value.

    numpy scalars become Python scalars, missing values and non-finite
    floats become None and dates become ISO 8601 strings. Other values pass
    through unchanged, or as their string form when JSON has no
    representation for them.

    Parameters
    ----------
    value : Any
        Cell value.

    Returns
    -------
    JsonValue
        JSON-compatible value.

    Examples
    --------
    >>> import numpy as np
    >>> to_json_value(np.int64(3))
    3
    >>> to_json_value(float("nan")) is None
    True
    >>> to_json_value(float("-inf")) is None
    True
    """
    if value is None or value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, str | bool | int | float):
        return value
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple | np.ndarray):
        return [to_json_value(v) for v in value]
    return str(value)


def serialize_stimuli(
    table: StimulusTable,
    markup_column: str,
    data_columns: Sequence[str],
) -> list[SerializedStimulus]:
    """Convert a stimulus table to timeline variable records.

    Parameters
    ----------
    table : StimulusTable
        Table holding a markup column.
    markup_column : str
        Column holding pre-built markup.
    data_columns : Sequence[str]
        Metadata columns copied into each record's ``data``, in this order.

    Returns
    -------
    list[SerializedStimulus]
        One record per row, in row order.

    Raises
    ------
    ColumnNotFoundError
        If the markup column or a metadata column is missing.

    Examples
    --------
    >>> import pandas as pd
    >>> table = pd.DataFrame(
    ...     {"html": ["<p>YRTOX</p>"], "string": ["YRTOX"], "phase": ["encode"]}
    ... )
    >>> serialize_stimuli(table, "html", ["string", "phase"])[0].data
    {'string': 'YRTOX', 'phase': 'encode'}
    """
    data_columns = list(data_columns)
    require_columns(table, [markup_column, *data_columns])

    used = list(dict.fromkeys([markup_column, *data_columns]))
    records: list[SerializedStimulus] = []
    for row in table[used].to_dict(orient="records"):
        records.append(
            SerializedStimulus(
                stimulus=str(row[markup_column]),
                data={col: to_json_value(row[col]) for col in data_columns},
            )
        )

    logger.debug(
        "Serialized %d stimuli with data columns %s", len(records), data_columns
    )
    return records


def _dump(records: Sequence[SerializedStimulus]) -> list[dict[str, Any]]:
    return [record.model_dump(mode="json") for record in records]


def to_json(records: Sequence[SerializedStimulus], indent: int | None = None) -> str:
    """Encode records as a JSON array.

    Parameters
    ----------
    records : Sequence[SerializedStimulus]
        Records to encode.
    indent : int | None
        Indentation for pretty printing (default: compact).

    Returns
    -------
    str
        JSON array of ``{"stimulus", "data"}`` objects.
    """
    return json.dumps(
        _dump(records), indent=indent, ensure_ascii=False, allow_nan=False
    )


def to_script_literal(
    records: Sequence[SerializedStimulus], indent: int | None = None
) -> str:
    """Encode records as JSON safe to embed in a script element.

    ``<``, ``>``, ``&`` and the JavaScript line terminators U+2028/U+2029
    are written as ``\\uXXXX`` escapes. These only occur inside JSON
    strings, so the literal still parses to the same records.

    Parameters
    ----------
    records : Sequence[SerializedStimulus]
        Records to encode.
    indent : int | None
        Indentation for pretty printing (default: compact).

    Returns
    -------
    str
        Script-safe JSON array.

    Examples
    --------
    >>> record = SerializedStimulus(stimulus="</script>")
    >>> to_script_literal([record])
    '[{"stimulus": "\\\\u003c/script\\\\u003e", "data": {}}]'
    """
    encoded = to_json(records, indent=indent)
    return _SCRIPT_UNSAFE.sub(lambda m: _SCRIPT_ESCAPES[m.group(0)], encoded)


def to_script_assignment(
    records: Sequence[SerializedStimulus],
    name: str = "stimuli",
    indent: int | None = None,
) -> str:
    """Encode records as a ``const`` declaration.

    Parameters
    ----------
    records : Sequence[SerializedStimulus]
        Records to encode.
    name : str
        JavaScript variable name (default: "stimuli").
    indent : int | None
        Indentation for pretty printing (default: compact).

    Returns
    -------
    str
        ``const <name> = <literal>;``

    Raises
    ------
    ConfigurationError
        If ``name`` is not a JavaScript identifier.
    """
    if not _JS_IDENTIFIER.fullmatch(name):
        raise ConfigurationError(f"Invalid JavaScript variable name: {name!r}")
    return f"const {name} = {to_script_literal(records, indent=indent)};"


def parse_stimuli(text: str) -> list[SerializedStimulus]:
    """Parse records written by ``to_json`` or ``to_script_literal``.

    Parameters
    ----------
    text : str
        JSON array of records.

    Returns
    -------
    list[SerializedStimulus]
        Parsed records, in order.

    Raises
    ------
    pydantic.ValidationError
        If the text is not a JSON array of records.
    """
    return _RECORDS_ADAPTER.validate_json(text)
