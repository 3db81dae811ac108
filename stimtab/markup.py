"""HTML markup for stimulus table rows.

Each row's content is wrapped in a named element whose ``style`` attribute is
built from the row's style columns, e.g.::

    <p id="id_encode" style="font-size: 15pt;">YRTOX</p>

All rows share one element id by default. jsPsych renders one stimulus at a
time, so the shared id never appears twice in the document; ``unique_ids``
suffixes the row position for pages that render several rows at once.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

import pandas as pd
from markupsafe import escape

from stimtab.errors import ConfigurationError
from stimtab.table import StimulusTable, StyleMapping, require_columns

logger = logging.getLogger(__name__)

_ELEMENT_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


def render_element(
    content: object,
    element: str,
    element_id: str,
    declaration: str,
) -> str:
    """Render a single stimulus element.

    Parameters
    ----------
    content : object
        Element content, inserted verbatim (it may itself be markup).
    element : str
        Tag name of the wrapping element.
    element_id : str
        Value of the ``id`` attribute.
    declaration : str
        Value of the ``style`` attribute.

    Returns
    -------
    str
        The element markup.

    Examples
    --------
    >>> render_element("YRTOX", "p", "id_encode", "font-size: 15pt;")
    '<p id="id_encode" style="font-size: 15pt;">YRTOX</p>'
    """
    return (
        f'<{element} id="{escape(element_id)}" style="{escape(declaration)}">'
        f"{content}</{element}>"
    )


def build_markup(
    table: StimulusTable,
    content_column: str,
    element: str,
    column_names: Sequence[str],
    css: Sequence[str],
    element_id: str,
    output_column: str = "html",
    *,
    unique_ids: bool = False,
) -> pd.Series:
    """Add a markup column to a stimulus table.

    Parameters
    ----------
    table : StimulusTable
        Table to extend in place.
    content_column : str
        Column holding the element content.
    element : str
        Tag name of the wrapping element (e.g. "p", "div").
    column_names : Sequence[str]
        Style source columns, paired positionally with ``css``.
    css : Sequence[str]
        CSS property names the style columns are written to.
    element_id : str
        Element id shared by every row.
    output_column : str
        Name of the markup column to add (default: "html").
    unique_ids : bool
        Whether to suffix each id with the row position (default: False).

    Returns
    -------
    pd.Series
        The markup column, one string per row in row order.

    Raises
    ------
    ConfigurationError
        If ``column_names`` and ``css`` differ in length or ``element`` is
        not a valid tag name.
    ColumnNotFoundError
        If the content column or a style column is missing.

    Examples
    --------
    >>> import pandas as pd
    >>> table = pd.DataFrame({"string": ["YRTOX"], "font_size": ["15pt"]})
    >>> build_markup(
    ...     table, "string", "p", ["font_size"], ["font-size"], "id_encode"
    ... ).iloc[0]
    '<p id="id_encode" style="font-size: 15pt;">YRTOX</p>'
    """
    mapping = StyleMapping.from_lists(column_names, css)
    if not _ELEMENT_NAME.match(element):
        raise ConfigurationError(f"Invalid element name: {element!r}")
    require_columns(table, [content_column, *mapping.columns])

    # records keep each column's own dtype; iterrows would upcast mixed rows
    used = list(dict.fromkeys([content_column, *mapping.columns]))
    rows = table[used].to_dict(orient="records")

    markup: list[str] = []
    for position, row in enumerate(rows):
        row_id = f"{element_id}_{position}" if unique_ids else element_id
        markup.append(
            render_element(
                row[content_column], element, row_id, mapping.declaration(row)
            )
        )

    column = pd.Series(markup, index=table.index, name=output_column, dtype=object)
    table[output_column] = column

    logger.debug(
        "Built %d <%s> elements into column '%s'", len(markup), element, output_column
    )
    return column
