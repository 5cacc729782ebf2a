"""
Data row scanning for ragged-csv.

Turns one data line into a ``Row``: a mapping from field name to
``ScalarValue``. Rows are allowed to disagree with the header:

- Short rows simply lack the trailing fields.
- Long rows name their extra cells ``__{n}`` by position.
- Blank cells are omitted from the mapping rather than stored as null.

When the header repeats a name, the cell at the later position wins.
"""

from __future__ import annotations

from collections.abc import Sequence

from ragged_csv.naming import field_name
from ragged_csv.values import ScalarValue, classify_value

Row = dict[str, ScalarValue]


def scan_row(line: str, separator: str, header: Sequence[str]) -> Row:
    """Parse one data line against the header.

    Args:
        line: A trimmed, non-blank data line.
        separator: Single-character field separator.
        header: Field names from the header line.

    Returns:
        Mapping of resolved field name -> classified value, with blank
        cells left out.
    """
    row: Row = {}
    for index, cell in enumerate(line.split(separator)):
        value = classify_value(cell)
        if value is None:
            continue
        row[field_name(header, index)] = value
    return row
