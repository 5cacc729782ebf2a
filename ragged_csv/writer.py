"""
Render parsed rows back to delimited text.

The output is the plain inverse of ``parse_csv``: a header line with the
columns in first-appearance order, then one line per row with absent
fields left empty. Nothing is quoted or escaped, so a Text value that
contains the separator will split into extra cells when parsed again.

Float values are written with ``repr()``, which always yields a
spelling the classifier reads back as Float (``2.0``, ``1e+16``,
``inf``, ``nan``).
"""

from __future__ import annotations

from collections.abc import Sequence

from ragged_csv.frame import column_order
from ragged_csv.parser import validate_separator
from ragged_csv.rows import Row
from ragged_csv.values import Float, Integer, ScalarValue


def format_value(value: ScalarValue) -> str:
    """Textual form of a single scalar."""
    if isinstance(value, Float):
        return repr(value.value)
    if isinstance(value, Integer):
        return str(value.value)
    return value.value


def format_row(row: Row, columns: Sequence[str], separator: str) -> str:
    """Join one row's cells in *columns* order, blank where absent."""
    return separator.join(
        format_value(row[name]) if name in row else "" for name in columns
    )


def format_csv(rows: Sequence[Row], separator: str = ",") -> str:
    """Render *rows* as delimited text, header line first.

    Returns an empty string when there are no columns to write.

    Raises:
        InvalidSeparatorError: If *separator* is not one character.
    """
    validate_separator(separator)
    columns = column_order(rows)
    if not columns:
        return ""
    lines = [separator.join(columns)]
    lines.extend(format_row(row, columns, separator) for row in rows)
    return "\n".join(lines) + "\n"
