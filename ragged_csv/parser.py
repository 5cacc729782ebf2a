"""
Parse orchestration for ragged-csv.

``parse_csv`` is a single forward pass over the input lines:

1. Split the text on ``\\n`` (a trailing ``\\r`` is dropped per line).
2. ``scan_header()`` consumes leading blank lines and the header line.
3. Every remaining line is trimmed; blank ones are skipped, the rest go
   through ``scan_row()`` in order.

Only ``\\n`` breaks lines. Other characters that ``str.splitlines``
would treat as line boundaries (``\\x1c``-``\\x1e``, ``\\x85``, ...) are
ordinary characters here, so they remain usable as separators.

The function is pure: no I/O and no shared state, safe to call from
several threads at once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ragged_csv.exceptions import InvalidSeparatorError
from ragged_csv.header import scan_header
from ragged_csv.rows import Row, scan_row
from ragged_csv.values import WHITESPACE

logger = logging.getLogger(__name__)


def validate_separator(separator: str) -> str:
    """Check that *separator* is exactly one character.

    Raises:
        InvalidSeparatorError: If it is empty, longer than one
            character, or not a string.
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise InvalidSeparatorError(
            f"Separator must be a single character, got {separator!r}"
        )
    return separator


def split_lines(text: str) -> Iterator[str]:
    """Yield the lines of *text* without their ``\\n`` / ``\\r\\n`` terminators.

    A final terminator does not produce an extra empty line.
    """
    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        if part.endswith("\r"):
            part = part[:-1]
        yield part


def parse_csv(text: str, separator: str = ",") -> list[Row]:
    """Parse delimited text into a list of rows.

    Args:
        text: The whole input, newline-separated.
        separator: Any single character.

    Returns:
        One mapping per non-blank line after the header, in input order.
        Empty when the input has no header line.

    Raises:
        InvalidSeparatorError: If *separator* is not one character.
            Malformed data never raises.

    Examples::

        parse_csv("a,b,c\\n1,,x\\n")
        # [{"a": Integer(1), "c": Text("x")}]

        parse_csv("\\n\\nkey1;key2\\nval1;2.5\\n", ";")
        # [{"key1": Text("val1"), "key2": Float(2.5)}]
    """
    validate_separator(separator)

    lines = split_lines(text)
    header = scan_header(lines, separator)
    if header is None:
        logger.debug("No header line found; returning no rows")
        return []

    rows: list[Row] = []
    for line in lines:
        trimmed = line.strip(WHITESPACE)
        if not trimmed:
            continue
        rows.append(scan_row(trimmed, separator, header))

    logger.debug("Parsed %d row(s) against %d header field(s)", len(rows), len(header))
    return rows
