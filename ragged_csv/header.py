"""
Header line detection for ragged-csv.

The header is the first line of the input that carries any content:
leading blank lines are skipped, and everything after the header line is
left on the iterator for the row scanner.

A line counts as the header when it is non-blank after trimming **or**
when it contains the separator. The second rule matters for whitespace
separators: with ``"\\t"`` a line made only of tabs is a header of blank
cells, not a blank line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ragged_csv.naming import synthetic_name
from ragged_csv.values import WHITESPACE

logger = logging.getLogger(__name__)


def is_header_line(line: str, separator: str) -> bool:
    """Return True if *line* is eligible to be the header line."""
    return separator in line or bool(line.strip(WHITESPACE))


def tokenize_header(line: str, separator: str) -> list[str]:
    """Split a header line into field names.

    Every separator-delimited substring is one cell, including empty
    ones. Cells are trimmed; a cell that is blank after trimming is named
    ``__{n}`` after its 1-based position.
    """
    return [
        cell.strip(WHITESPACE) or synthetic_name(index)
        for index, cell in enumerate(line.split(separator))
    ]


def scan_header(lines: Iterator[str], separator: str) -> list[str] | None:
    """Consume *lines* up to and including the header line.

    The iterator is advanced exactly past the header line and no
    further, so the caller can keep iterating it for data rows.

    Args:
        lines: Iterator over the input lines (line terminators removed).
        separator: Single-character field separator.

    Returns:
        The list of field names, or ``None`` if the iterator ran out
        before any header-eligible line appeared.
    """
    skipped = 0
    for line in lines:
        if is_header_line(line, separator):
            header = tokenize_header(line, separator)
            logger.debug(
                "Header found after %d blank line(s): %d field(s)",
                skipped, len(header),
            )
            return header
        skipped += 1
    return None
