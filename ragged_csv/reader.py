"""
File reading for ragged-csv.

Thin I/O wrapper around ``parse_csv``: the whole file is read as text
and handed to the parser in one piece (there is no streaming mode).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ragged_csv.parser import parse_csv, validate_separator
from ragged_csv.rows import Row

logger = logging.getLogger(__name__)


def read_csv(
    path: str | Path,
    separator: str = ",",
    encoding: str = "utf-8-sig",
) -> list[Row]:
    """Read and parse a delimited text file.

    Args:
        path: Path to the file.
        separator: Single-character field separator.
        encoding: Text encoding. The default ``utf-8-sig`` drops a
            leading BOM, which would otherwise end up in the first
            header name.

    Returns:
        Parsed rows, as returned by ``parse_csv()``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        InvalidSeparatorError: If *separator* is not one character.
    """
    validate_separator(separator)
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    # newline="" keeps "\r\n" intact; split_lines() strips the "\r".
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()

    rows = parse_csv(text, separator)
    logger.info("Read %d row(s) from %s", len(rows), path)
    return rows
