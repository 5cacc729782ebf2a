"""
Field naming for ragged-csv.

Columns are addressed by position. A position that has an explicit
header name uses it; anything else (a blank header cell, or a data cell
past the end of the header) gets a synthetic name ``__{n}`` where ``n``
is the 1-based column position.
"""

from __future__ import annotations

from collections.abc import Sequence

SYNTHETIC_PREFIX = "__"


def synthetic_name(index: int) -> str:
    """Synthetic name for the zero-based column *index*, e.g. ``0 -> "__1"``."""
    return f"{SYNTHETIC_PREFIX}{index + 1}"


def field_name(header: Sequence[str], index: int) -> str:
    """Resolve the field name for a zero-based column position.

    Args:
        header: Field names from the header line (possibly empty).
        index: Zero-based column position of the cell.

    Returns:
        ``header[index]`` when the header covers that position, otherwise
        ``synthetic_name(index)``.
    """
    if index < len(header):
        return header[index]
    return synthetic_name(index)
