"""
pandas bridge for ragged-csv.

Converts parsed rows into a ``pandas.DataFrame`` so they can be
exported or analysed with the usual tooling.

Column rules:
- Columns appear in order of first appearance across all rows.
- A field missing from a row becomes ``pd.NA``.
- dtype is inferred from the scalar variants seen in the column:

  =====================  ==========
  variants present       dtype
  =====================  ==========
  Integer only           ``Int64``
  Float (+ Integer)      ``float64``
  Float + big Integer    ``object``
  any Text               ``object``
  =====================  ==========

"Big" means an Integer whose magnitude exceeds 2**53: float64 cannot
hold it exactly, so such a mixed column keeps the original scalars.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import pandas as pd

from ragged_csv.rows import Row
from ragged_csv.values import Float, Integer, to_python

_FLOAT_EXACT_LIMIT = 2**53


def column_order(rows: Sequence[Row]) -> list[str]:
    """Field names in order of first appearance across *rows*."""
    seen: dict[str, None] = {}
    for row in rows:
        for name in row:
            seen.setdefault(name, None)
    return list(seen)


def _column_dtype(cells: list) -> str | type:
    kinds = {type(cell) for cell in cells if cell is not None}
    if kinds and kinds <= {Integer}:
        return "Int64"
    if kinds and kinds <= {Integer, Float}:
        if any(
            isinstance(cell, Integer) and abs(cell.value) > _FLOAT_EXACT_LIMIT
            for cell in cells
        ):
            return object
        return np.float64
    return object


def rows_to_frame(rows: Sequence[Row]) -> pd.DataFrame:
    """Build a DataFrame from parsed rows.

    Args:
        rows: Output of ``parse_csv()`` / ``read_csv()``.

    Returns:
        DataFrame with one row per record.  An empty input gives an
        empty frame with no columns.
    """
    columns = column_order(rows)
    data: dict[str, pd.Series] = {}

    for name in columns:
        cells = [row.get(name) for row in rows]
        dtype = _column_dtype(cells)
        values = [pd.NA if cell is None else to_python(cell) for cell in cells]
        if dtype is np.float64:
            values = [np.nan if v is pd.NA else float(v) for v in values]
        data[name] = pd.Series(values, dtype=dtype)

    return pd.DataFrame(data, columns=columns, index=pd.RangeIndex(len(rows)))
