"""
Exporter for ragged-csv.

Writes parsed rows to the output directory as a single table in the
configured format (CSV or Parquet).

Output file naming convention:
  {table_name}.{format}  -- e.g., "inventory.parquet", "inventory.csv"

Parquet keeps the inferred column dtypes (``Int64``, ``float64``) so the
file can be loaded without re-parsing; CSV is there for tools that only
read text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

import pandas as pd

from ragged_csv.exceptions import ExportError
from ragged_csv.frame import rows_to_frame
from ragged_csv.rows import Row

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_rows(
    rows: Sequence[Row],
    output_dir: str | Path,
    table_name: str,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> str:
    """Write parsed rows to ``{output_dir}/{table_name}.{output_format}``.

    The output directory is created recursively if it does not exist.

    Args:
        rows: Parsed rows (see ``parse_csv()``).
        output_dir: Directory to write into.
        table_name: File stem of the output table.
        output_format: ``"csv"`` or ``"parquet"``.

    Returns:
        The written file path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    df = rows_to_frame(rows)
    file_path = out / f"{table_name}.{output_format}"
    _write_dataframe(df, file_path, output_format)
    logger.info(
        "Exported table '%s' -> %s (%d rows, %d cols)",
        table_name,
        file_path.name,
        len(df),
        len(df.columns),
    )
    return str(file_path)
