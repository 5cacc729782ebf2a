"""
ragged-csv: schema-less parsing of delimited text into typed records.

Public API surface:

- ``parse_csv(text, separator)`` -- **core entry point**. Parses text
  into a list of ``dict[str, ScalarValue]`` rows, inferring Integer /
  Float / Text per cell and inventing ``__{n}`` names where the header
  has none. Never raises on malformed data.

- ``read_csv(path, ...)`` -- Same, reading the text from a file.

- ``rows_to_frame(rows)`` / ``export_rows(...)`` / ``format_csv(...)``
  -- Hand parsed rows to pandas, write them as CSV/Parquet, or render
  them back to delimited text.

- ``run(config_path)`` -- Run a read -> parse -> export job described by
  a YAML config.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ragged_csv._job import run_job
from ragged_csv.config import ParseJobConfig, load_config
from ragged_csv.exceptions import (
    ConfigValidationError,
    ExportError,
    InvalidSeparatorError,
    RaggedCsvError,
)
from ragged_csv.export import export_rows
from ragged_csv.frame import rows_to_frame
from ragged_csv.parser import parse_csv
from ragged_csv.reader import read_csv
from ragged_csv.rows import Row
from ragged_csv.values import Float, Integer, ScalarValue, Text, classify_value
from ragged_csv.writer import format_csv

__all__ = [
    "parse_csv",
    "read_csv",
    "rows_to_frame",
    "export_rows",
    "format_csv",
    "classify_value",
    "run",
    "Row",
    "ScalarValue",
    "Text",
    "Integer",
    "Float",
    "ParseJobConfig",
    "RaggedCsvError",
    "InvalidSeparatorError",
    "ConfigValidationError",
    "ExportError",
]

logger = logging.getLogger(__name__)


def run(config_path: str | Path) -> str:
    """Load a job config and run it.

    Args:
        config_path: Path to the job YAML file.

    Returns:
        Path of the written output table.

    Raises:
        FileNotFoundError: If the config or its input file is missing.
        ConfigValidationError: If the config is empty or invalid.
        ExportError: If the output cannot be written.
    """
    logger.info("run() -- config_path=%s", config_path)
    config = load_config(config_path)
    return run_job(config)
