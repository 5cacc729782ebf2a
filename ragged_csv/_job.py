"""
Internal job orchestration for ragged-csv.

Runs the read -> parse -> export sequence described by a
``ParseJobConfig``. Used by the public ``run()`` entry point and by
``scripts/run_parse.py``.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging

from ragged_csv.config import ParseJobConfig
from ragged_csv.export import export_rows
from ragged_csv.reader import read_csv

logger = logging.getLogger(__name__)


def run_job(config: ParseJobConfig) -> str:
    """Parse the configured input file and export it.

    Returns:
        Path of the written output table.
    """
    rows = read_csv(
        config.input_path,
        separator=config.read.separator,
        encoding=config.read.encoding,
    )
    written = export_rows(
        rows,
        output_dir=config.output.output_dir,
        table_name=config.resolved_table_name(),
        output_format=config.output.output_format,
    )
    logger.info("Job complete: %s -> %s", config.input_path, written)
    return written
