"""
Configuration models and YAML I/O for ragged-csv parse jobs.

A parse job reads one delimited file, parses it, and writes the result
as a table. The Pydantic models below map 1:1 to the job YAML file:

- ParseJobConfig: Top-level config (input path + read + output).
- ReadConfig: Separator and text encoding of the input.
- OutputConfig: Output directory, format and table name.

Key functions:
- load_config(path) -> ParseJobConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from ragged_csv.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ReadConfig(BaseModel):
    """How to read the input file."""

    separator: str = Field(",", description="Single-character field separator")
    encoding: str = Field(
        "utf-8-sig", description="Text encoding; the default also strips a BOM"
    )

    @field_validator("separator")
    @classmethod
    def _check_single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(
                f"separator must be exactly one character, got {value!r}"
            )
        return value


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )
    table_name: str | None = Field(
        None, description="Output file stem; defaults to the input file stem"
    )


class ParseJobConfig(BaseModel):
    """Top-level configuration for one parse job."""

    input_path: str = Field(..., description="Path to the delimited text file")
    read: ReadConfig = Field(default_factory=ReadConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    def resolved_table_name(self) -> str:
        """Output table name, falling back to the input file stem."""
        return self.output.table_name or Path(self.input_path).stem


def load_config(path: str | Path) -> ParseJobConfig:
    """Load and validate a job YAML file into a ParseJobConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    try:
        config = ParseJobConfig.model_validate(raw)
    except ValueError as exc:
        raise ConfigValidationError(f"Invalid config {path}: {exc}") from exc
    logger.info("Loaded config from %s", path)
    return config


def save_config(config: ParseJobConfig, path: str | Path) -> None:
    """Serialize a ParseJobConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# ragged-csv parse job\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
