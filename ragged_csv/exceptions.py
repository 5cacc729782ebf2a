"""
Custom exception hierarchy for ragged-csv.

Parsing itself never raises on malformed data: blank cells, ragged rows
and unparseable numbers are all absorbed by the pipeline. These
exceptions cover caller mistakes and the file-level helpers around the
parser (config loading, export).
"""


class RaggedCsvError(Exception):
    """Base exception for all ragged-csv errors."""


class InvalidSeparatorError(RaggedCsvError, ValueError):
    """Raised when the separator is not exactly one character.

    Multi-character separators are not supported; an empty string cannot
    split anything.
    """


class ConfigValidationError(RaggedCsvError):
    """Raised when a job config YAML file is empty or fails validation."""


class ExportError(RaggedCsvError):
    """Raised when parsed rows cannot be written to disk.

    For example, an unsupported output format, a permission error, or a
    missing Parquet engine.
    """
