"""
Command-line runner: parse a delimited file and export it as a table.

Usage:
    python scripts/run_parse.py inputs/inventory.csv
    python scripts/run_parse.py inputs/export.tsv --separator "\\t" --format csv
    python scripts/run_parse.py --config jobs/inventory.yaml
    python scripts/run_parse.py inputs/inventory.csv --save-config jobs/inventory.yaml

With --config, every other option is ignored and the YAML job is run
as-is. Otherwise a job is built from the arguments (and optionally
saved with --save-config for later reruns).
"""

from __future__ import annotations

import argparse
import codecs
import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_parse")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse a delimited text file with inferred types and export it."
    )
    parser.add_argument("input_path", nargs="?", help="Delimited text file to parse")
    parser.add_argument("--config", help="Run a saved YAML job instead")
    parser.add_argument(
        "--separator",
        default=",",
        help='Single-character separator; escapes such as "\\t" are decoded (default: ",")',
    )
    parser.add_argument("--encoding", default="utf-8-sig", help="Input text encoding")
    parser.add_argument("--output-dir", default="outputs/", help="Output directory")
    parser.add_argument(
        "--format", dest="output_format", choices=["csv", "parquet"], default="parquet"
    )
    parser.add_argument("--table-name", help="Output file stem (default: input stem)")
    parser.add_argument("--save-config", help="Also write the job config to this YAML path")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main() -> int:
    import ragged_csv
    from ragged_csv._job import run_job
    from ragged_csv.config import OutputConfig, ParseJobConfig, ReadConfig, save_config

    args = _build_arg_parser().parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.config:
            written = ragged_csv.run(args.config)
        else:
            if not args.input_path:
                log.error("Either input_path or --config is required")
                return 2
            config = ParseJobConfig(
                input_path=args.input_path,
                read=ReadConfig(
                    separator=codecs.decode(args.separator, "unicode_escape"),
                    encoding=args.encoding,
                ),
                output=OutputConfig(
                    output_dir=args.output_dir,
                    output_format=args.output_format,
                    table_name=args.table_name,
                ),
            )
            if args.save_config:
                save_config(config, args.save_config)
            written = run_job(config)
    except (ragged_csv.RaggedCsvError, FileNotFoundError, ValueError) as exc:
        log.error("Parse failed: %s", exc)
        return 1

    log.info("Wrote %s", written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
