"""Command line entry point.

Usage:
    csv2aba convert payments.csv                      # writes payments.aba
    csv2aba convert payments.csv -o batch.aba --date 2025-04-23
    csv2aba convert - --stdout < payments.csv
    csv2aba convert-prefix dropzone/ outbox/ --archive archive/
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from csv2aba.core.config import AppSettings
from csv2aba.core.exceptions import Csv2AbaError
from csv2aba.encoders.document import encode_document
from csv2aba.ingestion.csv_reader import read_rows
from csv2aba.models.outputs import ABA_ENCODING, CSV_ENCODING
from csv2aba.persistence import create_file_store
from csv2aba.persistence.paths import aba_filename
from csv2aba.services.converter import AbaConversionService

logger = logging.getLogger("csv2aba")

BOM = "\ufeff"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="csv2aba", description="Convert payment CSVs to CEMTEX ABA files")
    parser.add_argument("--log-level", default=None, help="Override CSV2ABA_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    single = sub.add_parser("convert", help="Convert one local CSV file")
    single.add_argument("input", help="CSV file with BSB, Reference, Name, Account, Amount columns ('-' for stdin)")
    single.add_argument("-o", "--output", default=None, help="ABA output path (default: input name with .aba)")
    single.add_argument("--stdout", action="store_true", help="Write the ABA text to stdout instead of a file")
    single.add_argument("--date", type=date.fromisoformat, default=None,
                        help="Processing date YYYY-MM-DD (default: today)")

    batch = sub.add_parser("convert-prefix", help="Convert every CSV under an S3 prefix")
    batch.add_argument("prefix", help="Source prefix, e.g. dropzone/")
    batch.add_argument("output_prefix", help="Destination prefix for .aba files, e.g. outbox/")
    batch.add_argument("--archive", default=None, help="Move converted CSVs under this prefix")
    batch.add_argument("--date", type=date.fromisoformat, default=None,
                       help="Processing date YYYY-MM-DD (default: today)")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read().removeprefix(BOM)
    return Path(source).read_text(encoding=CSV_ENCODING)


def _convert(args: argparse.Namespace, settings: AppSettings) -> int:
    try:
        text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    try:
        document = encode_document(read_rows(text), args.date, settings.sender.to_profile())
    except Csv2AbaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.stdout:
        sys.stdout.write(document.text)
        return 0

    if args.output:
        output = Path(args.output)
    elif args.input == "-":
        output = Path(aba_filename(None))
    else:
        output = Path(args.input).with_name(aba_filename(args.input))
    try:
        output.write_text(document.text, encoding=ABA_ENCODING, newline="")
    except OSError as exc:
        print(f"Error: cannot write {output}: {exc}", file=sys.stderr)
        return 1
    logger.info("ABA file %s generated: %d records, total %d cents",
                output, document.batch.count, document.batch.total_cents)
    return 0


def _convert_prefix(args: argparse.Namespace, settings: AppSettings) -> int:
    service = AbaConversionService(settings=settings, file_store=create_file_store(settings))
    try:
        results = service.convert_prefix(args.prefix, args.output_prefix, args.archive, args.date)
    except Csv2AbaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    for result in results:
        print(f"{result.source_path} -> {result.path}: {result.record_count} records, "
              f"{result.total_cents} cents")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    logging.basicConfig(level=args.log_level or settings.log_level, stream=sys.stderr)

    if args.command == "convert-prefix":
        return _convert_prefix(args, settings)
    return _convert(args, settings)


if __name__ == "__main__":
    sys.exit(main())
