"""CLI entrypoint for pinyin conversion and table export."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

from hanzi_pinyin.dictionary.pypinyin_source import pypinyin_table
from hanzi_pinyin.io.csv_io import write_table_csv
from hanzi_pinyin.models import OutputForm
from hanzi_pinyin.pipeline import build_converter


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Parser with ``convert`` and ``export-table`` subcommands.
    """

    parser = argparse.ArgumentParser(description="Convert Chinese text to pinyin.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert_parser = subparsers.add_parser("convert", help="Convert text to pinyin.")
    convert_parser.add_argument(
        "text",
        nargs="*",
        help="Text to convert; reads standard input line by line when omitted.",
    )
    convert_parser.add_argument(
        "--form",
        choices=[form.value for form in OutputForm],
        default=OutputForm.NUMBERED_TONE.value,
        help="Syllable spelling: numbered tone, tone mark or no tone (default: number).",
    )
    convert_parser.add_argument(
        "--table",
        type=Path,
        default=None,
        help="Sequential pinyin CSV (default: table built from pypinyin).",
    )
    convert_parser.add_argument(
        "--polyphones",
        type=Path,
        default=None,
        help="Polyphone rule dataset (default: bundled dataset).",
    )

    export_parser = subparsers.add_parser(
        "export-table", help="Write the pypinyin-derived table as sequential CSV."
    )
    export_parser.add_argument("--output", required=True, type=Path, help="Destination CSV path.")
    return parser


def _run_convert(args: argparse.Namespace) -> int:
    """Convert arguments or stdin lines and print the results."""

    try:
        converter = build_converter(table_path=args.table, polyphone_path=args.polyphones)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    form = OutputForm(args.form)
    if args.text:
        print(converter.convert(" ".join(args.text), form))
        return 0

    for line in sys.stdin:
        print(converter.convert(line.rstrip("\r\n"), form))
    return 0


def _run_export(args: argparse.Namespace) -> int:
    """Export the pypinyin table in the sequential CSV format."""

    written = write_table_csv(pypinyin_table(), output_path=args.output)
    print(f"Wrote {written} characters to {args.output}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected subcommand.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "convert":
        return _run_convert(args)
    return _run_export(args)


if __name__ == "__main__":
    raise SystemExit(main())
