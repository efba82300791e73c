#!/usr/bin/env python3
# cli.py

"""
Command line front-end.

  numwords cardinal 123.456      -> one hundred twenty-three point four five six
  numwords ordinal 2012          -> two thousand twelfth
  numwords digits 001247         -> zero zero one two four seven
  numwords cardinal -- -5.       -> negative five   ("--" needed for values like "-5.")
  numwords sheet files/amounts.xlsx --column Amount [--mode cardinal] [--out out.xlsx]

Env (.env is read too):
  NUMWORDS_LOG_LEVEL, NUMWORDS_OUTPUT_DIR, NUMWORDS_WORDS_SUFFIX
"""

from __future__ import annotations

import argparse
import logging
import sys

from pathlib import Path
from typing import List, Optional

from .adapters import string_ordinal
from .config import Settings, load_settings
from .digits import spell_digits
from .errors import FormatError
from .parser import string_cardinal
from .sheet import MODES, convert_sheet

CONVERTERS = {
    "cardinal": string_cardinal,
    "ordinal": string_ordinal,
    "digits": spell_digits,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numwords", description="Spell numbers out in English words.")
    parser.add_argument("--quiet", action="store_true", help="Only log errors.")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("cardinal", "Cardinal words for a decimal numeral, e.g. -12.05"),
        ("ordinal", "Ordinal words for a non-negative integer numeral"),
        ("digits", "Spell every digit of a digit string individually"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("value")

    p = sub.add_parser("sheet", help="Convert one column of an .xlsx/.csv file")
    p.add_argument("path", type=Path)
    p.add_argument("--column", "-c", required=True, help="Header of the column to convert.")
    p.add_argument("--mode", "-m", choices=MODES, default="cardinal")
    p.add_argument("--out", "-o", type=Path, default=None, help="Output .xlsx (default: <output dir>/<name>_words.xlsx)")

    return parser


def run_sheet(args: argparse.Namespace, settings: Settings) -> int:
    out_path = args.out or Path(settings.output_dir) / f"{args.path.stem}_words.xlsx"

    try:
        written, converted, failed = convert_sheet(
            args.path, args.column, args.mode, out_path, settings.words_suffix,
        )
    except (OSError, KeyError, ValueError) as e:
        logging.error("Failed to process %s: %s", args.path, e)
        return 1

    print(f"OK: wrote {written} (converted: {converted}, failed: {failed})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_parser().parse_args(argv)

    level = logging.ERROR if args.quiet else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    if args.command == "sheet":
        return run_sheet(args, settings)

    try:
        print(CONVERTERS[args.command](args.value))
        return 0
    except FormatError as e:
        # error to stderr so stdout stays clean for piping
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
