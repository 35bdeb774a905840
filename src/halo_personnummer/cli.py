#!/usr/bin/env python3
"""
Command-line validation of personnummer.

Usage:
    python -m halo_personnummer 811218-9876
    python -m halo_personnummer --long --no-coordination 8112189876 121262-1211
    halo-personnummer --json 19121218+9870
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from halo_personnummer.config import settings
from halo_personnummer.exceptions import PersonnummerError
from halo_personnummer.personnummer import Personnummer

logger = logging.getLogger(__name__)


def describe(pnr: Personnummer) -> dict[str, Any]:
    """Parsed fields of a personnummer as a JSON-friendly dict."""
    return {
        "personnummer": pnr.format(),
        "long_format": pnr.format(long_format=True),
        "century": pnr.century,
        "year": pnr.year,
        "full_year": pnr.full_year,
        "month": pnr.month,
        "day": pnr.day,
        "sep": pnr.sep,
        "num": pnr.num,
        "check": pnr.check,
        "birth_date": pnr.get_date().isoformat(),
        "age": pnr.get_age(),
        "sex": "M" if pnr.is_male() else "F",
        "is_coordination_number": pnr.is_coordination_number,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="halo-personnummer",
        description="Validate and format Swedish personnummer",
    )
    parser.add_argument("numbers", nargs="+", help="Personnummer to check")
    parser.add_argument(
        "--long",
        action="store_true",
        help="Print CCYYMMDDNNNC instead of YYMMDD-NNNC",
    )
    parser.add_argument(
        "--no-coordination",
        action="store_true",
        help="Reject coordination numbers (samordningsnummer)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print parsed fields as JSON, one object per line",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = {}
    if args.no_coordination:
        options["allow_coordination_number"] = False

    failures = 0
    for number in args.numbers:
        try:
            pnr = Personnummer.parse(number, options)
        except PersonnummerError as e:
            failures += 1
            print(f"{number}: {e.reason}", file=sys.stderr)
            continue

        if args.json:
            print(json.dumps(describe(pnr), ensure_ascii=False))
        else:
            print(pnr.format(long_format=args.long))

    logger.debug("Checked %d personnummer, %d invalid", len(args.numbers), failures)
    return 1 if failures else 0
