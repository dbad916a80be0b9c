"""Command-line checkout: ``toolrental <tool code> <days> <discount> <date>``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from toolrental.checkout import checkout
from toolrental.data.catalog import Catalog
from toolrental.data.factory import load_catalog
from toolrental.exceptions import CatalogError, RentalInputError
from toolrental.receipt import print_receipt
from toolrental.settings import load_settings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_BAD_CATALOG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toolrental",
        description="Check out a rental tool and print the rental agreement receipt.",
    )
    parser.add_argument("tool_code", help="tool code, e.g. LADW")
    parser.add_argument("rental_days", help="number of rental days (1 or greater)")
    parser.add_argument("discount_percent", help="discount percent in [0, 100)")
    parser.add_argument("checkout_date", help="check out date, formatted like MM/DD/YY")
    parser.add_argument("--catalog", default=None, help="JSON catalog file (default: $TOOLRENTAL_CATALOG or built-in)")
    parser.add_argument("--log-level", default=None, help="logging level (default: $TOOLRENTAL_LOG_LEVEL or WARNING)")
    return parser


def _print_usage(catalog: Catalog) -> None:
    print(
        "required arguments: <tool code> <rental day count> <discount percent> <check out date>",
        file=sys.stderr,
    )
    print("where <check out date> is formatted like MM/DD/YY", file=sys.stderr)
    print(f"and <tool code> is one of {','.join(catalog.tool_codes())}", file=sys.stderr)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = load_settings()
    args = build_parser().parse_args(argv)

    level_name = (args.log_level or settings.log_level).upper()
    # getLevelName maps unknown names to a "Level X" string
    if not isinstance(logging.getLevelName(level_name), int):
        print(f"Unknown log level: {level_name}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logging.basicConfig(
        level=level_name,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
    except CatalogError as exc:
        print(exc, file=sys.stderr)
        return EXIT_BAD_CATALOG

    try:
        agreement = checkout(
            args.tool_code,
            args.rental_days,
            args.discount_percent,
            args.checkout_date,
            catalog=catalog,
        )
    except RentalInputError as exc:
        logger.debug("Rejected checkout input: %r", exc)
        print(exc, file=sys.stderr)
        _print_usage(catalog)
        return EXIT_INVALID_INPUT

    print_receipt(agreement, sys.stdout, date_format=settings.date_format)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
