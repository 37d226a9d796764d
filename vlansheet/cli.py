"""CLI entry point for VLAN extraction — standalone-capable.

Examples:
  vlansheet --in network-plan.xlsx --out vlans.csv
  vlansheet --in network-plan.xlsx --out vlans.csv --no-slug
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from vlansheet.exceptions import CsvWriteError, WorkbookOpenError
from vlansheet.formatters import CsvWriter, print_table
from vlansheet.models import VlanSet
from vlansheet.scanner import find_vlans
from vlansheet.workbook import OpenpyxlSheetProvider


def build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for VLAN extraction."""
    parser = argparse.ArgumentParser(
        prog="vlansheet",
        description="Extract VLAN definitions (VLAN | id | Description | name) from spreadsheet worksheets.",
    )
    parser.add_argument(
        "--in",
        dest="in_path",
        default="",
        help="path to the spreadsheet file to parse",
    )
    parser.add_argument(
        "--out",
        dest="out_path",
        default="",
        help="path to the output file",
    )
    parser.add_argument(
        "--no-slug",
        dest="with_slug",
        action="store_false",
        help="Omit the slug column from the table and CSV output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(args)


def extract(in_path: str, with_slug: bool = True) -> VlanSet:
    """Open *in_path* and collect all VLAN definitions from its sheets.

    Raises:
        WorkbookOpenError: if the workbook cannot be opened.
    """
    with OpenpyxlSheetProvider(in_path) as provider:
        return find_vlans(provider, with_slug=with_slug)


def main(args: list[str] | None = None) -> None:
    """Main entry point for the VLAN extraction CLI."""
    parsed = parse_args(args)

    if parsed.verbose:
        logger.enable("vlansheet")
    else:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    if not parsed.in_path or not parsed.out_path:
        build_parser().print_help(sys.stdout)
        return

    try:
        vlans = extract(parsed.in_path, with_slug=parsed.with_slug)
    except WorkbookOpenError as e:
        logger.opt(exception=e).debug("Extraction aborted")
        print(f"Error: {e}")
        vlans = VlanSet(with_slug=parsed.with_slug)

    print_table(vlans)

    try:
        CsvWriter(vlans).write(parsed.out_path)
    except CsvWriteError as e:
        logger.opt(exception=e).debug("CSV output failed")
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
