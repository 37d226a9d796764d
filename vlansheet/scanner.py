"""Row scanner — detects VLAN/Description label pairs in spreadsheet rows."""

from __future__ import annotations

import re
from collections.abc import Sequence

from loguru import logger

from vlansheet.exceptions import ScanError, SheetReadError
from vlansheet.models import VlanRecord, VlanSet
from vlansheet.workbook import SheetProvider

VLAN_LABEL = "vlan"
DESCRIPTION_LABEL = "description"
WINDOW_SIZE = 4

_NON_WORD_RUN = re.compile(r"\W+")


def slugify(text: str) -> str:
    """Collapse every run of non-word characters into ``-`` and lower-case the result.

    Leading and trailing runs are kept as hyphens:
        'Guest Network'  -> 'guest-network'
        'Guest  Wi-Fi!!' -> 'guest-wi-fi-'
    """
    return _NON_WORD_RUN.sub("-", text).lower()


def _is_label(cell: str, label: str) -> bool:
    return cell.strip().casefold() == label


def _has_value(cell: str) -> bool:
    return cell.strip() != ""


def vlan_definition_found(row: Sequence[str], column: int) -> bool:
    """Return True if the 4-cell window starting at *column* is a VLAN definition.

    Expected layout: ``VLAN | <id> | Description | <name>``, labels matched
    case-insensitively after trimming whitespace.
    """
    if column + WINDOW_SIZE > len(row):
        return False
    return (
        _is_label(row[column], VLAN_LABEL)
        and _has_value(row[column + 1])
        and _is_label(row[column + 2], DESCRIPTION_LABEL)
        and _has_value(row[column + 3])
    )


def scan_row(row: Sequence[str], with_slug: bool = True) -> list[VlanRecord]:
    """Return all VLAN definitions found in *row*, left to right.

    Windows may overlap; the cursor always advances by one cell.
    """
    vlans: list[VlanRecord] = []
    for i in range(len(row)):
        if not vlan_definition_found(row, i):
            continue
        vlan_id, desc = row[i + 1], row[i + 3]
        vlans.append(
            VlanRecord(
                id=vlan_id,
                name=desc,
                slug=slugify(desc) if with_slug else None,
            )
        )
    return vlans


def find_vlans(provider: SheetProvider, with_slug: bool = True) -> VlanSet:
    """Scan every row of every sheet of *provider* and collect VLAN definitions.

    A sheet whose rows cannot be read is reported and skipped; a row whose
    scan fails contributes nothing. Records keep sheet/row order.
    """
    vlans = VlanSet(with_slug=with_slug)

    for sheet in provider.list_sheets():
        try:
            rows = list(provider.rows_of(sheet))
        except SheetReadError as e:
            logger.opt(exception=e).debug(f"Skipping sheet {sheet!r}")
            print(f"Error: {e}")
            continue

        found = 0
        for row_num, row in enumerate(rows, start=1):
            try:
                detected = scan_row(row, with_slug=with_slug)
            except ScanError as e:
                logger.warning(f"Sheet {sheet!r} row {row_num}: {e}")
                print(f"Error: {e}")
                continue
            if detected:
                logger.debug(f"Sheet {sheet!r} row {row_num}: {len(detected)} VLAN(s)")
            vlans.extend(detected)
            found += len(detected)

        logger.info(f"Sheet {sheet!r}: {found} VLAN definition(s)")

    logger.info(f"Found {len(vlans)} VLAN definition(s) in total")
    return vlans
