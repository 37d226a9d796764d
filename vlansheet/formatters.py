"""Console table and CSV output for extracted VLAN records."""

from __future__ import annotations

import csv
from pathlib import Path

from loguru import logger

from vlansheet.exceptions import CsvWriteError
from vlansheet.models import VlanSet

COLUMN_WIDTH = 30
TABLE_HEADERS = ["VLAN", "Name", "Slug"]


class TableFormatter:
    """Format a VlanSet as a pipe-delimited fixed-width table."""

    def __init__(self, vlans: VlanSet, column_width: int = COLUMN_WIDTH) -> None:
        self.vlans = vlans
        self.column_width = column_width

    def _line(self, cells: list[str]) -> str:
        w = self.column_width
        return "|" + "|".join(f"{c:>{w}}" for c in cells) + "|"

    def format(self) -> str:
        """Return the complete table as a string."""
        headers = TABLE_HEADERS if self.vlans.with_slug else TABLE_HEADERS[:2]
        inner_width = len(headers) * self.column_width + len(headers) - 1

        lines = [self._line(headers), f"|{'-' * inner_width}|"]
        for vlan in self.vlans:
            lines.append(self._line(vlan.as_row(self.vlans.with_slug)))
        return "\n".join(lines)


def print_table(vlans: VlanSet) -> None:
    """Print the VLAN table to stdout."""
    print(TableFormatter(vlans).format())


class CsvWriter:
    """Write a VlanSet as a CSV file with an ``id,name[,slug]`` header."""

    def __init__(self, vlans: VlanSet) -> None:
        self.vlans = vlans

    def write(self, path: str | Path) -> None:
        """Create (or truncate) *path* and write all records in scan order.

        Raises:
            CsvWriteError: if the file cannot be created or a record cannot be
                written. Rows already written stay on disk.
        """
        try:
            f = open(path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise CsvWriteError(f"failed to create file: {e}", path=str(path)) from e

        with f:
            writer = csv.writer(f, lineterminator="\n")
            try:
                writer.writerow(self.vlans.columns)
                for vlan in self.vlans:
                    writer.writerow(vlan.as_row(self.vlans.with_slug))
            except (OSError, csv.Error) as e:
                raise CsvWriteError(f"failed to write {path}: {e}", path=str(path)) from e

        logger.info(f"CSV written to {path} ({len(self.vlans)} record(s))")
