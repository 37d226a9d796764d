"""Shared fixtures for the vlansheet test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from vlansheet.exceptions import SheetReadError
from vlansheet.models import VlanRecord, VlanSet
from vlansheet.workbook import SheetProvider


class FakeSheetProvider(SheetProvider):
    """In-memory SheetProvider; sheets mapped to ``None`` fail on read."""

    def __init__(self, sheets: dict[str, list[list[str]] | None]) -> None:
        self.sheets = sheets
        self.closed = False

    def list_sheets(self) -> list[str]:
        return list(self.sheets)

    def rows_of(self, sheet: str) -> Iterator[list[str]]:
        rows = self.sheets[sheet]
        if rows is None:
            raise SheetReadError(f"failed to read sheet {sheet!r}: corrupt", sheet=sheet)
        yield from rows

    def close(self) -> None:
        self.closed = True


# ── provider fixtures ─────────────────────────────────────────────────


@pytest.fixture()
def fake_provider():
    """Factory fixture returning a FakeSheetProvider for the given sheets."""

    def _make(sheets: dict[str, list[list[str]] | None]) -> FakeSheetProvider:
        return FakeSheetProvider(sheets)

    return _make


# ── record fixtures ───────────────────────────────────────────────────


@pytest.fixture()
def sample_vlan_set():
    """Factory fixture returning a populated VlanSet."""

    def _make(with_slug: bool = True, records: list[VlanRecord] | None = None) -> VlanSet:
        if records is None:
            records = [
                VlanRecord(id="10", name="Guest Network", slug="guest-network" if with_slug else None),
                VlanRecord(id="20", name="Servers, Core", slug="servers-core" if with_slug else None),
            ]
        return VlanSet(records=records, with_slug=with_slug)

    return _make
