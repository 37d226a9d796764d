"""Pydantic models for extracted VLAN definitions."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


class VlanRecord(BaseModel):
    """A VLAN definition detected in a spreadsheet row.

    ``id`` and ``name`` are the raw cell values; nothing is parsed or
    range-checked. ``slug`` is ``None`` when slug computation is disabled.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    slug: str | None = None

    def as_row(self, with_slug: bool = True) -> list[str]:
        """Return the record as a list of column values in output order."""
        row = [self.id, self.name]
        if with_slug:
            row.append(self.slug or "")
        return row


class VlanSet(BaseModel):
    """Ordered VLAN records collected from one workbook."""

    records: list[VlanRecord] = Field(default_factory=list)
    with_slug: bool = True

    @property
    def columns(self) -> list[str]:
        """CSV column names for this set."""
        return ["id", "name", "slug"] if self.with_slug else ["id", "name"]

    def extend(self, records: list[VlanRecord]) -> None:
        self.records.extend(records)

    def __iter__(self) -> Iterator[VlanRecord]:  # type: ignore[override]
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)
