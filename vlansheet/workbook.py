"""Workbook access — sheet/row providers feeding the row scanner."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import Any, Self

import openpyxl
from loguru import logger
from openpyxl.workbook.workbook import Workbook

from vlansheet.exceptions import SheetReadError, WorkbookOpenError


def cell_text(value: Any) -> str:
    """Convert a raw cell value into the plain text shown in the sheet."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SheetProvider(ABC):
    """Abstract source of worksheet names and their rows of text cells."""

    @abstractmethod
    def list_sheets(self) -> list[str]:
        """Return the sheet names in workbook order."""

    @abstractmethod
    def rows_of(self, sheet: str) -> Iterator[list[str]]:
        """Yield the rows of *sheet*, each a list of cell strings.

        Raises:
            SheetReadError: if the sheet's rows cannot be read.
        """

    def close(self) -> None:
        """Release any underlying resources."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: TracebackType | None
    ) -> None:
        self.close()


class OpenpyxlSheetProvider(SheetProvider):
    """SheetProvider backed by an ``.xlsx``/``.xlsm`` workbook read with openpyxl."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        logger.info(f"Loading workbook: {self.path}")
        try:
            self._workbook: Workbook | None = openpyxl.load_workbook(self.path, read_only=True, data_only=True)
        except Exception as e:
            raise WorkbookOpenError(f"failed to open file for parsing: {e}") from e

    @property
    def workbook(self) -> Workbook:
        if self._workbook is None:
            raise WorkbookOpenError(f"workbook {self.path} is closed")
        return self._workbook

    def list_sheets(self) -> list[str]:
        return list(self.workbook.sheetnames)

    def rows_of(self, sheet: str) -> Iterator[list[str]]:
        try:
            ws = self.workbook[sheet]
            rows = ws.iter_rows(values_only=True)
            for row in rows:
                yield [cell_text(v) for v in row]
        except Exception as e:
            raise SheetReadError(f"failed to read sheet {sheet!r}: {e}", sheet=sheet) from e

    def close(self) -> None:
        if self._workbook is not None:
            self._workbook.close()
            self._workbook = None
