"""Exception hierarchy for VLAN sheet extraction."""


class VlanSheetError(Exception):
    """Base exception for all extraction errors."""


class WorkbookOpenError(VlanSheetError):
    """The source workbook could not be opened (bad path, corrupt or unsupported format)."""


class SheetReadError(VlanSheetError):
    """Rows of a single worksheet could not be read."""

    def __init__(self, message: str, sheet: str | None = None):
        self.sheet = sheet
        super().__init__(message)


class ScanError(VlanSheetError):
    """Scanning a single row failed."""


class CsvWriteError(VlanSheetError):
    """The CSV output file could not be created or written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
