"""VLAN definition extraction from spreadsheets.

Scans every row of every worksheet for ``VLAN | <id> | Description | <name>``
cell runs and emits them as a console table and a CSV file.
"""

__version__ = "0.0.1"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = os.getenv("LOGURU_LEVEL", "DEBUG")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from vlansheet.exceptions import (  # noqa: E402
    CsvWriteError,
    ScanError,
    SheetReadError,
    VlanSheetError,
    WorkbookOpenError,
)
from vlansheet.formatters import CsvWriter, TableFormatter, print_table  # noqa: E402
from vlansheet.models import VlanRecord, VlanSet  # noqa: E402
from vlansheet.scanner import find_vlans, scan_row, slugify  # noqa: E402
from vlansheet.workbook import OpenpyxlSheetProvider, SheetProvider  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "VlanRecord",
    "VlanSet",
    "scan_row",
    "slugify",
    "find_vlans",
    "SheetProvider",
    "OpenpyxlSheetProvider",
    "TableFormatter",
    "CsvWriter",
    "print_table",
    "VlanSheetError",
    "WorkbookOpenError",
    "SheetReadError",
    "ScanError",
    "CsvWriteError",
]
