"""Workbook loading for .xlsx and .xls statement files.

Only the first worksheet of a workbook is ever read. Both formats are exposed
through the same ``Sheet`` interface, addressed with spreadsheet-style column
letters and 1-based row numbers.
"""

import logging
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import openpyxl
import xlrd
from openpyxl.utils.cell import column_index_from_string, coordinate_from_string
from openpyxl.utils.exceptions import InvalidFileException

from contaflow.domain.errors import (
    CorruptWorkbook,
    corrupt_workbook,
    empty_workbook_file,
    worksheet_not_found,
)

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".xlsx", ".xls"}


class Sheet(ABC):
    """Read-only view over one worksheet."""

    @abstractmethod
    def value_at(self, row: int, column: str) -> Any:
        """Raw value of the cell at ``column``/``row``; None when blank or out of range."""
        pass

    def value(self, address: str) -> Any:
        """Raw value of a cell given as an "A1"-style address."""
        column, row = coordinate_from_string(address)
        return self.value_at(row, column)


class OpenpyxlSheet(Sheet):
    """Sheet backed by an openpyxl worksheet (.xlsx)."""

    def __init__(self, worksheet):
        self.worksheet = worksheet

    def value_at(self, row: int, column: str) -> Any:
        col = column_index_from_string(column)
        if row > self.worksheet.max_row or col > self.worksheet.max_column:
            return None
        return self.worksheet.cell(row=row, column=col).value


class XlrdSheet(Sheet):
    """Sheet backed by an xlrd sheet (legacy .xls)."""

    def __init__(self, sheet, datemode: int):
        self.sheet = sheet
        self.datemode = datemode

    def value_at(self, row: int, column: str) -> Any:
        rowx = row - 1
        colx = column_index_from_string(column) - 1
        if rowx >= self.sheet.nrows or colx >= self.sheet.ncols:
            return None

        cell = self.sheet.cell(rowx, colx)
        if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
            return None
        if cell.ctype == xlrd.XL_CELL_DATE:
            return xlrd.xldate_as_datetime(cell.value, self.datemode)
        if cell.ctype == xlrd.XL_CELL_BOOLEAN:
            return bool(cell.value)
        return cell.value


def has_supported_extension(file_path: str) -> bool:
    """Return True for .xlsx/.xls file names, ignoring case."""
    return Path(file_path).suffix.lower() in SUPPORTED_EXTENSIONS


def _load_xlsx(path: Path) -> Sheet:
    try:
        workbook = openpyxl.load_workbook(path, data_only=True)
    except (
        InvalidFileException,
        zipfile.BadZipFile,
        SyntaxError,  # malformed XML member, from ElementTree or lxml
        KeyError,
        ValueError,
        OSError,
    ) as e:
        logger.debug("openpyxl could not read %s: %s", path, e)
        raise CorruptWorkbook(corrupt_workbook(path.name))

    if not workbook.worksheets:
        raise CorruptWorkbook(worksheet_not_found(path.name))
    return OpenpyxlSheet(workbook.worksheets[0])


def _load_xls(path: Path) -> Sheet:
    try:
        book = xlrd.open_workbook(str(path))
    except (xlrd.XLRDError, ValueError, OSError) as e:
        logger.debug("xlrd could not read %s: %s", path, e)
        raise CorruptWorkbook(corrupt_workbook(path.name))

    if book.nsheets == 0:
        raise CorruptWorkbook(worksheet_not_found(path.name))
    return XlrdSheet(book.sheet_by_index(0), book.datemode)


def load_first_sheet(file_path: str) -> Sheet:
    """Open a workbook and return its first worksheet.

    Args:
        file_path: Path to an .xlsx or .xls file

    Returns:
        Sheet for the first worksheet

    Raises:
        CorruptWorkbook: If the file is missing, empty, unreadable or has no
            worksheet
    """
    path = Path(file_path)
    if not path.is_file() or path.stat().st_size == 0:
        raise CorruptWorkbook(empty_workbook_file(path.name))

    if path.suffix.lower() == ".xls":
        return _load_xls(path)
    return _load_xlsx(path)
