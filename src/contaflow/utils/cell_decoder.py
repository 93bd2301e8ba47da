"""Spreadsheet cell decoding utilities."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional, Union

TWO_PLACES = Decimal("0.01")


class CellKind(Enum):
    """Shape of a decoded cell."""

    TEXT = "text"
    NUMBER = "number"
    EMPTY = "empty"


@dataclass(frozen=True)
class CellValue:
    """Decoded spreadsheet cell.

    ``value`` is a trimmed ``str`` for TEXT cells, a ``Decimal`` for NUMBER
    cells and ``None`` for EMPTY cells.
    """

    kind: CellKind
    value: Union[str, Decimal, None] = None

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY

    @property
    def text(self) -> str:
        """Cell rendered as trimmed text; empty string for EMPTY cells."""
        if self.kind is CellKind.EMPTY:
            return ""
        if self.kind is CellKind.NUMBER:
            return _format_number(self.value)
        return self.value


EMPTY = CellValue(CellKind.EMPTY)


def _format_number(number: Decimal) -> str:
    # Integral values come back from spreadsheets as floats ("8.0")
    if number == number.to_integral_value():
        return format(number.to_integral_value(), "f")
    return str(number.normalize())


def decode_cell(raw: Any) -> CellValue:
    """Decode a raw cell value into a tagged CellValue.

    Args:
        raw: Value as returned by the workbook reader (str, int, float,
            Decimal, date, datetime, bool or None)

    Returns:
        CellValue tagged TEXT, NUMBER or EMPTY
    """
    if raw is None:
        return EMPTY

    if isinstance(raw, bool):
        return CellValue(CellKind.TEXT, str(raw))

    if isinstance(raw, (int, Decimal)):
        return CellValue(CellKind.NUMBER, Decimal(raw))

    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            return EMPTY
        return CellValue(CellKind.NUMBER, Decimal(repr(raw)))

    if isinstance(raw, (datetime, date)):
        return CellValue(CellKind.TEXT, f"{raw:%d/%m/%Y}")

    text = str(raw).strip()
    if not text:
        return EMPTY
    return CellValue(CellKind.TEXT, text)


def parse_decimal(cell: CellValue) -> Optional[Decimal]:
    """Parse a NUMBER or numeric TEXT cell with standard decimal notation.

    Returns:
        Decimal value, or None if the cell is empty or not a finite number
    """
    if cell.kind is CellKind.EMPTY:
        return None
    if cell.kind is CellKind.NUMBER:
        return cell.value

    try:
        number = Decimal(cell.value)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def parse_locale_decimal(cell: CellValue) -> Optional[Decimal]:
    """Parse a Brazilian-formatted amount such as "179.487,30".

    Every "." is a thousands separator and is removed; the first "," becomes
    the decimal point. The result always carries two fractional digits.

    Returns:
        Decimal rounded to two places, or None if the cell is not a number
    """
    if cell.kind is CellKind.EMPTY:
        return None
    if cell.kind is CellKind.NUMBER:
        return cell.value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)

    cleaned = cell.value.replace(".", "").replace(",", ".", 1)
    try:
        number = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
