"""Utility functions for contaflow."""

from contaflow.utils.cell_decoder import (
    CellKind,
    CellValue,
    decode_cell,
    parse_decimal,
    parse_locale_decimal,
)
from contaflow.utils.date_parser import parse_date, parse_day_month_year

__all__ = [
    "CellKind",
    "CellValue",
    "decode_cell",
    "parse_decimal",
    "parse_locale_decimal",
    "parse_date",
    "parse_day_month_year",
]
