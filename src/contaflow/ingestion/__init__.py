"""Spreadsheet ingestion: header resolution, region scanning and row normalization."""

from contaflow.ingestion.header import Header, parse_period, resolve_header
from contaflow.ingestion.layouts import LAYOUTS, StatementLayout, get_layout
from contaflow.ingestion.scanner import RawRow, scan_region
from contaflow.ingestion.workbook import Sheet, has_supported_extension, load_first_sheet

__all__ = [
    "Header",
    "parse_period",
    "resolve_header",
    "LAYOUTS",
    "StatementLayout",
    "get_layout",
    "RawRow",
    "scan_region",
    "Sheet",
    "has_supported_extension",
    "load_first_sheet",
]
