"""Resolution of the client tax id and reporting period from a sheet header."""

import re
from dataclasses import dataclass

from contaflow.domain.entities import ReportingPeriod
from contaflow.domain.errors import (
    InvalidPeriodFormat,
    MissingField,
    invalid_period_format,
    missing_header_field,
)
from contaflow.ingestion.layouts import StatementLayout
from contaflow.ingestion.workbook import Sheet
from contaflow.utils.cell_decoder import decode_cell
from contaflow.utils.date_parser import parse_day_month_year

PERIOD_PATTERN = re.compile(r"(\d{2}/\d{2}/\d{4})\s*-\s*(\d{2}/\d{2}/\d{4})")


@dataclass(frozen=True)
class Header:
    """Metadata read from the fixed header cells of a statement sheet."""

    tax_id: str
    period: ReportingPeriod
    period_text: str


def parse_period(period_str: str) -> ReportingPeriod:
    """Parse a "DD/MM/YYYY - DD/MM/YYYY" string into a ReportingPeriod.

    Whitespace around the dash is optional. The start date is not checked
    against the end date.

    Raises:
        InvalidPeriodFormat: If no date range is found or a date does not
            exist in the calendar
    """
    match = PERIOD_PATTERN.search(period_str or "")
    if match is None:
        raise InvalidPeriodFormat(invalid_period_format(period_str))

    start_str, end_str = match.groups()
    try:
        return ReportingPeriod(start=parse_day_month_year(start_str), end=parse_day_month_year(end_str))
    except ValueError:
        raise InvalidPeriodFormat(invalid_period_format(period_str))


def resolve_header(sheet: Sheet, layout: StatementLayout) -> Header:
    """Read and validate the tax id and period cells of a statement sheet.

    Args:
        sheet: First worksheet of the uploaded workbook
        layout: Layout of the statement type being imported

    Returns:
        Header with the tax id, parsed period and the raw period text

    Raises:
        MissingField: If the tax id or period cell is blank
        InvalidPeriodFormat: If the period cell cannot be parsed
    """
    tax_id = decode_cell(sheet.value(layout.tax_id_cell)).text
    if not tax_id:
        raise MissingField(missing_header_field("Tax id (CNPJ)", layout.tax_id_cell))

    period_text = decode_cell(sheet.value(layout.period_cell)).text
    if not period_text:
        raise MissingField(missing_header_field("Period", layout.period_cell))

    return Header(tax_id=tax_id, period=parse_period(period_text), period_text=period_text)
