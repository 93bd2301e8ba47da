"""Date parsing utilities."""

import re
from datetime import date
from dateutil import parser as date_parser

ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(date_str: str) -> date:
    """Parse a user-supplied date, reading ambiguous dates day first.

    Handles:
    - ISO dates: "2025-01-31"
    - Brazilian dates: "31/01/2025", "31-01-2025"
    - Spelled-out dates understood by dateutil: "31 Jan 2025"

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip()
    try:
        if ISO_DATE.fullmatch(date_str):
            return date.fromisoformat(date_str)
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_day_month_year(token: str) -> date:
    """Build a calendar date from a "DD/MM/YYYY" token.

    Raises:
        ValueError: If the token is malformed or names a non-existent day
    """
    day, month, year = (int(part) for part in token.split("/"))
    return date(year, month, day)
