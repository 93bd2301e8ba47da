"""Mapping of scanned rows into trial balance and cash-flow entries."""

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from contaflow.domain.entities import CashFlowEntry, ReportingPeriod, TrialBalanceEntry
from contaflow.ingestion.scanner import RawRow
from contaflow.utils.cell_decoder import CellValue, parse_decimal, parse_locale_decimal

logger = logging.getLogger(__name__)

LEADING_ZEROS = re.compile(r"^0+")
DESCRIPTION_SEPARATOR = " > "
DESCRIPTION_FIELDS = tuple(f"description_{i}" for i in range(1, 7))
BALANCE_FIELDS = ("opening_balance", "debit", "credit", "closing_balance")

ZERO = Decimal("0")


def normalize_account_code(code: str) -> str:
    """Strip leading zeros from an account code; all-zero codes become "0"."""
    return LEADING_ZEROS.sub("", code.strip()) or "0"


def join_description(parts: Iterable[CellValue]) -> str:
    """Join non-blank description cells, dropping exact repeats."""
    segments: list[str] = []
    for cell in parts:
        text = cell.text
        if text and text not in segments:
            segments.append(text)
    return DESCRIPTION_SEPARATOR.join(segments)


def decimal_or_zero(cell: CellValue) -> Decimal:
    value = parse_decimal(cell)
    return ZERO if value is None else value


def normalize_trial_balance(
    rows: Iterable[RawRow], client_id: int, period: ReportingPeriod
) -> list[TrialBalanceEntry]:
    """Build balancete entries, one per scanned row.

    Monetary cells that do not parse are stored as zero; a bad cell never
    drops the row.
    """
    entries = []
    for row in rows:
        balances = {name: decimal_or_zero(row[name]) for name in BALANCE_FIELDS}
        entries.append(
            TrialBalanceEntry(
                client_id=client_id,
                period=period,
                account_code=normalize_account_code(row["code"].text),
                classification=row["classification"].text,
                account_description=join_description(row[name] for name in DESCRIPTION_FIELDS),
                **balances,
            )
        )
    return entries


@dataclass
class CashFlowAccumulator:
    """State carried across DFC rows while folding them into entries."""

    section_title: str = ""
    entries: list[CashFlowEntry] = field(default_factory=list)
    skipped: int = 0


def normalize_cash_flow(
    rows: Iterable[RawRow], client_id: int, period: ReportingPeriod
) -> list[CashFlowEntry]:
    """Build DFC entries from scanned rows.

    A row yields an entry only when it has both a description and an amount
    that decodes as a Brazilian-formatted number. Title cells open a new
    section; item rows without a title belong to the last section seen.
    """
    acc = CashFlowAccumulator()
    for row in rows:
        title = row["title"].text
        if title:
            acc.section_title = title

        description = row["description"].text
        amount = parse_locale_decimal(row["amount"])
        if not description or amount is None:
            if description or not row["amount"].is_empty:
                acc.skipped += 1
                logger.debug(
                    "Row %d skipped: description=%r amount=%r",
                    row.row_number,
                    description,
                    row["amount"].text,
                )
            continue

        acc.entries.append(
            CashFlowEntry(
                client_id=client_id,
                period=period,
                section_title=acc.section_title,
                line_description=description,
                amount=amount,
            )
        )

    if acc.skipped:
        logger.info("%d DFC row(s) without a usable description or amount were skipped", acc.skipped)
    return acc.entries
