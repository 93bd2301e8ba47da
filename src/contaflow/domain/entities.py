"""Domain model entities for contaflow.

These are pure data classes representing business concepts, independent of
database schema and of the spreadsheet layouts they are read from.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class StatementType(str, Enum):
    """Kind of periodic statement a spreadsheet carries."""

    BALANCETE = "balancete"
    DFC = "dfc"

    @property
    def label(self) -> str:
        """Human-readable statement name."""
        return "Balancete" if self is StatementType.BALANCETE else "DFC"


@dataclass(frozen=True)
class Client:
    """Client domain entity, identified by its tax id (CNPJ)."""

    id: int
    name: str
    tax_id: str
    created_at: datetime


@dataclass(frozen=True, order=True)
class ReportingPeriod:
    """Reporting period covered by one statement upload."""

    start: date
    end: date

    @property
    def label(self) -> str:
        """Period in the DD/MM/YYYY - DD/MM/YYYY form used in the sheets."""
        return f"{self.start:%d/%m/%Y} - {self.end:%d/%m/%Y}"

    @property
    def start_iso(self) -> str:
        return self.start.isoformat()

    @property
    def end_iso(self) -> str:
        return self.end.isoformat()


@dataclass(frozen=True)
class TrialBalanceEntry:
    """One account line of a trial balance (balancete)."""

    client_id: int
    period: ReportingPeriod
    account_code: str
    classification: str
    account_description: str
    opening_balance: Decimal
    debit: Decimal
    credit: Decimal
    closing_balance: Decimal
    id: Optional[int] = None


@dataclass(frozen=True)
class CashFlowEntry:
    """One line item of a cash-flow statement (DFC)."""

    client_id: int
    period: ReportingPeriod
    section_title: str
    line_description: str
    amount: Decimal
    id: Optional[int] = None


@dataclass(frozen=True)
class PeriodSummary:
    """Stored entries of one statement type aggregated for one period.

    Balancete periods fill the four balance totals; DFC periods fill
    ``total_amount``. Fields that do not apply stay at zero.
    """

    statement_type: StatementType
    period: ReportingPeriod
    record_count: int
    total_opening_balance: Decimal = Decimal("0")
    total_debit: Decimal = Decimal("0")
    total_credit: Decimal = Decimal("0")
    total_closing_balance: Decimal = Decimal("0")
    total_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class IngestionResult:
    """Outcome of a successful spreadsheet ingestion."""

    client_id: int
    client_name: str
    tax_id: str
    period: ReportingPeriod
    record_count: int
    statement_type: StatementType

    @property
    def period_label(self) -> str:
        return self.period.label
