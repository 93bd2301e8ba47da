"""Read-side access to stored statements."""

from datetime import date
from typing import Optional

from contaflow.database.base import Database
from contaflow.domain.entities import (
    CashFlowEntry,
    PeriodSummary,
    ReportingPeriod,
    StatementType,
    TrialBalanceEntry,
)
from contaflow.domain.errors import NotFoundError, ValidationError, client_not_found
from contaflow.domain.period_replacer import PeriodReplacer


class StatementService:
    """Service for browsing and deleting the statements of a client."""

    def __init__(self, db: Database):
        """Initialize statement service.

        Args:
            db: Database instance
        """
        self.db = db
        self.replacer = PeriodReplacer(db)

    def _require_client(self, client_id: int) -> None:
        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))

    def list_trial_balance(
        self,
        client_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TrialBalanceEntry]:
        """List a client's balancete entries, oldest period first.

        Args:
            client_id: Client ID
            start_date: Only periods starting on or after this date
            end_date: Only periods ending on or before this date

        Raises:
            NotFoundError: If client not found
            ValidationError: If start_date is after end_date
        """
        self._require_client(client_id)
        _check_range(start_date, end_date)
        return self.db.list_trial_balance_entries(client_id, start_date=start_date, end_date=end_date)

    def list_cash_flow(
        self,
        client_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CashFlowEntry]:
        """List a client's DFC entries, oldest period first."""
        self._require_client(client_id)
        _check_range(start_date, end_date)
        return self.db.list_cash_flow_entries(client_id, start_date=start_date, end_date=end_date)

    def list_periods(self, client_id: int, statement_type: StatementType) -> list[PeriodSummary]:
        """List ingested periods of one statement type, most recent first."""
        self._require_client(client_id)
        return self.db.list_period_summaries(statement_type, client_id)

    def delete_period(
        self, client_id: int, statement_type: StatementType, period: ReportingPeriod
    ) -> int:
        """Delete the stored entries of one period.

        Returns:
            Number of entries deleted

        Raises:
            NotFoundError: If the client does not exist or has no entries for
                the period
        """
        self._require_client(client_id)
        deleted = self.replacer.delete(client_id, statement_type, period)
        if deleted == 0:
            raise NotFoundError(
                f"No {statement_type.label} data stored for client {client_id} "
                f"in period {period.label}"
            )
        return deleted


def _check_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationError(f"Start date {start_date} is after end date {end_date}")
