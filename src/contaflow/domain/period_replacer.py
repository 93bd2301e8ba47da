"""Period-scoped replacement of statement entries."""

import logging
from typing import Sequence

from contaflow.database.base import Database
from contaflow.domain.entities import (
    CashFlowEntry,
    ReportingPeriod,
    StatementType,
    TrialBalanceEntry,
)
from contaflow.domain.errors import EmptyBatch, no_data_found

logger = logging.getLogger(__name__)


class PeriodReplacer:
    """Replace the stored entries of one (client, period) key with a new batch.

    A key is ``(client_id, period.start, period.end)`` within one statement
    type. Replacement never merges: the previous batch for the key is
    deleted before the new one is written, which makes re-importing a
    corrected file for the same period idempotent.
    """

    def __init__(self, db: Database):
        """Initialize period replacer.

        Args:
            db: Database instance
        """
        self.db = db

    def replace(
        self,
        client_id: int,
        statement_type: StatementType,
        period: ReportingPeriod,
        entries: Sequence[TrialBalanceEntry] | Sequence[CashFlowEntry],
    ) -> int:
        """Delete the period's existing entries and insert ``entries``.

        Both steps share one store transaction, so a failed insert leaves the
        previous batch in place.

        Returns:
            Number of inserted entries

        Raises:
            EmptyBatch: If ``entries`` is empty
            StoreError: If the store fails to delete or insert
        """
        if not entries:
            raise EmptyBatch(no_data_found(statement_type.label))

        with self.db.transaction():
            deleted = self.db.delete_period_entries(statement_type, client_id, period)
            inserted = self.db.insert_entries(statement_type, entries)

        logger.info(
            "Replaced %s period %s for client %d: %d removed, %d inserted",
            statement_type.value,
            period.label,
            client_id,
            deleted,
            inserted,
        )
        return inserted

    def delete(self, client_id: int, statement_type: StatementType, period: ReportingPeriod) -> int:
        """Delete all entries of one period key. Returns the number deleted."""
        with self.db.transaction():
            deleted = self.db.delete_period_entries(statement_type, client_id, period)
        logger.info(
            "Deleted %s period %s for client %d: %d removed",
            statement_type.value,
            period.label,
            client_id,
            deleted,
        )
        return deleted
