"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional, Sequence
from datetime import date

# Import entities directly; domain/__init__.py only loads services lazily
from contaflow.domain.entities import (
    Client,
    ReportingPeriod,
    StatementType,
    TrialBalanceEntry,
    CashFlowEntry,
    PeriodSummary,
)


class Database(ABC):
    """Abstract database interface for contaflow."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Group the write operations run inside the block into one commit.

        Leaving the block normally commits; an exception rolls back every
        write made inside it and propagates.
        """
        pass

    # Client operations
    @abstractmethod
    def create_client(self, name: str, tax_id: str) -> int:
        """Create a new client. Returns client ID."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def get_client_by_tax_id(self, tax_id: str) -> Optional[Client]:
        """Get client by tax id (CNPJ)."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients ordered by name."""
        pass

    @abstractmethod
    def update_client_name(self, client_id: int, name: str) -> None:
        """Rename a client."""
        pass

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete a client together with all of its statement entries."""
        pass

    @abstractmethod
    def count_client_entries(self, client_id: int) -> int:
        """Count trial balance and cash-flow entries stored for a client."""
        pass

    # Statement entry operations
    @abstractmethod
    def delete_period_entries(
        self, statement_type: StatementType, client_id: int, period: ReportingPeriod
    ) -> int:
        """Delete every entry of a statement type for the exact period key.

        Returns the number of deleted entries.
        """
        pass

    @abstractmethod
    def insert_entries(
        self,
        statement_type: StatementType,
        entries: Sequence[TrialBalanceEntry] | Sequence[CashFlowEntry],
    ) -> int:
        """Insert a batch of entries. Returns the number inserted."""
        pass

    @abstractmethod
    def list_trial_balance_entries(
        self,
        client_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[TrialBalanceEntry]:
        """List balancete entries of a client.

        Args:
            client_id: Client ID
            start_date: Only periods starting on or after this date
            end_date: Only periods ending on or before this date
        """
        pass

    @abstractmethod
    def list_cash_flow_entries(
        self,
        client_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[CashFlowEntry]:
        """List DFC entries of a client, filtered like list_trial_balance_entries."""
        pass

    @abstractmethod
    def list_period_summaries(
        self, statement_type: StatementType, client_id: int
    ) -> list[PeriodSummary]:
        """Aggregate stored entries per period, most recent period first."""
        pass
