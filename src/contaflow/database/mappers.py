"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay free of
column names such as ``period_start``/``period_end``.
"""

from contaflow.domain import entities as domain
from contaflow.database.models import (
    Client as ORMClient,
    TrialBalanceEntry as ORMTrialBalanceEntry,
    CashFlowEntry as ORMCashFlowEntry,
)


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        tax_id=orm_client.tax_id,
        created_at=orm_client.created_at,
    )


def trial_balance_to_domain(orm_entry: ORMTrialBalanceEntry) -> domain.TrialBalanceEntry:
    """Convert SQLAlchemy TrialBalanceEntry model to domain entity."""
    return domain.TrialBalanceEntry(
        id=orm_entry.id,
        client_id=orm_entry.client_id,
        period=domain.ReportingPeriod(start=orm_entry.period_start, end=orm_entry.period_end),
        account_code=orm_entry.account_code,
        classification=orm_entry.classification,
        account_description=orm_entry.account_description,
        opening_balance=orm_entry.opening_balance,
        debit=orm_entry.debit,
        credit=orm_entry.credit,
        closing_balance=orm_entry.closing_balance,
    )


def trial_balance_to_orm(entry: domain.TrialBalanceEntry) -> ORMTrialBalanceEntry:
    """Convert domain TrialBalanceEntry to a new SQLAlchemy row."""
    return ORMTrialBalanceEntry(
        client_id=entry.client_id,
        period_start=entry.period.start,
        period_end=entry.period.end,
        account_code=entry.account_code,
        classification=entry.classification,
        account_description=entry.account_description,
        opening_balance=entry.opening_balance,
        debit=entry.debit,
        credit=entry.credit,
        closing_balance=entry.closing_balance,
    )


def cash_flow_to_domain(orm_entry: ORMCashFlowEntry) -> domain.CashFlowEntry:
    """Convert SQLAlchemy CashFlowEntry model to domain entity."""
    return domain.CashFlowEntry(
        id=orm_entry.id,
        client_id=orm_entry.client_id,
        period=domain.ReportingPeriod(start=orm_entry.period_start, end=orm_entry.period_end),
        section_title=orm_entry.section_title,
        line_description=orm_entry.line_description,
        amount=orm_entry.amount,
    )


def cash_flow_to_orm(entry: domain.CashFlowEntry) -> ORMCashFlowEntry:
    """Convert domain CashFlowEntry to a new SQLAlchemy row."""
    return ORMCashFlowEntry(
        client_id=entry.client_id,
        period_start=entry.period.start,
        period_end=entry.period.end,
        section_title=entry.section_title,
        line_description=entry.line_description,
        amount=entry.amount,
    )
