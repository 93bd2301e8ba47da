"""Tests for period-scoped replacement of statement entries."""

import pytest
from datetime import date
from decimal import Decimal

from contaflow.domain.entities import (
    CashFlowEntry,
    ReportingPeriod,
    StatementType,
    TrialBalanceEntry,
)
from contaflow.domain.errors import EmptyBatch, EmptySheet, StoreError
from contaflow.domain.period_replacer import PeriodReplacer

JANUARY = ReportingPeriod(date(2025, 1, 1), date(2025, 1, 31))
FEBRUARY = ReportingPeriod(date(2025, 2, 1), date(2025, 2, 28))


def _balancete(client_id, period, code, closing="100.00"):
    return TrialBalanceEntry(
        client_id=client_id,
        period=period,
        account_code=code,
        classification="1",
        account_description="ATIVO",
        opening_balance=Decimal("0"),
        debit=Decimal("0"),
        credit=Decimal("0"),
        closing_balance=Decimal(closing),
    )


def _dfc(client_id, period, description, amount="1.00"):
    return CashFlowEntry(
        client_id=client_id,
        period=period,
        section_title="OPERACIONAIS",
        line_description=description,
        amount=Decimal(amount),
    )


@pytest.fixture
def replacer(temp_db):
    return PeriodReplacer(temp_db)


def test_replace_inserts_batch(replacer, temp_db, sample_client):
    entries = [_balancete(sample_client.id, JANUARY, c) for c in ("1", "2", "3")]

    count = replacer.replace(sample_client.id, StatementType.BALANCETE, JANUARY, entries)

    assert count == 3
    stored = temp_db.list_trial_balance_entries(sample_client.id)
    assert [e.account_code for e in stored] == ["1", "2", "3"]


def test_replace_overwrites_same_period(replacer, temp_db, sample_client):
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, c) for c in ("1", "2", "3")],
    )
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, "9", closing="5.00")],
    )

    stored = temp_db.list_trial_balance_entries(sample_client.id)
    assert len(stored) == 1
    assert stored[0].account_code == "9"
    assert stored[0].closing_balance == Decimal("5.00")


def test_replace_is_idempotent(replacer, temp_db, sample_client):
    entries = [_balancete(sample_client.id, JANUARY, c) for c in ("1", "2")]

    replacer.replace(sample_client.id, StatementType.BALANCETE, JANUARY, entries)
    first = temp_db.list_trial_balance_entries(sample_client.id)
    replacer.replace(sample_client.id, StatementType.BALANCETE, JANUARY, entries)
    second = temp_db.list_trial_balance_entries(sample_client.id)

    strip_ids = lambda rows: [(e.account_code, e.period, e.closing_balance) for e in rows]
    assert strip_ids(first) == strip_ids(second)


def test_replace_leaves_other_periods_alone(replacer, temp_db, sample_client):
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, "1")],
    )
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        FEBRUARY,
        [_balancete(sample_client.id, FEBRUARY, "2"), _balancete(sample_client.id, FEBRUARY, "3")],
    )

    stored = temp_db.list_trial_balance_entries(sample_client.id)
    assert [(e.period, e.account_code) for e in stored] == [
        (JANUARY, "1"),
        (FEBRUARY, "2"),
        (FEBRUARY, "3"),
    ]


def test_replace_leaves_other_statement_type_alone(replacer, temp_db, sample_client):
    replacer.replace(
        sample_client.id, StatementType.DFC, JANUARY, [_dfc(sample_client.id, JANUARY, "Lucro")]
    )
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, "1")],
    )

    assert len(temp_db.list_cash_flow_entries(sample_client.id)) == 1
    assert len(temp_db.list_trial_balance_entries(sample_client.id)) == 1


def test_replace_leaves_other_clients_alone(replacer, temp_db, sample_client, client_service):
    other_id = client_service.create_client(name="Other", tax_id="98.765.432/0001-10")
    replacer.replace(
        other_id, StatementType.BALANCETE, JANUARY, [_balancete(other_id, JANUARY, "1")]
    )
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, "2")],
    )

    assert [e.account_code for e in temp_db.list_trial_balance_entries(other_id)] == ["1"]


def test_empty_batch_rejected(replacer, temp_db, sample_client):
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, "1")],
    )

    with pytest.raises(EmptyBatch) as excinfo:
        replacer.replace(sample_client.id, StatementType.BALANCETE, JANUARY, [])

    assert isinstance(excinfo.value, EmptySheet)
    assert "no balancete data found" in str(excinfo.value).lower()
    # Nothing was deleted
    assert len(temp_db.list_trial_balance_entries(sample_client.id)) == 1


def test_failed_insert_keeps_previous_batch(replacer, temp_db, sample_client, monkeypatch):
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, c) for c in ("1", "2")],
    )

    def failing_insert(statement_type, entries):
        raise StoreError("Error inserting data: disk full")

    monkeypatch.setattr(temp_db, "insert_entries", failing_insert)

    with pytest.raises(StoreError):
        replacer.replace(
            sample_client.id,
            StatementType.BALANCETE,
            JANUARY,
            [_balancete(sample_client.id, JANUARY, "3")],
        )

    monkeypatch.undo()
    stored = temp_db.list_trial_balance_entries(sample_client.id)
    assert [e.account_code for e in stored] == ["1", "2"]


def test_constraint_violation_surfaces_as_store_error(replacer, temp_db, sample_client):
    bad = TrialBalanceEntry(
        client_id=sample_client.id,
        period=JANUARY,
        account_code=None,
        classification="",
        account_description="",
        opening_balance=Decimal("0"),
        debit=Decimal("0"),
        credit=Decimal("0"),
        closing_balance=Decimal("0"),
    )
    replacer.replace(
        sample_client.id,
        StatementType.BALANCETE,
        JANUARY,
        [_balancete(sample_client.id, JANUARY, "1")],
    )

    with pytest.raises(StoreError):
        replacer.replace(sample_client.id, StatementType.BALANCETE, JANUARY, [bad])

    assert [e.account_code for e in temp_db.list_trial_balance_entries(sample_client.id)] == ["1"]


def test_delete_period(replacer, temp_db, sample_client):
    replacer.replace(
        sample_client.id, StatementType.DFC, JANUARY, [_dfc(sample_client.id, JANUARY, "A")]
    )
    replacer.replace(
        sample_client.id, StatementType.DFC, FEBRUARY, [_dfc(sample_client.id, FEBRUARY, "B")]
    )

    deleted = replacer.delete(sample_client.id, StatementType.DFC, JANUARY)

    assert deleted == 1
    remaining = temp_db.list_cash_flow_entries(sample_client.id)
    assert [e.line_description for e in remaining] == ["B"]
