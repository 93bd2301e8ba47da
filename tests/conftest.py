"""Shared pytest fixtures for contaflow tests."""

import tempfile
import os
import pytest
from openpyxl import Workbook
from openpyxl.utils.cell import column_index_from_string, coordinate_from_string

from contaflow.database.factories import create_sqlite_database
from contaflow.domain.client import ClientService
from contaflow.domain.statement import StatementService
from contaflow.domain.ingestion import IngestionService
from contaflow.ingestion.layouts import (
    BALANCETE_COLUMNS,
    BALANCETE_SENTINEL,
    DFC_COLUMNS,
    DFC_SENTINEL,
)
from contaflow.ingestion.workbook import Sheet

SAMPLE_TAX_ID = "12.345.678/0001-99"
SAMPLE_PERIOD = "01/01/2025 - 31/01/2025"

SAMPLE_BALANCETE_ROWS = [
    {
        "code": "0001",
        "classification": "1",
        "descriptions": ["ATIVO"],
        "opening_balance": 1000.5,
        "debit": 200,
        "credit": 50.25,
        "closing_balance": 1150.25,
    },
    {
        "code": "00010",
        "classification": "1.1",
        "descriptions": ["ATIVO", "ATIVO", "CIRCULANTE"],
        "opening_balance": 800,
        "debit": 100,
        "credit": 0,
        "closing_balance": 900,
    },
    {
        "code": "00011",
        "classification": "1.1.1",
        "descriptions": ["ATIVO", "CIRCULANTE", "CAIXA"],
        "opening_balance": "150.75",
        "debit": "abc",
        "credit": None,
        "closing_balance": 150.75,
    },
    {
        "code": "000",
        "classification": "2",
        "descriptions": ["PASSIVO"],
        "opening_balance": -500,
        "debit": 0,
        "credit": 25,
        "closing_balance": -525,
    },
    {
        "code": 301,
        "classification": "3",
        "descriptions": ["RECEITAS", None, "VENDAS"],
        "opening_balance": 0,
        "debit": 0,
        "credit": 1000,
        "closing_balance": 1000,
    },
]

SAMPLE_DFC_ROWS = [
    {"title": "ATIVIDADES OPERACIONAIS", "description": None, "amount": None},
    {"title": None, "description": "Lucro liquido", "amount": "179.487,30"},
    {"title": None, "description": "Depreciacao", "amount": "1.234,56"},
    {"title": None, "description": "Provisoes", "amount": "0,00"},
    {"title": None, "description": "Ajuste sem valor", "amount": "n/d"},
    {"title": "ATIVIDADES DE INVESTIMENTO", "description": "Compra de imobilizado", "amount": "-12.000,00"},
]


class FakeSheet(Sheet):
    """In-memory sheet keyed by "A1"-style addresses."""

    def __init__(self, cells: dict | None = None):
        self.cells = {}
        for address, value in (cells or {}).items():
            column, row = coordinate_from_string(address)
            self.cells[(row, column)] = value

    def value_at(self, row, column):
        return self.cells.get((row, column))

    def set(self, row, column, value):
        self.cells[(row, column)] = value


def _put(ws, row, column, value):
    ws.cell(row=row, column=column_index_from_string(column), value=value)


def write_balancete_workbook(
    path,
    rows=None,
    tax_id=SAMPLE_TAX_ID,
    period=SAMPLE_PERIOD,
    sentinel=True,
):
    """Write a balancete workbook laid out like the accounting system export."""
    rows = SAMPLE_BALANCETE_ROWS if rows is None else rows
    wb = Workbook()
    ws = wb.active
    ws["A1"] = "BALANCETE"
    ws["G2"] = tax_id
    ws["G3"] = period
    ws["A7"] = "Codigo"

    row_number = 8
    for row in rows:
        _put(ws, row_number, BALANCETE_COLUMNS["code"], row["code"])
        _put(ws, row_number, BALANCETE_COLUMNS["classification"], row.get("classification"))
        for i, description in enumerate(row.get("descriptions", []), start=1):
            _put(ws, row_number, BALANCETE_COLUMNS[f"description_{i}"], description)
        for field in ("opening_balance", "debit", "credit", "closing_balance"):
            _put(ws, row_number, BALANCETE_COLUMNS[field], row.get(field))
        row_number += 1

    if sentinel:
        _put(ws, row_number, BALANCETE_COLUMNS["code"], BALANCETE_SENTINEL)
        _put(ws, row_number + 1, BALANCETE_COLUMNS["code"], "9999")

    wb.save(path)
    return path


def write_dfc_workbook(
    path,
    rows=None,
    tax_id=SAMPLE_TAX_ID,
    period=SAMPLE_PERIOD,
    sentinel=True,
):
    """Write a DFC workbook laid out like the accounting system export."""
    rows = SAMPLE_DFC_ROWS if rows is None else rows
    wb = Workbook()
    ws = wb.active
    ws["A1"] = "DEMONSTRACAO DOS FLUXOS DE CAIXA"
    ws["E2"] = tax_id
    ws["E3"] = period

    row_number = 7
    for row in rows:
        for field in ("title", "description", "amount"):
            _put(ws, row_number, DFC_COLUMNS[field], row.get(field))
        row_number += 1

    if sentinel:
        _put(ws, row_number, DFC_COLUMNS["title"], DFC_SENTINEL)
        _put(ws, row_number, DFC_COLUMNS["amount"], "5.000,00")
        _put(ws, row_number + 1, DFC_COLUMNS["description"], "after sentinel")
        _put(ws, row_number + 1, DFC_COLUMNS["amount"], "1,00")

    wb.save(path)
    return path


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def statement_service(temp_db):
    """Create a StatementService with a temporary database."""
    return StatementService(temp_db)


@pytest.fixture
def ingestion_service(temp_db):
    """Create an IngestionService with a temporary database."""
    return IngestionService(temp_db)


@pytest.fixture
def sample_client(client_service):
    """Register the client whose tax id the sample workbooks carry."""
    client_id = client_service.create_client(name="Acme Ltda", tax_id=SAMPLE_TAX_ID)
    return client_service.get_client(client_id)


@pytest.fixture
def balancete_file(tmp_path):
    """Sample balancete workbook with five data rows."""
    return write_balancete_workbook(tmp_path / "balancete.xlsx")


@pytest.fixture
def dfc_file(tmp_path):
    """Sample DFC workbook."""
    return write_dfc_workbook(tmp_path / "dfc.xlsx")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_balancete(tmp_path):
    """Factory writing balancete workbooks into tmp_path."""

    def _make(name="balancete.xlsx", **kwargs):
        return write_balancete_workbook(tmp_path / name, **kwargs)

    return _make


@pytest.fixture
def make_dfc(tmp_path):
    """Factory writing DFC workbooks into tmp_path."""

    def _make(name="dfc.xlsx", **kwargs):
        return write_dfc_workbook(tmp_path / name, **kwargs)

    return _make


@pytest.fixture
def make_sheet():
    """Factory for in-memory sheets."""
    return FakeSheet
