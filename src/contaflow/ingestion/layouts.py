"""Fixed spreadsheet layouts of the supported statement types.

Each statement type is pure configuration: where the header cells are, where
the data region starts, which column feeds which field, when the region ends
and how scanned rows become entries. Scanning itself is shared.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from contaflow.domain.entities import ReportingPeriod, StatementType
from contaflow.ingestion.normalizer import normalize_cash_flow, normalize_trial_balance
from contaflow.ingestion.scanner import RawRow, StopPredicate

BALANCETE_SENTINEL = "RESUMO DO BALANCETE"
DFC_SENTINEL = "DISPONIBILIDADES - NO FINAL DO PERÍODO"

BALANCETE_COLUMNS = {
    "code": "A",
    "classification": "E",
    "description_1": "I",
    "description_2": "J",
    "description_3": "K",
    "description_4": "L",
    "description_5": "M",
    "description_6": "N",
    "opening_balance": "V",
    "debit": "Y",
    "credit": "AC",
    "closing_balance": "AI",
}

DFC_COLUMNS = {
    "title": "A",
    "description": "D",
    "amount": "O",
}

Normalizer = Callable[[Iterable[RawRow], int, ReportingPeriod], list]


def balancete_stop(row: RawRow) -> bool:
    """End of the balancete region: blank code or the summary sentinel."""
    code = row["code"]
    return code.is_empty or code.text == BALANCETE_SENTINEL


def dfc_stop(row: RawRow) -> bool:
    """End of the DFC region: closing-balance sentinel or a fully blank row."""
    if row["title"].text == DFC_SENTINEL:
        return True
    return row["title"].is_empty and row["description"].is_empty and row["amount"].is_empty


@dataclass(frozen=True)
class StatementLayout:
    """Cell addresses, data region and row mapping of one statement type."""

    statement_type: StatementType
    tax_id_cell: str
    period_cell: str
    start_row: int
    columns: Mapping[str, str]
    stop: StopPredicate
    normalize: Normalizer


# The DFC header cells follow the two-statement upload form (E2 tax id, E3
# period); older instructions name G2/G3 and its error text names E3 for both.
LAYOUTS: dict[StatementType, StatementLayout] = {
    StatementType.BALANCETE: StatementLayout(
        statement_type=StatementType.BALANCETE,
        tax_id_cell="G2",
        period_cell="G3",
        start_row=8,
        columns=BALANCETE_COLUMNS,
        stop=balancete_stop,
        normalize=normalize_trial_balance,
    ),
    StatementType.DFC: StatementLayout(
        statement_type=StatementType.DFC,
        tax_id_cell="E2",
        period_cell="E3",
        start_row=7,
        columns=DFC_COLUMNS,
        stop=dfc_stop,
        normalize=normalize_cash_flow,
    ),
}


def get_layout(statement_type: StatementType | str) -> StatementLayout:
    """Return the layout for a statement type given as enum or string.

    Raises:
        ValueError: If the statement type is unknown
    """
    try:
        return LAYOUTS[StatementType(statement_type)]
    except ValueError:
        raise ValueError(
            f"Unknown statement type '{statement_type}'. Supported types: "
            + ", ".join(t.value for t in StatementType)
        )
