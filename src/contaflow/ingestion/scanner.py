"""Sentinel-terminated scanning of spreadsheet data regions."""

from dataclasses import dataclass
from typing import Callable, Iterator, Mapping

from contaflow.ingestion.workbook import Sheet
from contaflow.utils.cell_decoder import CellValue, EMPTY, decode_cell


@dataclass(frozen=True)
class RawRow:
    """Decoded cells of one sheet row, keyed by field name."""

    row_number: int
    cells: Mapping[str, CellValue]

    def __getitem__(self, field: str) -> CellValue:
        return self.cells.get(field, EMPTY)


StopPredicate = Callable[[RawRow], bool]


def read_row(sheet: Sheet, row_number: int, columns: Mapping[str, str]) -> RawRow:
    """Decode the mapped columns of one row.

    Args:
        sheet: Sheet to read from
        row_number: 1-based row number
        columns: Field name to column letter
    """
    return RawRow(
        row_number=row_number,
        cells={field: decode_cell(sheet.value_at(row_number, column)) for field, column in columns.items()},
    )


def scan_region(
    sheet: Sheet,
    start_row: int,
    columns: Mapping[str, str],
    stop: StopPredicate,
) -> Iterator[RawRow]:
    """Yield rows from ``start_row`` downwards until ``stop`` holds.

    The row that satisfies ``stop`` is not yielded. Rows beyond the end of
    the sheet decode as empty, so ``stop`` must accept an all-empty row for
    the scan to terminate.

    Args:
        sheet: Sheet to scan
        start_row: First data row (1-based)
        columns: Field name to column letter
        stop: Termination predicate evaluated on every row

    Yields:
        RawRow for each data row
    """
    row_number = start_row
    while True:
        row = read_row(sheet, row_number, columns)
        if stop(row):
            return
        yield row
        row_number += 1
