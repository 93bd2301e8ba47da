"""Statement spreadsheet ingestion domain service."""

import logging
from enum import Enum
from pathlib import Path

from contaflow.database.base import Database
from contaflow.domain.entities import IngestionResult, StatementType
from contaflow.domain.errors import (
    ClientNotFound,
    EmptySheet,
    IngestionError,
    InvalidFileExtension,
    ValidationError,
    client_tax_id_not_found,
    invalid_file_extension,
    no_data_found,
)
from contaflow.domain.period_replacer import PeriodReplacer
from contaflow.ingestion.header import resolve_header
from contaflow.ingestion.layouts import get_layout
from contaflow.ingestion.scanner import scan_region
from contaflow.ingestion.workbook import has_supported_extension, load_first_sheet

logger = logging.getLogger(__name__)


class IngestionStep(str, Enum):
    """Steps of an ingestion run, in execution order."""

    VALIDATE_EXTENSION = "validate_extension"
    LOAD_WORKBOOK = "load_workbook"
    RESOLVE_HEADER = "resolve_header"
    LOOKUP_CLIENT = "lookup_client"
    SCAN_REGION = "scan_region"
    NORMALIZE_RECORDS = "normalize_records"
    REPLACE_PERIOD = "replace_period"


class IngestionService:
    """Service for importing balancete and DFC spreadsheets.

    A run is linear and never retried: the first failing step ends it with an
    IngestionError whose ``step`` names that step.
    """

    def __init__(self, db: Database):
        """Initialize ingestion service.

        Args:
            db: Database instance
        """
        self.db = db
        self.replacer = PeriodReplacer(db)

    def ingest(self, file_path: str, statement_type: StatementType | str) -> IngestionResult:
        """Import one statement file, replacing the period it covers.

        Args:
            file_path: Path to an .xlsx or .xls file
            statement_type: "balancete" or "dfc"

        Returns:
            IngestionResult describing the client, period and entry count

        Raises:
            ValidationError: If the statement type is unknown
            IngestionError: If any ingestion step fails
        """
        try:
            layout = get_layout(statement_type)
        except ValueError as e:
            raise ValidationError(str(e))
        statement_type = layout.statement_type
        filename = Path(file_path).name

        step = IngestionStep.VALIDATE_EXTENSION
        try:
            logger.debug("Ingesting %s as %s", filename, statement_type.value)
            if not has_supported_extension(file_path):
                raise InvalidFileExtension(invalid_file_extension(filename))

            step = IngestionStep.LOAD_WORKBOOK
            sheet = load_first_sheet(file_path)

            step = IngestionStep.RESOLVE_HEADER
            header = resolve_header(sheet, layout)
            logger.debug("Header: tax id %s, period %s", header.tax_id, header.period.label)

            step = IngestionStep.LOOKUP_CLIENT
            client = self.db.get_client_by_tax_id(header.tax_id)
            if client is None:
                raise ClientNotFound(client_tax_id_not_found(header.tax_id))

            step = IngestionStep.SCAN_REGION
            rows = list(scan_region(sheet, layout.start_row, layout.columns, layout.stop))
            logger.debug("Scanned %d row(s) from row %d", len(rows), layout.start_row)
            if not rows:
                raise EmptySheet(no_data_found(statement_type.label))

            step = IngestionStep.NORMALIZE_RECORDS
            entries = layout.normalize(rows, client.id, header.period)
            if not entries:
                raise EmptySheet(no_data_found(statement_type.label))

            step = IngestionStep.REPLACE_PERIOD
            record_count = self.replacer.replace(client.id, statement_type, header.period, entries)
        except IngestionError as e:
            if e.step is None:
                e.step = step.value
            logger.warning("Ingestion of %s failed at %s: %s", filename, e.step, e)
            raise

        logger.info(
            "Imported %d %s entries for %s (%s), period %s",
            record_count,
            statement_type.value,
            client.name,
            client.tax_id,
            header.period.label,
        )
        return IngestionResult(
            client_id=client.id,
            client_name=client.name,
            tax_id=client.tax_id,
            period=header.period,
            record_count=record_count,
            statement_type=statement_type,
        )
