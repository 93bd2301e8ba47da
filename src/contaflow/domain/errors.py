"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class IngestionError(DomainError):
    """Base class for failures of a spreadsheet ingestion run.

    ``step`` names the pipeline step that failed. The orchestrator fills it
    in when the error is raised by a collaborator that does not know it.
    """

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.step = step


class InvalidFileExtension(IngestionError):
    """Uploaded file is not an .xlsx or .xls workbook."""


class CorruptWorkbook(IngestionError):
    """Workbook file is empty, unreadable or has no worksheet."""


class MissingField(IngestionError):
    """A required header cell is blank."""


class InvalidPeriodFormat(IngestionError):
    """Period cell does not hold a DD/MM/YYYY - DD/MM/YYYY range."""


class ClientNotFound(IngestionError):
    """No client is registered under the tax id found in the sheet."""


class EmptySheet(IngestionError):
    """The data region of the sheet produced no entries."""


class EmptyBatch(EmptySheet):
    """A period replacement was attempted with zero entries."""


class StoreError(IngestionError):
    """The backing store failed to delete or insert entries."""


def client_not_found(client_id: int) -> str:
    """Return message for missing client by ID."""
    return f"Client {client_id} not found"


def client_tax_id_not_found(tax_id: str) -> str:
    """Return message for a tax id with no registered client."""
    return f"Client with tax id {tax_id} not found. Register the client first."


def duplicate_client_tax_id(tax_id: str) -> str:
    """Return message for a tax id that is already registered."""
    return f"Client with tax id '{tax_id}' already exists"


def invalid_file_extension(filename: str) -> str:
    """Return message for an unsupported upload file."""
    return f"Invalid file format '{filename}'. Use only .xlsx or .xls files"


def corrupt_workbook(filename: str) -> str:
    """Return message for a workbook that cannot be read."""
    return (
        f"Invalid or corrupted Excel file '{filename}'. Check that the file is intact "
        "and in .xlsx or .xls format and try again."
    )


def empty_workbook_file(filename: str) -> str:
    """Return message for a missing or zero-byte upload."""
    return f"File '{filename}' is empty or corrupted"


def worksheet_not_found(filename: str) -> str:
    """Return message for a workbook without worksheets."""
    return f"Worksheet not found in '{filename}'"


def missing_header_field(field: str, cell: str) -> str:
    """Return message for a blank header cell."""
    return f"{field} not found in cell {cell}"


def invalid_period_format(value: str) -> str:
    """Return message for an unparseable period string."""
    return f"Invalid period format '{value}'. Use: DD/MM/YYYY - DD/MM/YYYY"


def no_data_found(statement_label: str) -> str:
    """Return message for a sheet whose data region is empty."""
    return f"No {statement_label} data found in sheet"


def client_delete_blocked(client_id: int, entry_count: int) -> str:
    """Return message when a client still has stored statement entries."""
    return (
        f"Cannot delete client {client_id}: it has {entry_count} "
        f"statement entr{'ies' if entry_count != 1 else 'y'}. "
        "Use --force to delete them too."
    )
