"""Client domain service."""

from typing import Optional
from contaflow.database.base import Database
from contaflow.domain.entities import Client as ClientEntity
from contaflow.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    client_delete_blocked,
    client_not_found,
    duplicate_client_tax_id,
)


class ClientService:
    """Service for managing the clients statements are imported for."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_client(self, name: str, tax_id: str) -> int:
        """Register a new client.

        Args:
            name: Display name
            tax_id: Tax id (CNPJ), exactly as it appears in the statement sheets

        Returns:
            Client ID

        Raises:
            ValidationError: If name or tax id is blank
            ConflictError: If the tax id is already registered
        """
        name = name.strip()
        tax_id = tax_id.strip()
        if not name:
            raise ValidationError("Client name cannot be empty")
        if not tax_id:
            raise ValidationError("Client tax id cannot be empty")

        if self.db.get_client_by_tax_id(tax_id) is not None:
            raise ConflictError(duplicate_client_tax_id(tax_id))

        return self.db.create_client(name=name, tax_id=tax_id)

    def get_client(self, client_id: int) -> Optional[ClientEntity]:
        """Get client by ID."""
        return self.db.get_client(client_id)

    def get_client_by_tax_id(self, tax_id: str) -> Optional[ClientEntity]:
        """Get client by tax id."""
        return self.db.get_client_by_tax_id(tax_id.strip())

    def list_clients(self) -> list[ClientEntity]:
        """List all clients."""
        return self.db.list_clients()

    def rename_client(self, client_id: int, name: str) -> None:
        """Rename a client.

        Raises:
            NotFoundError: If client not found
            ValidationError: If the new name is blank
        """
        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))
        name = name.strip()
        if not name:
            raise ValidationError("Client name cannot be empty")
        self.db.update_client_name(client_id=client_id, name=name)

    def delete_client(self, client_id: int, force: bool = False) -> int:
        """Delete a client.

        Args:
            client_id: Client ID to delete
            force: Also delete the client's stored statement entries

        Returns:
            Number of statement entries deleted along with the client

        Raises:
            NotFoundError: If client not found
            DependencyError: If the client has entries and force is False
        """
        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))

        entry_count = self.db.count_client_entries(client_id)
        if entry_count > 0 and not force:
            raise DependencyError(client_delete_blocked(client_id, entry_count))

        self.db.delete_client(client_id)
        return entry_count
