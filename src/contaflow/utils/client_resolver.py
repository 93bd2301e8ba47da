"""Utility for resolving client references to IDs."""

from contaflow.domain.client import ClientService
from contaflow.domain.errors import NotFoundError


def resolve_client(client_service: ClientService, client: str | int) -> int:
    """Resolve a client ID, tax id or name to a client ID.

    Lookups are tried in that order: a value that parses as an integer is
    tried as an ID first, then every value is tried as the exact tax id and
    then as the exact name.

    Args:
        client_service: ClientService instance
        client: Client ID (int or numeric string), tax id or name

    Returns:
        Client ID

    Raises:
        NotFoundError: If no client matches
    """
    if isinstance(client, int):
        if client_service.get_client(client) is None:
            raise NotFoundError(f"Client ID {client} not found")
        return client

    try:
        client_id = int(client)
    except (ValueError, TypeError):
        pass
    else:
        # Digits-only tax ids fall through when no client has that ID
        if client_service.get_client(client_id) is not None:
            return client_id

    by_tax_id = client_service.get_client_by_tax_id(client)
    if by_tax_id is not None:
        return by_tax_id.id

    for candidate in client_service.list_clients():
        if candidate.name == client:
            return candidate.id

    raise NotFoundError(f"Client '{client}' not found")
