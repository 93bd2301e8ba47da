"""CLI error handling helpers."""

import click

from contaflow.domain.client import ClientService
from contaflow.domain.errors import DomainError
from contaflow.utils.client_resolver import resolve_client


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def resolve_client_or_exit(
    ctx: click.Context, client_service: ClientService, client: str | int
) -> int:
    """Resolve a client reference, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_client(client_service, client)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
