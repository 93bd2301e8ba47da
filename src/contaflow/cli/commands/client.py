"""Client management commands."""

import click
from contaflow.cli.error_handling import handle_domain_error, resolve_client_or_exit
from contaflow.domain.client import ClientService
from contaflow.domain.errors import DomainError


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("create")
@click.argument("name", metavar="CLIENT_NAME")
@click.option("--tax-id", required=True, help="Tax id (CNPJ) exactly as written in the sheets")
@click.pass_context
def create_client(ctx, name: str, tax_id: str):
    """Register a new client.

    Examples:
        contaflow client create "Acme Ltda" --tax-id 12.345.678/0001-99
    """
    db = ctx.obj["db"]
    service = ClientService(db)

    try:
        client_id = service.create_client(name=name, tax_id=tax_id)
        click.echo(f"Created client '{name.strip()}' (ID: {client_id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List all clients."""
    db = ctx.obj["db"]
    service = ClientService(db)

    clients = service.list_clients()
    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nClients:")
    click.echo("-" * 70)
    for c in clients:
        click.echo(f"ID: {c.id:3d} | {c.name:30s} | Tax id: {c.tax_id}")


@client_group.command("show")
@click.argument("client", metavar="CLIENT")
@click.pass_context
def show_client(ctx, client: str):
    """Show a client and how many entries are stored for it.

    CLIENT can be a client ID, tax id or name.
    """
    db = ctx.obj["db"]
    service = ClientService(db)
    client_id = resolve_client_or_exit(ctx, service, client)

    c = service.get_client(client_id)
    click.echo(f"\nClient ID: {c.id}")
    click.echo(f"  Name: {c.name}")
    click.echo(f"  Tax id: {c.tax_id}")
    click.echo(f"  Registered: {c.created_at:%Y-%m-%d %H:%M}")
    click.echo(f"  Stored entries: {db.count_client_entries(c.id)}")


@client_group.command("rename")
@click.argument("client", metavar="CLIENT")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_client(ctx, client: str, new_name: str) -> None:
    """Rename a client.

    CLIENT can be a client ID, tax id or name.

    Examples:
        contaflow client rename 1 "Acme Comercio Ltda"
    """
    db = ctx.obj["db"]
    service = ClientService(db)
    client_id = resolve_client_or_exit(ctx, service, client)

    try:
        service.rename_client(client_id, new_name)
        click.echo(f"Renamed client {client_id} to '{new_name.strip()}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


@client_group.command("delete")
@click.argument("client", metavar="CLIENT")
@click.option("--force", is_flag=True, help="Also delete all stored statements of the client")
@click.confirmation_option(prompt="Are you sure you want to delete this client?")
@click.pass_context
def delete_client(ctx, client: str, force: bool) -> None:
    """Delete a client.

    CLIENT can be a client ID, tax id or name. A client with stored
    statements is only deleted with --force.
    """
    db = ctx.obj["db"]
    service = ClientService(db)
    client_id = resolve_client_or_exit(ctx, service, client)

    try:
        deleted_entries = service.delete_client(client_id, force=force)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted client {client_id}")
    if deleted_entries:
        click.echo(f"Deleted {deleted_entries} statement entries")


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
