"""Statement import command."""

import click
from contaflow.cli.error_handling import handle_domain_error
from contaflow.domain.entities import StatementType
from contaflow.domain.errors import DomainError
from contaflow.domain.ingestion import IngestionService

STATEMENT_CHOICES = click.Choice([t.value for t in StatementType], case_sensitive=False)


@click.command("import")
@click.argument("statement_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--type",
    "statement_type",
    type=STATEMENT_CHOICES,
    default=StatementType.BALANCETE.value,
    show_default=True,
    help="Statement type of the spreadsheet",
)
@click.pass_context
def import_statement(ctx, statement_file: str, statement_type: str):
    """Import a balancete or DFC spreadsheet (.xlsx or .xls).

    The client is identified by the tax id in the sheet header and must be
    registered first. Any data already stored for the same client and period
    is replaced.

    Examples:
        contaflow import balancete_jan.xlsx
        contaflow import dfc_2025.xlsx --type dfc
    """
    db = ctx.obj["db"]
    service = IngestionService(db)

    try:
        result = service.ingest(statement_file, statement_type)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\n{result.statement_type.label} imported successfully:")
    click.echo(f"  Client: {result.client_name}")
    click.echo(f"  Tax id: {result.tax_id}")
    click.echo(f"  Period: {result.period_label}")
    click.echo(f"  Records imported: {result.record_count}")
    click.echo(f"  Type: {result.statement_type.label}")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_statement)
