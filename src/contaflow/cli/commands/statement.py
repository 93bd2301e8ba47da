"""Statement browsing commands."""

from decimal import Decimal

import click
from contaflow.cli.commands.import_cmd import STATEMENT_CHOICES
from contaflow.cli.error_handling import handle_domain_error, resolve_client_or_exit
from contaflow.domain.client import ClientService
from contaflow.domain.entities import StatementType
from contaflow.domain.errors import DomainError
from contaflow.domain.statement import StatementService
from contaflow.ingestion.header import parse_period
from contaflow.utils.date_parser import parse_date


def _money(value: Decimal) -> str:
    return f"{value:,.2f}"


def _parse_optional_date(ctx, value: str | None, label: str):
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.command("periods")
@click.argument("client", metavar="CLIENT")
@click.option(
    "--type",
    "statement_type",
    type=STATEMENT_CHOICES,
    default=StatementType.BALANCETE.value,
    show_default=True,
    help="Statement type",
)
@click.pass_context
def list_periods(ctx, client: str, statement_type: str):
    """List the periods imported for a client, most recent first.

    CLIENT can be a client ID, tax id or name.
    """
    db = ctx.obj["db"]
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)
    service = StatementService(db)
    kind = StatementType(statement_type)

    summaries = service.list_periods(client_id, kind)
    if not summaries:
        click.echo(f"No {kind.label} periods found.")
        return

    click.echo(f"\n{kind.label} periods:")
    if kind is StatementType.BALANCETE:
        click.echo("-" * 110)
        click.echo(
            f"{'Period':<25} {'Records':>8} {'Opening':>18} {'Debit':>18} {'Credit':>18} {'Closing':>18}"
        )
        click.echo("-" * 110)
        for s in summaries:
            click.echo(
                f"{s.period.label:<25} {s.record_count:>8} {_money(s.total_opening_balance):>18} "
                f"{_money(s.total_debit):>18} {_money(s.total_credit):>18} "
                f"{_money(s.total_closing_balance):>18}"
            )
    else:
        click.echo("-" * 60)
        click.echo(f"{'Period':<25} {'Records':>8} {'Total':>24}")
        click.echo("-" * 60)
        for s in summaries:
            click.echo(f"{s.period.label:<25} {s.record_count:>8} {_money(s.total_amount):>24}")


@click.command("view")
@click.argument("client", metavar="CLIENT")
@click.option(
    "--type",
    "statement_type",
    type=STATEMENT_CHOICES,
    default=StatementType.BALANCETE.value,
    show_default=True,
    help="Statement type",
)
@click.option("--start-date", help="Only periods starting on or after this date (DD/MM/YYYY or YYYY-MM-DD)")
@click.option("--end-date", help="Only periods ending on or before this date (DD/MM/YYYY or YYYY-MM-DD)")
@click.option("--limit", type=click.IntRange(min=1), help="Show at most this many entries")
@click.pass_context
def view_entries(
    ctx, client: str, statement_type: str, start_date: str, end_date: str, limit: int | None
):
    """View stored statement entries of a client.

    CLIENT can be a client ID, tax id or name.

    Examples:
        contaflow view 12.345.678/0001-99 --start-date 01/01/2025
        contaflow view "Acme Ltda" --type dfc
    """
    db = ctx.obj["db"]
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)
    service = StatementService(db)
    kind = StatementType(statement_type)

    start = _parse_optional_date(ctx, start_date, "start date")
    end = _parse_optional_date(ctx, end_date, "end date")

    try:
        if kind is StatementType.BALANCETE:
            entries = service.list_trial_balance(client_id, start_date=start, end_date=end)
        else:
            entries = service.list_cash_flow(client_id, start_date=start, end_date=end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No entries found.")
        return

    total = len(entries)
    if limit is not None:
        entries = entries[:limit]

    click.echo(f"\nFound {total} {kind.label} entr{'ies' if total != 1 else 'y'}:")
    if kind is StatementType.BALANCETE:
        click.echo("-" * 140)
        click.echo(
            f"{'Period':<25} {'Code':<10} {'Description':<45} {'Opening':>14} {'Debit':>14} "
            f"{'Credit':>14} {'Closing':>14}"
        )
        click.echo("-" * 140)
        for e in entries:
            description = e.account_description[:45]
            click.echo(
                f"{e.period.label:<25} {e.account_code:<10} {description:<45} "
                f"{_money(e.opening_balance):>14} {_money(e.debit):>14} "
                f"{_money(e.credit):>14} {_money(e.closing_balance):>14}"
            )
    else:
        click.echo("-" * 120)
        click.echo(f"{'Period':<25} {'Section':<35} {'Description':<40} {'Amount':>16}")
        click.echo("-" * 120)
        for e in entries:
            click.echo(
                f"{e.period.label:<25} {e.section_title[:35]:<35} "
                f"{e.line_description[:40]:<40} {_money(e.amount):>16}"
            )

    if limit is not None and total > limit:
        click.echo(f"\n... {total - limit} more not shown (use --limit to change)")


@click.command("delete-period")
@click.argument("client", metavar="CLIENT")
@click.option(
    "--type",
    "statement_type",
    type=STATEMENT_CHOICES,
    required=True,
    help="Statement type",
)
@click.option("--period", "period_str", required=True, help='Period as "DD/MM/YYYY - DD/MM/YYYY"')
@click.confirmation_option(prompt="Are you sure you want to delete this period?")
@click.pass_context
def delete_period(ctx, client: str, statement_type: str, period_str: str):
    """Delete all stored entries of one period.

    CLIENT can be a client ID, tax id or name.

    Examples:
        contaflow delete-period 1 --type balancete --period "01/01/2025 - 31/01/2025" --yes
    """
    db = ctx.obj["db"]
    client_id = resolve_client_or_exit(ctx, ClientService(db), client)
    service = StatementService(db)
    kind = StatementType(statement_type)

    try:
        period = parse_period(period_str)
        deleted = service.delete_period(client_id, kind, period)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted {deleted} {kind.label} entries for period {period.label}")


def register_commands(cli):
    """Register statement browsing commands with main CLI."""
    cli.add_command(list_periods)
    cli.add_command(view_entries)
    cli.add_command(delete_period)
