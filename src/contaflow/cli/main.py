"""Main CLI entry point."""

import logging

import click
from contaflow.database.factories import DB_PATH_ENV, create_sqlite_database

# Import and register all commands at module level
from contaflow.cli.commands import client, import_cmd, statement

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Log each ingestion step to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Contaflow - statement ingestion for accounting back-offices.

    Import trial balance (balancete) and cash-flow (DFC) spreadsheets per
    client and browse the stored periods.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
client.register_commands(cli)
import_cmd.register_commands(cli)
statement.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
