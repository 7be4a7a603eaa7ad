"""Main CLI entry point."""

import click

from invoicedash.database.factories import create_database
from invoicedash.domain import errors
from invoicedash.domain.errors import DomainError
from invoicedash.domain.reporting import data_access
from invoicedash.cli.error_handling import handle_domain_error
from invoicedash.utils.logs import configure_logging

# Import and register all commands at module level
from invoicedash.cli.commands import (
    customers,
    dashboard,
    invoices,
    seed,
)


@click.group()
@click.option(
    "--database-url",
    help="PostgreSQL connection string (overrides POSTGRES_URL environment variable)",
    envvar="POSTGRES_URL",
)
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to a local SQLite database, used when no PostgreSQL URL is set",
    envvar="INVOICEDASH_DB_PATH",
)
@click.pass_context
def cli(ctx, database_url: str | None, db_path: str | None):
    """Invoicedash - Invoice reporting dashboard.

    Browse dashboard figures, search invoices and customers.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            with data_access(errors.OPEN_DATABASE_FAILED):
                db = create_database(database_url=database_url or None, database_path=db_path)
                db.connect()
                db.initialize_schema()
        except DomainError as e:
            handle_domain_error(ctx, e)
            return
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
customers.register_commands(cli)
dashboard.register_commands(cli)
invoices.register_commands(cli)
seed.register_commands(cli)


def main():
    """Main entry point for CLI."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
