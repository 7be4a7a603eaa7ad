"""Load placeholder data."""

import click

from invoicedash.domain.errors import DomainError
from invoicedash.domain.reporting import ReportingService
from invoicedash.domain.seed import seed_database
from invoicedash.cli.error_handling import handle_domain_error


@click.command("seed")
@click.option("--force", is_flag=True, help="Add placeholder data even if customers already exist")
@click.pass_context
def seed(ctx, force: bool):
    """Load placeholder customers, invoices and revenue into the database."""
    db = ctx.obj["db"]
    service = ReportingService(db)

    try:
        existing = service.fetch_all_customers()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if existing and not force:
        click.echo("Database already contains customers. Use --force to seed anyway.")
        return

    click.echo("Loading placeholder data...")
    try:
        counts = seed_database(db)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Created {counts['customers']} customers, {counts['invoices']} invoices "
        f"and {counts['revenue']} revenue rows."
    )


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
