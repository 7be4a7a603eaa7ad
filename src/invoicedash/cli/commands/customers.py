"""Customer listing commands."""

import click
from invoicedash.domain.errors import DomainError
from invoicedash.domain.reporting import ReportingService
from invoicedash.cli.error_handling import handle_domain_error


@click.group("customers")
def customers_group():
    """List and search customers."""
    pass


@customers_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List all customers by name."""
    db = ctx.obj["db"]
    service = ReportingService(db)

    try:
        customers = service.fetch_all_customers()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 60)
    for customer in customers:
        click.echo(f"{customer.name:<24} | {customer.id}")


@customers_group.command("search")
@click.argument("query", required=False, default="")
@click.pass_context
def search_customers(ctx, query: str):
    """Search customers by name or email and show their invoice totals.

    Examples:
        invoicedash customers search
        invoicedash customers search ali
    """
    db = ctx.obj["db"]
    service = ReportingService(db)

    try:
        customers = service.fetch_filtered_customers(query)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not customers:
        click.echo("No customers found.")
        return

    click.echo("-" * 100)
    click.echo(f"{'Name':<22} {'Email':<28} {'Invoices':>8} {'Pending':>14} {'Paid':>14}")
    click.echo("-" * 100)
    for c in customers:
        click.echo(
            f"{c.name:<22} {c.email:<28} {c.total_invoices:>8} {c.total_pending:>14} {c.total_paid:>14}"
        )


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customers_group)
