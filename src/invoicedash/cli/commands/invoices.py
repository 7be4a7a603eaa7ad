"""Invoice search and lookup commands."""

import click
from invoicedash.domain import errors
from invoicedash.domain.errors import DomainError
from invoicedash.domain.reporting import ReportingService
from invoicedash.utils.currency import format_currency
from invoicedash.utils.pagination import generate_pagination
from invoicedash.cli.error_handling import handle_domain_error


@click.group("invoices")
def invoices_group():
    """Search and view invoices."""
    pass


@invoices_group.command("list")
@click.option("--query", "-q", default="", help="Text matched against customer, email, amount, date and status")
@click.option("--page", type=int, default=1, show_default=True, help="Page number")
@click.pass_context
def list_invoices(ctx, query: str, page: int):
    """List invoices matching a search, newest first.

    Examples:
        invoicedash invoices list
        invoicedash invoices list --query pending --page 2
    """
    db = ctx.obj["db"]
    service = ReportingService(db)

    try:
        invoices = service.fetch_filtered_invoices(query, page)
        total_pages = service.fetch_invoice_pages(query)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo("-" * 100)
    click.echo(f"{'Customer':<22} {'Email':<28} {'Amount':>12} {'Date':<12} {'Status':<8} ")
    click.echo("-" * 100)
    for inv in invoices:
        click.echo(
            f"{inv.name:<22} {inv.email:<28} {format_currency(inv.amount):>12} "
            f"{str(inv.date):<12} {inv.status:<8}"
        )

    markers = " ".join(f"[{m}]" if m == page else str(m) for m in generate_pagination(page, total_pages))
    click.echo(f"\nPage {page} of {total_pages}: {markers}")


@invoices_group.command("show")
@click.argument("invoice_id", metavar="INVOICE_ID")
@click.pass_context
def show_invoice(ctx, invoice_id: str):
    """Show a single invoice."""
    db = ctx.obj["db"]
    service = ReportingService(db)

    try:
        invoice = service.fetch_invoice_by_id(invoice_id)
        if invoice is None:
            raise errors.NotFoundError(errors.invoice_not_found(invoice_id))
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Invoice ID: {invoice.id}")
    click.echo(f"  Customer ID: {invoice.customer_id}")
    click.echo(f"  Amount: {invoice.amount}")
    click.echo(f"  Status: {invoice.status}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoices_group)
