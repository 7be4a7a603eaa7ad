"""Dashboard overview command."""

import click
from invoicedash.domain.errors import DomainError
from invoicedash.domain.reporting import ReportingService
from invoicedash.utils.pagination import generate_y_axis
from invoicedash.cli.error_handling import handle_domain_error

CHART_WIDTH = 40


def _display_cards(summary) -> None:
    click.echo("\nOverview:")
    click.echo("-" * 60)
    click.echo(f"{'Collected':<20} {summary.total_paid_invoices:>20}")
    click.echo(f"{'Pending':<20} {summary.total_pending_invoices:>20}")
    click.echo(f"{'Total Invoices':<20} {summary.number_of_invoices:>20}")
    click.echo(f"{'Total Customers':<20} {summary.number_of_customers:>20}")


def _display_revenue(revenue) -> None:
    """Draw monthly revenue as horizontal bars scaled to the chart's top label."""
    click.echo("\nRecent Revenue:")
    click.echo("-" * 60)
    if not revenue:
        click.echo("No revenue data.")
        return

    labels, top_label = generate_y_axis(revenue)
    click.echo(f"Scale: {labels[-1]} to {labels[0]}")
    for record in revenue:
        width = round(record.revenue / top_label * CHART_WIDTH) if top_label else 0
        click.echo(f"{record.month:<4} {'#' * width:<{CHART_WIDTH}} ${record.revenue:,}")


def _display_latest_invoices(invoices) -> None:
    click.echo("\nLatest Invoices:")
    click.echo("-" * 60)
    if not invoices:
        click.echo("No invoices found.")
        return

    for inv in invoices:
        click.echo(f"{inv.name:<20} {inv.email:<25} {inv.amount:>12}")


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show dashboard cards, revenue chart and latest invoices."""
    db = ctx.obj["db"]
    service = ReportingService(db)

    try:
        summary = service.fetch_card_summary()
        revenue = service.fetch_revenue()
        latest = service.fetch_latest_invoices()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    _display_cards(summary)
    _display_revenue(revenue)
    _display_latest_invoices(latest)


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
