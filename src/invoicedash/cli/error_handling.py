"""CLI error handling helpers."""

import click

from invoicedash.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError, exit_code: int = 1) -> None:
    """Print a domain error to stderr and exit.

    DataAccessError messages are already sanitized, so they are shown as-is.
    """
    click.echo(f"Error: {error}", err=True)
    ctx.exit(exit_code)
