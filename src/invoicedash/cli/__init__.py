"""Command-line interface for invoicedash."""
