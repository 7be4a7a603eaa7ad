"""Utility functions for invoicedash."""

from invoicedash.utils.currency import format_currency
from invoicedash.utils.date_parser import parse_date
from invoicedash.utils.pagination import generate_pagination, generate_y_axis

__all__ = ["format_currency", "parse_date", "generate_pagination", "generate_y_axis"]
