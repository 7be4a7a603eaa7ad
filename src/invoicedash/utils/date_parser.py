"""Date parsing utilities."""

from datetime import date
from typing import Union

from dateutil import parser as date_parser


def parse_date(value: Union[str, date]) -> date:
    """Parse a date string into a date object.

    Accepts anything dateutil understands ("2022-12-06", "December 6, 2022",
    etc.). Date objects are returned as-is.

    Args:
        value: Date string or date

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    if isinstance(value, date):
        return value

    try:
        return date_parser.parse(value.strip()).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")
