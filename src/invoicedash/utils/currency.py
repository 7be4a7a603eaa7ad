"""Currency formatting utilities."""

from decimal import Decimal
from typing import Union


def format_currency(amount: Union[int, str, Decimal]) -> str:
    """Format an amount in cents as a US-dollar string.

    Examples:
    - 150000 -> "$1,500.00"
    - 0 -> "$0.00"
    - -1234 -> "-$12.34"

    Args:
        amount: Amount in cents (int, Decimal, or numeric string)

    Returns:
        Formatted currency string

    Raises:
        ValueError: If amount cannot be interpreted as a number
    """
    try:
        cents = Decimal(str(amount).strip())
    except Exception as e:
        raise ValueError(f"Could not format amount '{amount}': {e}")

    if not cents.is_finite():
        raise ValueError(f"Could not format amount '{amount}'")

    dollars = (cents / 100).quantize(Decimal("0.01"))
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"
