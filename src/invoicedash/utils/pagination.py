"""Pagination and chart axis helpers for report views."""

import math
from typing import Union

from invoicedash.domain.entities import Revenue

ELLIPSIS = "..."


def page_count(total_items: int, page_size: int) -> int:
    """Return the number of pages needed for total_items."""
    return math.ceil(total_items / page_size)


def page_offset(page: int, page_size: int) -> int:
    """Return the row offset of a 1-based page."""
    return (page - 1) * page_size


def generate_pagination(current_page: int, total_pages: int) -> list[Union[int, str]]:
    """Build the page markers for a pagination bar.

    Up to seven pages are all shown. Beyond that the first and last pages stay
    visible, the pages around the current one are shown, and gaps become "...".

    Args:
        current_page: 1-based page being viewed
        total_pages: Total number of pages

    Returns:
        List of page numbers and "..." placeholders
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    # Near the start: first three, gap, last two
    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    # Near the end: first two, gap, last three
    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]


def generate_y_axis(revenue: list[Revenue]) -> tuple[list[str], int]:
    """Compute y-axis labels for a revenue chart.

    The top label is the highest revenue rounded up to the next thousand.

    Returns:
        Tuple of (labels from top to "$0K", top label value)
    """
    highest = max((r.revenue for r in revenue), default=0)
    top_label = math.ceil(highest / 1000) * 1000

    labels = [f"${value // 1000}K" for value in range(top_label, -1, -1000)]
    return labels, top_label
