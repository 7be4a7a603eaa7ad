"""Reporting domain service.

Turns dashboard and search requests into database queries and shapes the
results for display. Every operation either returns its full result or
raises DataAccessError with a message that is safe to show to users; the
driver error is logged here and kept as the exception's cause.
"""

from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, Optional, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from invoicedash.database.base import Database
from invoicedash.domain import errors
from invoicedash.domain.entities import (
    ITEMS_PER_PAGE,
    LATEST_INVOICES_LIMIT,
    CardSummary,
    CustomerField,
    CustomerSummary,
    InvoiceForm,
    InvoiceSearchResult,
    LatestInvoice,
    Revenue,
)
from invoicedash.utils.currency import format_currency
from invoicedash.utils.logs import logger
from invoicedash.utils.pagination import page_count, page_offset

log = logger(__name__)


@contextmanager
def data_access(message: str) -> Iterator[None]:
    """Log driver errors and re-raise them as DataAccessError(message).

    The driver error goes to the log only; the traceback is logged at DEBUG.
    """
    try:
        yield
    except SQLAlchemyError as e:
        log.error("Database Error: %s %s: %s", message, type(e).__name__, e)
        log.debug("Database Error traceback", exc_info=True)
        raise errors.DataAccessError(message) from e


def _or_zero(value: Optional[Union[int, Decimal]]) -> Union[int, Decimal]:
    return 0 if value is None else value


class ReportingService:
    """Service for dashboard and search queries."""

    def __init__(self, db: Database):
        """Initialize reporting service.

        Args:
            db: Database instance
        """
        self.db = db

    def fetch_revenue(self) -> list[Revenue]:
        """Fetch all monthly revenue rows."""
        with data_access(errors.FETCH_REVENUE_FAILED):
            return self.db.list_revenue()

    def fetch_latest_invoices(self) -> list[LatestInvoice]:
        """Fetch the five most recent invoices with formatted amounts."""
        with data_access(errors.FETCH_LATEST_INVOICES_FAILED):
            rows = self.db.list_latest_invoices(LATEST_INVOICES_LIMIT)

        return [
            LatestInvoice(
                id=row.id,
                amount=format_currency(row.amount),
                name=row.name,
                email=row.email,
                image_url=row.image_url,
            )
            for row in rows
        ]

    def fetch_card_summary(self) -> CardSummary:
        """Fetch dashboard card figures.

        The invoice count, customer count and status totals are independent
        queries, so they are issued in parallel and joined before combining.
        """
        with data_access(errors.FETCH_CARD_DATA_FAILED):
            with ThreadPoolExecutor(max_workers=3) as executor:
                invoice_count = executor.submit(self.db.count_invoices)
                customer_count = executor.submit(self.db.count_customers)
                totals = executor.submit(self.db.sum_invoice_amounts_by_status)
                results = (invoice_count.result(), customer_count.result(), totals.result())

        number_of_invoices, number_of_customers, invoice_totals = results
        return CardSummary(
            number_of_customers=int(_or_zero(number_of_customers)),
            number_of_invoices=int(_or_zero(number_of_invoices)),
            total_paid_invoices=format_currency(_or_zero(invoice_totals.paid)),
            total_pending_invoices=format_currency(_or_zero(invoice_totals.pending)),
        )

    def fetch_filtered_invoices(self, query: str, current_page: int) -> list[InvoiceSearchResult]:
        """Fetch one page of invoices matching the search text.

        Args:
            query: Case-insensitive text matched against customer name and
                email, invoice amount, date and status. Empty matches all.
            current_page: 1-based page number

        Returns:
            At most ITEMS_PER_PAGE invoices, newest first

        Raises:
            ValidationError: If current_page is below 1
            DataAccessError: If the query fails
        """
        if current_page < 1:
            raise errors.ValidationError(errors.invalid_page(current_page))

        offset = page_offset(current_page, ITEMS_PER_PAGE)
        log.debug("Searching invoices for %r (page %d)", query, current_page)
        with data_access(errors.FETCH_INVOICES_FAILED):
            return self.db.search_invoices(query, limit=ITEMS_PER_PAGE, offset=offset)

    def fetch_invoice_pages(self, query: str) -> int:
        """Return the number of result pages for the search text."""
        with data_access(errors.FETCH_INVOICE_PAGES_FAILED):
            count = self.db.count_matching_invoices(query)
        return page_count(int(_or_zero(count)), ITEMS_PER_PAGE)

    def fetch_invoice_by_id(self, invoice_id: Union[str, UUID]) -> Optional[InvoiceForm]:
        """Fetch one invoice with its amount converted from cents.

        Returns None when no invoice has this id, including when the id is
        not a valid UUID.
        """
        if not isinstance(invoice_id, UUID):
            try:
                invoice_id = UUID(str(invoice_id))
            except ValueError:
                log.debug("Invoice id %r is not a UUID", invoice_id)
                return None

        with data_access(errors.FETCH_INVOICE_FAILED):
            invoice = self.db.get_invoice(invoice_id)

        if invoice is None:
            return None

        return InvoiceForm(
            id=invoice.id,
            customer_id=invoice.customer_id,
            amount=(Decimal(invoice.amount) / 100).quantize(Decimal("0.01")),
            status=invoice.status,
        )

    def fetch_all_customers(self) -> list[CustomerField]:
        """Fetch id and name of every customer, ordered by name."""
        with data_access(errors.FETCH_ALL_CUSTOMERS_FAILED):
            return self.db.list_customer_fields()

    def fetch_filtered_customers(self, query: str) -> list[CustomerSummary]:
        """Fetch customers matching name or email, with formatted invoice totals."""
        with data_access(errors.FETCH_CUSTOMER_TABLE_FAILED):
            rows = self.db.search_customer_summaries(query)

        return [
            CustomerSummary(
                id=row.id,
                name=row.name,
                email=row.email,
                image_url=row.image_url,
                total_invoices=int(_or_zero(row.total_invoices)),
                total_pending=format_currency(_or_zero(row.total_pending)),
                total_paid=format_currency(_or_zero(row.total_paid)),
            )
            for row in rows
        ]
