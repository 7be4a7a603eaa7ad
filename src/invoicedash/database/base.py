"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date
from uuid import UUID, uuid4

# Import entities directly to avoid circular import through domain/__init__.py
from invoicedash.domain.entities import (
    Customer,
    CustomerField,
    CustomerSummaryRow,
    Invoice,
    InvoiceSearchResult,
    InvoiceTotals,
    LatestInvoiceRow,
    Revenue,
)


class Database(ABC):
    """Abstract database interface for invoicedash.

    Amounts are returned in cents exactly as stored; formatting is left to
    the reporting service.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create missing tables)."""
        pass

    # Write operations, used for seeding
    @abstractmethod
    def seed(
        self,
        customers: Sequence[Customer] = (),
        invoices: Sequence[Invoice] = (),
        revenue: Sequence[Revenue] = (),
    ) -> None:
        """Insert customers, invoices and revenue rows in a single transaction.

        Either every row is written or none is.
        """
        pass

    def create_customer(self, name: str, email: str, image_url: str, customer_id: Optional[UUID] = None) -> UUID:
        """Create a customer. Returns customer ID."""
        customer = Customer(id=customer_id or uuid4(), name=name, email=email, image_url=image_url)
        self.seed(customers=[customer])
        return customer.id

    def create_invoice(
        self,
        customer_id: UUID,
        amount: int,
        date: date,
        status: str,
        invoice_id: Optional[UUID] = None,
    ) -> UUID:
        """Create an invoice with amount in cents. Returns invoice ID."""
        invoice = Invoice(id=invoice_id or uuid4(), customer_id=customer_id, amount=amount, date=date, status=status)
        self.seed(invoices=[invoice])
        return invoice.id

    def create_revenue(self, month: str, revenue: int) -> None:
        """Create a monthly revenue row."""
        self.seed(revenue=[Revenue(month=month, revenue=revenue)])

    # Revenue
    @abstractmethod
    def list_revenue(self) -> list[Revenue]:
        """List all revenue rows."""
        pass

    # Invoice operations
    @abstractmethod
    def list_latest_invoices(self, limit: int) -> list[LatestInvoiceRow]:
        """List the most recent invoices joined with their customers."""
        pass

    @abstractmethod
    def count_invoices(self) -> int:
        """Count all invoices."""
        pass

    @abstractmethod
    def sum_invoice_amounts_by_status(self) -> InvoiceTotals:
        """Sum paid and pending invoice amounts."""
        pass

    @abstractmethod
    def search_invoices(self, query: str, limit: int, offset: int) -> list[InvoiceSearchResult]:
        """Search invoices by case-insensitive substring.

        Args:
            query: Text matched against customer name, customer email,
                invoice amount, invoice date and invoice status
            limit: Maximum number of rows to return
            offset: Number of matching rows to skip
        """
        pass

    @abstractmethod
    def count_matching_invoices(self, query: str) -> int:
        """Count invoices matching the same predicate as search_invoices."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: UUID) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    # Customer operations
    @abstractmethod
    def count_customers(self) -> int:
        """Count all customers."""
        pass

    @abstractmethod
    def list_customer_fields(self) -> list[CustomerField]:
        """List id and name of all customers, ordered by name."""
        pass

    @abstractmethod
    def search_customer_summaries(self, query: str) -> list[CustomerSummaryRow]:
        """Search customers by name or email with per-customer invoice aggregates."""
        pass
