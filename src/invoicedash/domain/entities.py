"""Domain model entities for invoicedash.

These are pure data classes representing the reporting records, independent
of the database schema. Raw records carry amounts as integer cents; the
display records produced by the reporting service carry formatted strings.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5

INVOICE_STATUS_PENDING = "pending"
INVOICE_STATUS_PAID = "paid"
INVOICE_STATUSES = (INVOICE_STATUS_PENDING, INVOICE_STATUS_PAID)


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: UUID
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class Invoice:
    """Invoice domain entity. Amount is in cents."""

    id: UUID
    customer_id: UUID
    amount: int
    date: date
    status: str


@dataclass(frozen=True)
class Revenue:
    """Pre-aggregated revenue for one month."""

    month: str
    revenue: int


@dataclass(frozen=True)
class CustomerField:
    """Customer id and name, used to populate selection lists."""

    id: UUID
    name: str


@dataclass(frozen=True)
class LatestInvoiceRow:
    """Recent invoice joined with customer identity fields. Amount is in cents."""

    id: UUID
    amount: int
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class LatestInvoice:
    """Recent invoice ready for display."""

    id: UUID
    amount: str
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class InvoiceSearchResult:
    """Invoice joined with the customer it belongs to. Amount is in cents."""

    id: UUID
    customer_id: UUID
    amount: int
    date: date
    status: str
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class InvoiceForm:
    """Invoice as loaded for editing. Amount is in major currency units."""

    id: UUID
    customer_id: UUID
    amount: Decimal
    status: str


@dataclass(frozen=True)
class InvoiceTotals:
    """Raw invoice aggregates. Sums are None when there are no invoices."""

    paid: Optional[int]
    pending: Optional[int]


@dataclass(frozen=True)
class CustomerSummaryRow:
    """Customer with raw invoice aggregates in cents."""

    id: UUID
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: Optional[int]
    total_paid: Optional[int]


@dataclass(frozen=True)
class CustomerSummary:
    """Customer with invoice aggregates ready for display."""

    id: UUID
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


@dataclass(frozen=True)
class CardSummary:
    """Dashboard card figures."""

    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str
