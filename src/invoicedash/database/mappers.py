"""Mapper functions to convert between domain entities, SQLAlchemy models and result rows.

This layer isolates the conversion logic, making it easy to change when
the database schema changes.
"""

from sqlalchemy.engine import Row

from invoicedash.domain import entities as domain
from invoicedash.database.models import (
    Customer as ORMCustomer,
    Invoice as ORMInvoice,
    Revenue as ORMRevenue,
)


def customer_to_orm(customer: domain.Customer) -> ORMCustomer:
    """Convert domain Customer entity to a new SQLAlchemy Customer model."""
    return ORMCustomer(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        image_url=customer.image_url,
    )


def invoice_to_orm(invoice: domain.Invoice) -> ORMInvoice:
    """Convert domain Invoice entity to a new SQLAlchemy Invoice model."""
    return ORMInvoice(
        id=invoice.id,
        customer_id=invoice.customer_id,
        amount=invoice.amount,
        date=invoice.date,
        status=invoice.status,
    )


def revenue_to_orm(revenue: domain.Revenue) -> ORMRevenue:
    """Convert domain Revenue entity to a new SQLAlchemy Revenue model."""
    return ORMRevenue(month=revenue.month, revenue=revenue.revenue)


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        customer_id=orm_invoice.customer_id,
        amount=orm_invoice.amount,
        date=orm_invoice.date,
        status=orm_invoice.status,
    )


def revenue_to_domain(orm_revenue: ORMRevenue) -> domain.Revenue:
    """Convert SQLAlchemy Revenue model to domain Revenue entity."""
    return domain.Revenue(month=orm_revenue.month, revenue=orm_revenue.revenue)


def customer_field_from_row(row: Row) -> domain.CustomerField:
    """Build a CustomerField from an (id, name) row."""
    return domain.CustomerField(id=row.id, name=row.name)


def latest_invoice_from_row(row: Row) -> domain.LatestInvoiceRow:
    """Build a LatestInvoiceRow from an invoice/customer join row."""
    return domain.LatestInvoiceRow(
        id=row.id,
        amount=row.amount,
        name=row.name,
        email=row.email,
        image_url=row.image_url,
    )


def invoice_search_result_from_row(row: Row) -> domain.InvoiceSearchResult:
    """Build an InvoiceSearchResult from an invoice/customer join row."""
    return domain.InvoiceSearchResult(
        id=row.id,
        customer_id=row.customer_id,
        amount=row.amount,
        date=row.date,
        status=row.status,
        name=row.name,
        email=row.email,
        image_url=row.image_url,
    )


def customer_summary_from_row(row: Row) -> domain.CustomerSummaryRow:
    """Build a CustomerSummaryRow from a grouped customer/invoice row."""
    return domain.CustomerSummaryRow(
        id=row.id,
        name=row.name,
        email=row.email,
        image_url=row.image_url,
        total_invoices=row.total_invoices,
        total_pending=row.total_pending,
        total_paid=row.total_paid,
    )
