"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as rows that already exist."""


class DataAccessError(DomainError):
    """A database operation failed.

    The message is safe to show to users. The driver error that caused the
    failure is kept as ``__cause__`` and never included in the message.
    """


FETCH_REVENUE_FAILED = "Failed to fetch revenue data."
FETCH_LATEST_INVOICES_FAILED = "Failed to fetch the latest invoices."
FETCH_CARD_DATA_FAILED = "Failed to fetch card data."
FETCH_INVOICES_FAILED = "Failed to fetch invoices."
FETCH_INVOICE_PAGES_FAILED = "Failed to fetch total number of invoices."
FETCH_INVOICE_FAILED = "Failed to fetch invoice."
FETCH_ALL_CUSTOMERS_FAILED = "Failed to fetch all customers."
FETCH_CUSTOMER_TABLE_FAILED = "Failed to fetch customer table."
OPEN_DATABASE_FAILED = "Failed to open the database."
SEED_FAILED = "Failed to load placeholder data."
SEED_CONFLICT = "Placeholder data clashes with existing rows; nothing was loaded."


def invoice_not_found(invoice_id: str) -> str:
    """Return message for missing invoice."""
    return f"Invoice {invoice_id} not found"


def invalid_page(page: int) -> str:
    """Return message for a page number below 1."""
    return f"Page must be 1 or greater, got {page}"
