"""Placeholder data for a demo database."""

from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError

from invoicedash.database.base import Database
from invoicedash.domain import errors
from invoicedash.domain.entities import Customer, Invoice, Revenue
from invoicedash.domain.reporting import data_access
from invoicedash.utils.date_parser import parse_date
from invoicedash.utils.logs import logger

log = logger(__name__)

# (id, name, email, image_url)
PLACEHOLDER_CUSTOMERS = [
    ("d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", "Evil Rabbit", "evil@rabbit.com", "/customers/evil-rabbit.png"),
    ("3958dc9e-712f-4377-85e9-fec4b6a6442a", "Delba de Oliveira", "delba@oliveira.com", "/customers/delba-de-oliveira.png"),
    ("3958dc9e-742f-4377-85e9-fec4b6a6442a", "Lee Robinson", "lee@robinson.com", "/customers/lee-robinson.png"),
    ("76d65c26-f784-44a2-ac19-586678f7c2f2", "Michael Novotny", "michael@novotny.com", "/customers/michael-novotny.png"),
    ("cc27c14a-0acf-4f4a-a6c9-d45682c144b9", "Amy Burns", "amy@burns.com", "/customers/amy-burns.png"),
    ("13d07535-c59e-4157-a011-f8d2ef4e0cbb", "Balazs Orban", "balazs@orban.com", "/customers/balazs-orban.png"),
]

# (customer index, amount in cents, status, date)
PLACEHOLDER_INVOICES = [
    (0, 15795, "pending", "2022-12-06"),
    (1, 20348, "pending", "2022-11-14"),
    (4, 3040, "paid", "2022-10-29"),
    (3, 44800, "paid", "2023-09-10"),
    (5, 34577, "pending", "2023-08-05"),
    (2, 54246, "pending", "2023-07-16"),
    (0, 666, "pending", "2023-06-27"),
    (3, 32545, "paid", "2023-06-09"),
    (4, 1250, "paid", "2023-06-17"),
    (5, 8546, "paid", "2023-06-07"),
    (1, 500, "paid", "2023-08-19"),
    (5, 8945, "paid", "2023-06-03"),
    (2, 1000, "paid", "2022-06-05"),
]

PLACEHOLDER_REVENUE = [
    ("Jan", 2000),
    ("Feb", 1800),
    ("Mar", 2200),
    ("Apr", 2500),
    ("May", 2300),
    ("Jun", 3200),
    ("Jul", 3500),
    ("Aug", 3700),
    ("Sep", 2500),
    ("Oct", 2800),
    ("Nov", 3000),
    ("Dec", 4800),
]


def placeholder_customers() -> list[Customer]:
    return [
        Customer(id=UUID(customer_id), name=name, email=email, image_url=image_url)
        for customer_id, name, email, image_url in PLACEHOLDER_CUSTOMERS
    ]


def placeholder_invoices(customers: list[Customer]) -> list[Invoice]:
    return [
        Invoice(
            id=uuid4(),
            customer_id=customers[customer_index].id,
            amount=amount,
            date=parse_date(invoice_date),
            status=status,
        )
        for customer_index, amount, status, invoice_date in PLACEHOLDER_INVOICES
    ]


def placeholder_revenue() -> list[Revenue]:
    return [Revenue(month=month, revenue=revenue) for month, revenue in PLACEHOLDER_REVENUE]


def seed_database(db: Database) -> dict[str, int]:
    """Insert the placeholder customers, invoices and revenue.

    All rows are written in one transaction, so a clash with existing rows
    leaves the database unchanged.

    Returns:
        Number of rows created per table

    Raises:
        ConflictError: If any placeholder row clashes with an existing one
        DataAccessError: If the insert fails for any other reason
    """
    customers = placeholder_customers()
    invoices = placeholder_invoices(customers)
    revenue = placeholder_revenue()

    with data_access(errors.SEED_FAILED):
        try:
            db.seed(customers=customers, invoices=invoices, revenue=revenue)
        except IntegrityError as e:
            log.warning("Seed rejected by the database: %s", e.orig)
            raise errors.ConflictError(errors.SEED_CONFLICT) from e

    log.info("Seeded %d customers, %d invoices, %d revenue rows", len(customers), len(invoices), len(revenue))
    return {
        "customers": len(customers),
        "invoices": len(invoices),
        "revenue": len(revenue),
    }
