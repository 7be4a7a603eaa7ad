"""Shared pytest fixtures for invoicedash tests."""

import tempfile
import os
from datetime import date
import pytest

from invoicedash.database.factories import create_sqlite_database
from invoicedash.domain.reporting import ReportingService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def reporting_service(temp_db):
    """Create a ReportingService with a temporary database."""
    return ReportingService(temp_db)


@pytest.fixture
def alice(temp_db):
    """Create customer Alice with one paid invoice of $1,500.00."""
    customer_id = temp_db.create_customer(
        name="Alice", email="alice@example.com", image_url="/customers/alice.png"
    )
    invoice_id = temp_db.create_invoice(
        customer_id=customer_id, amount=150000, date=date(2023, 5, 1), status="paid"
    )
    return {"customer_id": customer_id, "invoice_id": invoice_id}


@pytest.fixture
def sample_data(temp_db):
    """Create two customers with a mix of paid and pending invoices."""
    bob = temp_db.create_customer(name="Bob Stone", email="bob@stone.io", image_url="/customers/bob.png")
    carol = temp_db.create_customer(name="Carol Reyes", email="carol@reyes.dev", image_url="/customers/carol.png")
    dave = temp_db.create_customer(name="Dave Ng", email="dave@ng.net", image_url="/customers/dave.png")

    invoices = {
        "bob_paid": temp_db.create_invoice(bob, 20000, date(2023, 1, 10), "paid"),
        "bob_pending": temp_db.create_invoice(bob, 5050, date(2023, 3, 2), "pending"),
        "carol_pending": temp_db.create_invoice(carol, 77700, date(2023, 2, 14), "pending"),
        "carol_paid": temp_db.create_invoice(carol, 1234, date(2022, 12, 24), "paid"),
    }
    return {"bob": bob, "carol": carol, "dave": dave, "invoices": invoices}


@pytest.fixture
def thirteen_invoices(temp_db):
    """Create one customer with 13 pending invoices on consecutive days."""
    customer_id = temp_db.create_customer(
        name="Erin Park", email="erin@park.org", image_url="/customers/erin.png"
    )
    for day in range(1, 14):
        temp_db.create_invoice(customer_id, 1000 + day, date(2023, 4, day), "pending")
    return customer_id


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
