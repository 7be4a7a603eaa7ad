"""Tests for Database interface returning domain models."""

import threading
from datetime import date
from uuid import UUID

from sqlalchemy.dialects import postgresql, sqlite

from invoicedash.database.sqlalchemy_db import (
    contains_pattern,
    customer_search_predicate,
    invoice_search_predicate,
)
from invoicedash.domain import entities


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models with raw cents."""

    def test_create_customer_returns_uuid(self, temp_db):
        """Test that create_customer returns the new customer's UUID."""
        customer_id = temp_db.create_customer(
            name="Test Customer", email="test@example.com", image_url="/customers/test.png"
        )

        assert isinstance(customer_id, UUID)
        assert temp_db.count_customers() == 1

    def test_create_customer_with_explicit_id(self, temp_db):
        """Test that an explicit id is kept."""
        explicit = UUID("76d65c26-f784-44a2-ac19-586678f7c2f2")
        customer_id = temp_db.create_customer(
            name="Michael", email="michael@example.com", image_url="/m.png", customer_id=explicit
        )

        assert customer_id == explicit
        fields = temp_db.list_customer_fields()
        assert fields == [entities.CustomerField(id=explicit, name="Michael")]

    def test_get_invoice_returns_domain_model(self, temp_db, alice):
        """Test that get_invoice returns a domain Invoice entity in cents."""
        invoice = temp_db.get_invoice(alice["invoice_id"])

        assert isinstance(invoice, entities.Invoice)
        assert invoice.id == alice["invoice_id"]
        assert invoice.customer_id == alice["customer_id"]
        assert invoice.amount == 150000
        assert invoice.date == date(2023, 5, 1)
        assert invoice.status == "paid"

    def test_list_latest_invoices_returns_domain_models(self, temp_db, sample_data):
        """Test that list_latest_invoices returns joined rows, newest first."""
        rows = temp_db.list_latest_invoices(limit=2)

        assert len(rows) == 2
        for row in rows:
            assert isinstance(row, entities.LatestInvoiceRow)
            assert isinstance(row.amount, int)
        assert rows[0].id == sample_data["invoices"]["bob_pending"]
        assert rows[0].name == "Bob Stone"

    def test_sum_invoice_amounts_by_status(self, temp_db, sample_data):
        totals = temp_db.sum_invoice_amounts_by_status()

        assert totals == entities.InvoiceTotals(paid=21234, pending=82750)

    def test_sum_invoice_amounts_empty_is_none(self, temp_db):
        totals = temp_db.sum_invoice_amounts_by_status()

        assert totals.paid is None
        assert totals.pending is None

    def test_search_and_count_agree(self, temp_db, sample_data):
        rows = temp_db.search_invoices("carol", limit=10, offset=0)

        assert len(rows) == temp_db.count_matching_invoices("carol") == 2
        assert all(isinstance(row, entities.InvoiceSearchResult) for row in rows)

    def test_search_offset(self, temp_db, sample_data):
        rows = temp_db.search_invoices("", limit=2, offset=3)

        assert len(rows) == 1
        assert rows[0].id == sample_data["invoices"]["carol_paid"]

    def test_search_customer_summaries_returns_raw_cents(self, temp_db, sample_data):
        rows = temp_db.search_customer_summaries("bob")

        assert len(rows) == 1
        assert isinstance(rows[0], entities.CustomerSummaryRow)
        assert rows[0].total_invoices == 2
        assert rows[0].total_pending == 5050
        assert rows[0].total_paid == 20000

    def test_list_revenue_returns_domain_models(self, temp_db):
        temp_db.create_revenue("Jan", 2000)

        assert temp_db.list_revenue() == [entities.Revenue(month="Jan", revenue=2000)]

    def test_concurrent_reads(self, temp_db, sample_data):
        """Reads from several threads each use their own session."""
        results = []
        failures = []

        def read():
            try:
                results.append((temp_db.count_invoices(), temp_db.count_customers()))
            except Exception as e:  # noqa: BLE001
                failures.append(e)

        threads = [threading.Thread(target=read) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert failures == []
        assert results == [(4, 3)] * 4


def _sql(clause, dialect) -> str:
    return str(clause.compile(dialect=dialect))


def test_contains_pattern_escapes_wildcards():
    assert contains_pattern("lee") == "%lee%"
    assert contains_pattern("50%_off/") == "%50/%/_off//%"


def test_search_predicates_render_ilike_on_postgres():
    invoice_sql = _sql(invoice_search_predicate("x"), postgresql.dialect())
    customer_sql = _sql(customer_search_predicate("x"), postgresql.dialect())

    assert invoice_sql.count("ILIKE") == 5
    assert customer_sql.count("ILIKE") == 2
    assert "lower(" not in invoice_sql
    assert "ESCAPE '/'" in invoice_sql


def test_search_predicates_lowercase_on_sqlite():
    invoice_sql = _sql(invoice_search_predicate("x"), sqlite.dialect())

    assert "ILIKE" not in invoice_sql
    assert "lower(customer.name) LIKE lower(" in invoice_sql
