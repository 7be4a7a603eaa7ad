"""Tests for database mappers."""

from datetime import date
from uuid import uuid4

from invoicedash.database.models import (
    Customer as ORMCustomer,
    Invoice as ORMInvoice,
    Revenue as ORMRevenue,
)
from invoicedash.database.mappers import (
    customer_to_orm,
    invoice_to_domain,
    invoice_to_orm,
    revenue_to_domain,
    revenue_to_orm,
)
from invoicedash.domain.entities import Customer, Invoice, Revenue


class TestCustomerMapper:
    """Tests for Customer mapper."""

    def test_customer_to_orm(self):
        """Test converting domain Customer to a new ORM Customer."""
        customer = Customer(
            id=uuid4(),
            name="Amy Burns",
            email="amy@burns.com",
            image_url="/customers/amy-burns.png",
        )
        orm_customer = customer_to_orm(customer)

        assert isinstance(orm_customer, ORMCustomer)
        assert orm_customer.id == customer.id
        assert orm_customer.name == "Amy Burns"
        assert orm_customer.email == "amy@burns.com"
        assert orm_customer.image_url == "/customers/amy-burns.png"


class TestInvoiceMapper:
    """Tests for Invoice mapper."""

    def test_invoice_to_domain(self):
        """Test converting ORM Invoice to domain Invoice keeps cents."""
        invoice_id = uuid4()
        customer_id = uuid4()
        orm_invoice = ORMInvoice(
            id=invoice_id,
            customer_id=customer_id,
            amount=15795,
            date=date(2022, 12, 6),
            status="pending",
        )
        domain_invoice = invoice_to_domain(orm_invoice)

        assert isinstance(domain_invoice, Invoice)
        assert domain_invoice.id == invoice_id
        assert domain_invoice.customer_id == customer_id
        assert domain_invoice.amount == 15795
        assert domain_invoice.date == date(2022, 12, 6)
        assert domain_invoice.status == "pending"

    def test_invoice_to_orm(self):
        invoice = Invoice(
            id=uuid4(), customer_id=uuid4(), amount=666, date=date(2023, 6, 27), status="pending"
        )
        orm_invoice = invoice_to_orm(invoice)

        assert isinstance(orm_invoice, ORMInvoice)
        assert orm_invoice.customer_id == invoice.customer_id
        assert orm_invoice.amount == 666
        assert orm_invoice.date == date(2023, 6, 27)


class TestRevenueMapper:
    """Tests for Revenue mapper."""

    def test_revenue_to_domain(self):
        domain_revenue = revenue_to_domain(ORMRevenue(month="Jun", revenue=3200))

        assert domain_revenue == Revenue(month="Jun", revenue=3200)

    def test_revenue_to_orm(self):
        orm_revenue = revenue_to_orm(Revenue(month="Dec", revenue=4800))

        assert isinstance(orm_revenue, ORMRevenue)
        assert (orm_revenue.month, orm_revenue.revenue) == ("Dec", 4800)
