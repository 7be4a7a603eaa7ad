"""SQLAlchemy models for invoicedash database."""

import uuid

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Integer,
    String,
    Uuid,
    create_engine,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Customer(Base):
    """Customer model."""

    __tablename__ = "customer"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False)


class Invoice(Base):
    """Invoice model. Amount is stored in cents."""

    __tablename__ = "invoice"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, ForeignKey("customer.id"), nullable=False)
    amount = Column(Integer, nullable=False)
    date = Column(Date, nullable=False)
    status = Column(String(255), nullable=False)

    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid')", name="ck_invoice_status"),
    )


class Revenue(Base):
    """Monthly revenue model."""

    __tablename__ = "revenue"

    month = Column(String(4), primary_key=True)
    revenue = Column(Integer, nullable=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory bound to an engine."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """Create a SQLAlchemy engine for the given URL."""
    return create_engine(database_url, echo=False, pool_pre_ping=True, **kwargs)
