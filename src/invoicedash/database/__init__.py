"""Database layer for invoicedash application."""

from invoicedash.database.base import Database
from invoicedash.database.factories import (
    create_database,
    create_postgres_database,
    create_sqlite_database,
)

__all__ = ["Database", "create_database", "create_postgres_database", "create_sqlite_database"]
