"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from invoicedash.database.sqlalchemy_db import SQLAlchemyDatabase

POSTGRES_DRIVER_SCHEME = "postgresql+psycopg"


def normalize_postgres_url(database_url: str) -> str:
    """Rewrite postgres:// and postgresql:// URLs to use the psycopg driver.

    URLs that already name a driver, or are not PostgreSQL URLs, are returned
    unchanged.
    """
    scheme, sep, rest = database_url.partition("://")
    if not sep:
        return database_url
    if scheme in ("postgres", "postgresql"):
        return f"{POSTGRES_DRIVER_SCHEME}://{rest}"
    return database_url


def postgres_connect_args(database_url: str) -> dict:
    """Return connect arguments that require TLS unless the URL sets sslmode."""
    if "sslmode=" in database_url:
        return {}
    return {"sslmode": "require"}


def create_postgres_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a PostgreSQL database instance.

    Args:
        database_url: PostgreSQL connection string. If None, reads the
            POSTGRES_URL environment variable.

    Returns:
        SQLAlchemyDatabase instance configured for PostgreSQL over TLS

    Raises:
        ValueError: If no connection string is available
    """
    if database_url is None:
        database_url = os.environ.get("POSTGRES_URL")

    if not database_url:
        raise ValueError("POSTGRES_URL is not set")

    database_url = normalize_postgres_url(database_url)
    return SQLAlchemyDatabase(database_url, connect_args=postgres_connect_args(database_url))


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks INVOICEDASH_DB_PATH
            environment variable, then defaults to ~/.invoicedash/invoicedash.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("INVOICEDASH_DB_PATH")

    if database_path is None:
        # Default to ~/.invoicedash/invoicedash.db
        home = Path.home()
        db_dir = home / ".invoicedash"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "invoicedash.db")

    database_url = f"sqlite:///{database_path}"
    # Card summary queries run on worker threads
    return SQLAlchemyDatabase(database_url, connect_args={"check_same_thread": False})


def create_database(
    database_url: Optional[str] = None, database_path: Optional[str] = None
) -> SQLAlchemyDatabase:
    """Create the configured database.

    PostgreSQL is used when a URL is given or POSTGRES_URL is set; otherwise
    a local SQLite file.
    """
    if database_url is None:
        database_url = os.environ.get("POSTGRES_URL") or None

    if database_url is not None:
        return create_postgres_database(database_url)
    return create_sqlite_database(database_path)
