"""Database factory functions for creating database instances."""

import os
from typing import Optional

from ledgerapi.config import default_database_path, sqlite_url
from ledgerapi.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks LEDGERAPI_DB_PATH
            environment variable, then defaults to ~/.ledgerapi/ledgerapi.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get("LEDGERAPI_DB_PATH")

    if database_path is None:
        database_path = default_database_path()

    return SQLAlchemyDatabase(sqlite_url(database_path))


def create_database(database_url: str) -> SQLAlchemyDatabase:
    """Create a database instance for any SQLAlchemy URL."""
    return SQLAlchemyDatabase(database_url)
