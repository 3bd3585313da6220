"""Database layer for ledgerapi application."""

from ledgerapi.database.base import Database
from ledgerapi.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
