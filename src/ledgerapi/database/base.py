"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Any
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerapi.domain.entities import User, Transaction


class Database(ABC):
    """Abstract database interface for ledgerapi.

    Implementations own the ``users`` and ``transactions`` tables and are the
    only components that write to them.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, email: str, password_hash: str) -> User:
        """Create a user.

        Raises:
            ConflictError: If a user with this email already exists
        """
        pass

    @abstractmethod
    def find_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email. Returns None when no such user exists."""
        pass

    @abstractmethod
    def count_users(self) -> int:
        """Return the number of registered users."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        user_id: int,
        date: date,
        amount: Decimal,
        type: str,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Transaction:
        """Insert a transaction for a user."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Transaction]:
        """List a user's transactions, newest date first.

        Args:
            user_id: Owner of the transactions; rows of other users are never returned
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            limit: Maximum number of rows, or None for all
            offset: Number of rows to skip
        """
        pass

    @abstractmethod
    def summarize_transactions(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> dict[str, Any]:
        """Aggregate a user's transactions.

        Returns a dictionary with ``income`` (sum of income amounts),
        ``expenses`` (sum of absolute expense amounts) and ``count``.
        """
        pass

    @abstractmethod
    def monthly_income(
        self,
        user_id: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[tuple[int, int, Decimal]]:
        """Return ``(year, month, income)`` tuples in chronological order."""
        pass
