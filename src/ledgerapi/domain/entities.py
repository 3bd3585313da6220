"""Domain model entities for ledgerapi.

These are pure data classes representing business concepts, independent of
database schema. Services and the HTTP layer only ever see these, never the
SQLAlchemy models.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from typing import Any, Optional


class TransactionType:
    """Allowed values for ``Transaction.type``."""

    INCOME = "income"
    EXPENSE = "expense"

    ALL = (INCOME, EXPENSE)


@dataclass(frozen=True)
class User:
    """Registered user domain entity."""

    id: int
    email: str
    password_hash: str
    created_at: datetime

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"


@dataclass(frozen=True)
class Transaction:
    """Ledger transaction domain entity."""

    id: int
    user_id: int
    date: date
    description: Optional[str]
    category: Optional[str]
    amount: Decimal
    type: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "date": self.date.isoformat(),
            "description": self.description,
            "category": self.category,
            "amount": float(self.amount),
            "type": self.type,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity carried by a bearer token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class TransactionPage:
    """One page of a user's ledger plus the pagination echo."""

    transactions: list[Transaction]
    limit: int
    offset: int

    @property
    def count(self) -> int:
        return len(self.transactions)


@dataclass(frozen=True)
class LedgerSummary:
    """Aggregate figures over a user's ledger."""

    total_income: Decimal
    total_expenses: Decimal
    transaction_count: int
    monthly_growth: Optional[float] = None

    @property
    def net_change(self) -> Decimal:
        return self.total_income - self.total_expenses
