"""Mapper functions to convert SQLAlchemy models into domain entities."""

from datetime import datetime, UTC
from decimal import Decimal

from ledgerapi.domain import entities as domain
from ledgerapi.database.models import (
    User as ORMUser,
    Transaction as ORMTransaction,
)


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on the way back; timestamps are always written in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        email=orm_user.email,
        password_hash=orm_user.password_hash,
        created_at=_as_utc(orm_user.created_at),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        user_id=orm_transaction.user_id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        category=orm_transaction.category,
        amount=Decimal(orm_transaction.amount),
        type=orm_transaction.type,
        created_at=_as_utc(orm_transaction.created_at),
    )
