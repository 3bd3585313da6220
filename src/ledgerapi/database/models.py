"""SQLAlchemy models for ledgerapi database."""

from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Index,
    Numeric,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class User(Base):
    """Registered user model."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(254), unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    transactions = relationship("Transaction", back_populates="user", cascade="all, delete-orphan")


class Transaction(Base):
    """Ledger transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    category = Column(String, nullable=True)
    amount = Column(Numeric(14, 2), nullable=False)
    type = Column(String(16), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_transactions_type"),
        Index("idx_transactions_user_date", "user_id", date.desc()),
    )

    user = relationship("User", back_populates="transactions")


def create_db_engine(database_url: str) -> Engine:
    """Create an engine, enabling foreign keys for SQLite."""
    connect_args = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        # Sessions are opened per operation from request threads
        connect_args["check_same_thread"] = False

    engine = create_engine(database_url, echo=False, connect_args=connect_args)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine, expire_on_commit=False)
