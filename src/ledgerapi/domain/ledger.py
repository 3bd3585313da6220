"""Ledger domain service."""

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

from ledgerapi.config import DEFAULT_MAX_PAGE_SIZE, DEFAULT_PAGE_SIZE
from ledgerapi.domain.entities import (
    LedgerSummary,
    Transaction as TransactionEntity,
    TransactionPage,
    TransactionType,
)
from ledgerapi.domain.errors import ValidationError, date_range_inverted, invalid_field
from ledgerapi.logging_setup import get_logger
from ledgerapi.utils.amount_parser import parse_amount
from ledgerapi.utils.date_parser import parse_date, parse_optional_date

if TYPE_CHECKING:
    from ledgerapi.database.base import Database

logger = get_logger("ledgerapi.domain.ledger")

MAX_TEXT_LENGTH = 500
# Largest OFFSET a 64-bit SQL integer can carry
MAX_OFFSET = 2**63 - 1


def _parse_date_field(value: Any, field: str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_date(value)
    except ValueError as e:
        raise ValidationError(invalid_field(field, str(e)), field=field)


def _parse_optional_date_field(value: Any, field: str) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    try:
        return parse_optional_date(value)
    except ValueError as e:
        raise ValidationError(invalid_field(field, str(e)), field=field)


def _parse_text_field(value: Any, field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(invalid_field(field, "must be a string"), field=field)
    value = value.strip()
    if len(value) > MAX_TEXT_LENGTH:
        raise ValidationError(
            invalid_field(field, f"must be at most {MAX_TEXT_LENGTH} characters"), field=field
        )
    return value or None


def _parse_int_field(value: Any, field: str, default: int) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise ValidationError(invalid_field(field, "must be an integer"), field=field)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(invalid_field(field, "must be an integer"), field=field)


def resolve_date_range(
    start_date: Any = None, end_date: Any = None
) -> tuple[Optional[date], Optional[date]]:
    """Parse an optional inclusive date range.

    Raises:
        ValidationError: If either date is malformed or start is after end
    """
    start = _parse_optional_date_field(start_date, "startDate")
    end = _parse_optional_date_field(end_date, "endDate")
    if start is not None and end is not None and start > end:
        raise ValidationError(date_range_inverted(start, end), field="startDate")
    return start, end


class LedgerService:
    """Service for recording and reading a user's transactions.

    All input validation happens here, before the database is touched.
    """

    def __init__(
        self,
        db: "Database",
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """Initialize ledger service.

        Args:
            db: Database instance
            max_page_size: Ceiling that larger ``limit`` values are clamped to
            default_page_size: Page size used when no ``limit`` is given
        """
        self.db = db
        self.max_page_size = max_page_size
        self.default_page_size = min(default_page_size, max_page_size)

    def add_transaction(
        self,
        user_id: int,
        date: Any,
        amount: Any,
        type: Any,
        description: Any = None,
        category: Any = None,
    ) -> TransactionEntity:
        """Record a transaction for a user.

        The amount's sign is stored exactly as supplied; it is not reconciled
        with ``type``.

        Args:
            user_id: Owner, taken from verified token claims
            date: Calendar date (``YYYY-MM-DD`` string or ``date``)
            amount: Numeric amount
            type: ``income`` or ``expense``
            description: Optional free text
            category: Optional free text

        Returns:
            The stored transaction

        Raises:
            ValidationError: If any field is malformed
        """
        txn_date = _parse_date_field(date, "date")

        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            raise ValidationError(invalid_field("amount", str(e)), field="amount")

        if type not in TransactionType.ALL:
            raise ValidationError(
                invalid_field("type", f"must be one of {', '.join(TransactionType.ALL)}"),
                field="type",
            )

        txn = self.db.create_transaction(
            user_id=user_id,
            date=txn_date,
            amount=txn_amount,
            type=type,
            description=_parse_text_field(description, "description"),
            category=_parse_text_field(category, "category"),
        )
        logger.info("User %s added transaction %s", user_id, txn.id)
        return txn

    def list_transactions(
        self,
        user_id: int,
        start_date: Any = None,
        end_date: Any = None,
        limit: Any = None,
        offset: Any = None,
    ) -> TransactionPage:
        """Return one page of a user's transactions, newest date first.

        Args:
            user_id: Owner, taken from verified token claims
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
            limit: Page size; clamped to the configured ceiling
            offset: Rows to skip; must not be negative

        Raises:
            ValidationError: On malformed dates, an inverted range, a
                non-positive limit or an offset outside 0..2**63-1
        """
        start, end = resolve_date_range(start_date, end_date)

        page_size = _parse_int_field(limit, "limit", self.default_page_size)
        if page_size < 1:
            raise ValidationError(invalid_field("limit", "must be at least 1"), field="limit")
        page_size = min(page_size, self.max_page_size)

        skip = _parse_int_field(offset, "offset", 0)
        if skip < 0:
            raise ValidationError(invalid_field("offset", "must not be negative"), field="offset")
        if skip > MAX_OFFSET:
            raise ValidationError(invalid_field("offset", f"must be at most {MAX_OFFSET}"), field="offset")

        transactions = self.db.list_transactions(
            user_id=user_id, start_date=start, end_date=end, limit=page_size, offset=skip
        )
        return TransactionPage(transactions=transactions, limit=page_size, offset=skip)

    def summarize(self, user_id: int, start_date: Any = None, end_date: Any = None) -> LedgerSummary:
        """Aggregate a user's ledger.

        Expense totals use magnitudes, so ``-150`` and ``150`` typed as
        ``expense`` count the same.
        """
        start, end = resolve_date_range(start_date, end_date)
        totals = self.db.summarize_transactions(user_id=user_id, start_date=start, end_date=end)
        months = self.db.monthly_income(user_id=user_id, start_date=start, end_date=end)

        return LedgerSummary(
            total_income=totals["income"],
            total_expenses=totals["expenses"],
            transaction_count=totals["count"],
            monthly_growth=_monthly_growth(months),
        )


def _monthly_growth(months: list[tuple[int, int, Decimal]]) -> Optional[float]:
    """Percent change in income between the two most recent months with income."""
    if len(months) < 2:
        return None
    previous = months[-2][2]
    latest = months[-1][2]
    if previous == 0:
        return None
    growth = (latest - previous) / abs(previous) * 100
    return float(growth.quantize(Decimal("0.01")))
