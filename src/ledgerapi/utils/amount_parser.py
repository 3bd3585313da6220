"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Union

MAX_DECIMAL_PLACES = 2
# Numeric(14, 2): twelve digits before the point
MAX_ABS_AMOUNT = Decimal("1e12")

_PLAIN_DECIMAL = re.compile(r"^[+-]?\d+(\.\d+)?$")


def parse_amount(amount: Union[str, int, float, Decimal]) -> Decimal:
    """Parse an amount into a Decimal.

    Accepts numbers (``int``/``float``/``Decimal``) and plain decimal strings
    such as ``"-123.45"``. The sign is preserved as given. Booleans, NaN,
    infinities, values with more than two decimal places and values of a
    trillion or more are rejected.

    Args:
        amount: Amount value

    Returns:
        Decimal amount

    Raises:
        ValueError: If the amount cannot be parsed or does not fit the ledger
    """
    if isinstance(amount, bool) or amount is None:
        raise ValueError(f"Amount must be numeric, got {amount!r}")

    if isinstance(amount, (int, Decimal)):
        value = Decimal(amount)
    elif isinstance(amount, float):
        # repr round-trips the shortest form, so 0.1 stays 0.1
        value = Decimal(repr(amount))
    elif isinstance(amount, str):
        if not _PLAIN_DECIMAL.match(amount.strip()):
            raise ValueError(f"Could not parse amount '{amount}'")
        value = Decimal(amount.strip())
    else:
        raise ValueError(f"Amount must be numeric, got {type(amount).__name__}")

    return _check_bounds(value, amount)


def parse_formatted_amount(amount_str: str) -> Decimal:
    """Parse a human-typed amount string.

    Accepts the forms people type at a terminal:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Raises:
        ValueError: If the amount cannot be parsed or does not fit the ledger
    """
    if not isinstance(amount_str, str) or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        is_negative = True
        cleaned = cleaned[1:-1]

    cleaned = re.sub(r"[$€£¥]", "", cleaned)
    cleaned = cleaned.replace(",", "").strip()

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return _check_bounds(-value if is_negative else value, amount_str)


def _check_bounds(value: Decimal, raw: object) -> Decimal:
    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got {raw!r}")

    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -MAX_DECIMAL_PLACES:
        raise ValueError(f"Amount {raw!r} has more than {MAX_DECIMAL_PLACES} decimal places")

    if abs(value) >= MAX_ABS_AMOUNT:
        raise ValueError(f"Amount must be less than {MAX_ABS_AMOUNT:,.0f} in magnitude")
    return value
