"""Date parsing utilities."""

import re
from datetime import date
from typing import Optional

from dateutil.parser import isoparser

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_parser = isoparser()


def parse_date(date_str: str) -> date:
    """Parse a calendar date in ``YYYY-MM-DD`` form.

    Only plain calendar dates are accepted. Times, week dates, relative
    phrases and impossible dates such as ``2025-02-30`` are rejected.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string is not a well-formed calendar date
    """
    if not isinstance(date_str, str):
        raise ValueError(f"Expected a date string, got {type(date_str).__name__}")

    date_str = date_str.strip()
    if not _ISO_DATE.match(date_str):
        raise ValueError(f"Could not parse date '{date_str}': expected YYYY-MM-DD")

    try:
        return _parser.parse_isodate(date_str)
    except ValueError as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_optional_date(date_str: Optional[str]) -> Optional[date]:
    """Parse a date string, treating ``None`` and blank strings as absent."""
    if date_str is None:
        return None
    if isinstance(date_str, str) and not date_str.strip():
        return None
    return parse_date(date_str)
