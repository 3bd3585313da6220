"""Utility functions for ledgerapi."""

from ledgerapi.utils.date_parser import parse_date, parse_optional_date
from ledgerapi.utils.amount_parser import parse_amount, parse_formatted_amount
from ledgerapi.utils.credentials import is_valid_email, is_valid_password, normalize_email

__all__ = [
    "parse_date",
    "parse_optional_date",
    "parse_amount",
    "parse_formatted_amount",
    "is_valid_email",
    "is_valid_password",
    "normalize_email",
]
