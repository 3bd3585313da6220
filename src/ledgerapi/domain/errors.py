"""Shared domain error messages and error types."""

from enum import Enum
from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Requested domain entity or route does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class AuthFailure(str, Enum):
    """Reason an authentication attempt was rejected."""

    MISSING = "missing"
    INVALID = "invalid"
    EXPIRED = "expired"
    INVALID_CREDENTIALS = "invalid_credentials"


class AuthError(DomainError):
    """Authentication failed.

    ``reason`` is for logging only; responses collapse every reason into a
    single unauthorized class.
    """

    def __init__(self, message: str, reason: AuthFailure = AuthFailure.INVALID):
        super().__init__(message)
        self.reason = reason


class StoreError(DomainError):
    """Unexpected persistence failure."""


INVALID_CREDENTIALS = "Invalid credentials"
UNAUTHORIZED = "Unauthorized"


def email_already_registered(email: str) -> str:
    """Return message for duplicate signup."""
    return f"Email '{email}' is already registered"


def user_not_found(email: str) -> str:
    """Return message for missing user by email."""
    return f"User '{email}' not found"


def invalid_field(field: str, detail: str) -> str:
    """Return message for a rejected input field."""
    return f"Invalid {field}: {detail}"


def date_range_inverted(start: object, end: object) -> str:
    """Return message when a start date falls after the end date."""
    return f"startDate {start} is after endDate {end}"
