"""Email and password input checks."""

import re

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 254
MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes and refuses anything longer
MAX_PASSWORD_BYTES = 72


def normalize_email(email: str) -> str:
    """Return the canonical form used for storage and lookup."""
    return email.strip().lower()


def is_valid_email(email: object) -> bool:
    """Check that ``email`` looks like ``local@domain.tld``."""
    if not isinstance(email, str):
        return False
    email = email.strip()
    return len(email) <= MAX_EMAIL_LENGTH and EMAIL_PATTERN.match(email) is not None


def is_valid_password(password: object) -> bool:
    """Check password length bounds."""
    if not isinstance(password, str):
        return False
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES
    )
