"""Domain layer for ledgerapi application."""

from ledgerapi.domain.account import AccountService
from ledgerapi.domain.ledger import LedgerService
from ledgerapi.domain.passwords import PasswordHasher
from ledgerapi.domain.tokens import TokenService

__all__ = [
    "AccountService",
    "LedgerService",
    "PasswordHasher",
    "TokenService",
]
