"""Per-application service container."""

from dataclasses import dataclass

from flask import current_app, g

from ledgerapi.config import Settings
from ledgerapi.database.base import Database
from ledgerapi.domain.account import AccountService
from ledgerapi.domain.entities import TokenClaims
from ledgerapi.domain.ledger import LedgerService

EXTENSION_KEY = "ledgerapi"


@dataclass(frozen=True)
class Services:
    """Services shared by every request of one application."""

    settings: Settings
    db: Database
    accounts: AccountService
    ledger: LedgerService


def get_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]


def current_identity() -> TokenClaims:
    """Return the verified claims of the current request."""
    return g.identity
