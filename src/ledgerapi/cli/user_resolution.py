"""CLI helpers for resolving users and building services."""

import click

from ledgerapi.cli.error_handling import handle_domain_error
from ledgerapi.config import ConfigurationError, load_bcrypt_rounds
from ledgerapi.domain.account import AccountService
from ledgerapi.domain.entities import User
from ledgerapi.domain.errors import user_not_found
from ledgerapi.domain.passwords import PasswordHasher
from ledgerapi.utils.credentials import normalize_email


def account_service_or_exit(ctx: click.Context) -> AccountService:
    """Build an AccountService for commands that never issue tokens."""
    try:
        rounds = load_bcrypt_rounds()
    except ConfigurationError as e:
        handle_domain_error(ctx, e)
    return AccountService(ctx.obj["db"], PasswordHasher(rounds))


def resolve_user_or_exit(ctx: click.Context, email: str) -> User:
    """Look up a user by email or exit with an error."""
    user = ctx.obj["db"].find_user_by_email(normalize_email(email))
    if user is None:
        click.echo(f"Error: {user_not_found(email)}", err=True)
        ctx.exit(1)
    return user
