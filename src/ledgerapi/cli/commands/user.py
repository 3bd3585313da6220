"""User management commands."""

import click

from ledgerapi.cli.error_handling import handle_domain_error
from ledgerapi.cli.user_resolution import account_service_or_exit
from ledgerapi.domain.errors import DomainError


@click.group("user")
def user_group():
    """Manage user accounts."""
    pass


@user_group.command("create")
@click.argument("email")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password (prompted when omitted)",
)
@click.pass_context
def create_user(ctx, email: str, password: str):
    """Create a user account."""
    service = account_service_or_exit(ctx)
    try:
        user = service.signup(email=email, password=password)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created user '{user.email}' (ID: {user.id})")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group)
