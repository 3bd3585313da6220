"""Add transaction command."""

import click

from ledgerapi.cli.error_handling import handle_domain_error
from ledgerapi.cli.user_resolution import resolve_user_or_exit
from ledgerapi.domain.entities import TransactionType
from ledgerapi.domain.errors import DomainError, ValidationError, invalid_field
from ledgerapi.domain.ledger import LedgerService
from ledgerapi.utils.amount_parser import parse_formatted_amount


@click.command("add")
@click.option("--email", required=True, help="Email of the user who owns the transaction")
@click.option("--date", required=True, help="Transaction date (YYYY-MM-DD)")
@click.option(
    "--amount", required=True, help="Transaction amount (e.g., 123.45, -123.45, $1,234.56 or (50.00))"
)
@click.option(
    "--type",
    "txn_type",
    required=True,
    type=click.Choice(TransactionType.ALL),
    help="Transaction type",
)
@click.option("--description", help="Transaction description")
@click.option("--category", help="Category label")
@click.pass_context
def add_transaction(
    ctx,
    email: str,
    date: str,
    amount: str,
    txn_type: str,
    description: str | None,
    category: str | None,
):
    """Add a transaction to a user's ledger.

    Examples:
        ledgerapi add --email test@example.com --date 2025-09-01 --amount 1200.00 --type income
        ledgerapi add --email test@example.com --date 2025-09-03 --amount "(150.00)" --type expense
    """
    user = resolve_user_or_exit(ctx, email)
    service = LedgerService(ctx.obj["db"])

    try:
        parsed_amount = parse_formatted_amount(amount)
    except ValueError as e:
        handle_domain_error(ctx, ValidationError(invalid_field("amount", str(e)), field="amount"))

    try:
        txn = service.add_transaction(
            user_id=user.id,
            date=date,
            amount=parsed_amount,
            type=txn_type,
            description=description,
            category=category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  User: {user.email}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: ${txn.amount:,.2f} ({txn.type})")
    if txn.description:
        click.echo(f"  Description: {txn.description}")
    if txn.category:
        click.echo(f"  Category: {txn.category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
