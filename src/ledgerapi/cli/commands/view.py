"""Transaction viewing commands."""

import click

from ledgerapi.cli.error_handling import handle_domain_error
from ledgerapi.cli.user_resolution import resolve_user_or_exit
from ledgerapi.domain.errors import DomainError
from ledgerapi.domain.ledger import LedgerService


@click.command("view")
@click.option("--email", required=True, help="Email of the user whose ledger to show")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.option("--limit", type=int, help="Page size (default 50, at most 100)")
@click.option("--offset", type=int, default=0, help="Number of transactions to skip")
@click.option("--summary", is_flag=True, help="Also print income, expense and net totals")
@click.pass_context
def view_transactions(
    ctx,
    email: str,
    start_date: str | None,
    end_date: str | None,
    limit: int | None,
    offset: int,
    summary: bool,
):
    """View one page of a user's transactions, newest first."""
    user = resolve_user_or_exit(ctx, email)
    service = LedgerService(ctx.obj["db"])

    try:
        page = service.list_transactions(
            user_id=user.id, start_date=start_date, end_date=end_date, limit=limit, offset=offset
        )
        totals = service.summarize(user.id, start_date=start_date, end_date=end_date) if summary else None
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not page.transactions:
        click.echo("No transactions found.")
    else:
        click.echo(f"\nShowing {page.count} transaction(s) (offset {page.offset}, limit {page.limit}):")
        click.echo("-" * 96)
        click.echo(
            f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>12}  {'Category':<20} {'Description':<30}"
        )
        click.echo("-" * 96)

        for txn in page.transactions:
            amount_str = f"${txn.amount:,.2f}"
            click.echo(
                f"{txn.id:<6} {str(txn.date):<12} {txn.type:<8} {amount_str:>12}  "
                f"{(txn.category or '')[:20]:<20} {(txn.description or '')[:30]:<30}"
            )

    if totals is not None:
        click.echo("")
        click.echo(f"Income:   ${totals.total_income:,.2f}")
        click.echo(f"Expenses: ${totals.total_expenses:,.2f}")
        click.echo(f"Net:      ${totals.net_change:,.2f}")


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_transactions)
