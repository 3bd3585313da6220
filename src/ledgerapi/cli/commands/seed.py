"""Load demo users and transactions."""

import random
from datetime import date, timedelta
from decimal import Decimal

import click

from ledgerapi.cli.user_resolution import account_service_or_exit
from ledgerapi.domain.entities import TransactionType
from ledgerapi.domain.errors import ConflictError
from ledgerapi.domain.ledger import LedgerService

# (email, password, [(date, description, category, amount, type)])
DEMO_ACCOUNTS = [
    (
        "test@example.com",
        "password123",
        [
            ("2025-09-01", "Stripe Payment", "Revenue", "1200.00", "income"),
            ("2025-09-03", "Office Supplies", "Expense", "-150.00", "expense"),
            ("2025-09-05", "Consulting Fee", "Revenue", "3000.00", "income"),
            ("2025-09-07", "Software Subscription", "Expense", "-99.00", "expense"),
        ],
    ),
    (
        "sarah@example.com",
        "secret456",
        [
            ("2025-09-01", "Freelance Payment", "Revenue", "2000.00", "income"),
            ("2025-09-02", "Laptop Purchase", "Expense", "-1200.00", "expense"),
            ("2025-09-05", "Dinner with Client", "Expense", "-85.00", "expense"),
            ("2025-09-07", "Project Bonus", "Revenue", "500.00", "income"),
        ],
    ),
    (
        "david@example.com",
        "mypassword",
        [
            ("2025-09-01", "Consulting Income", "Revenue", "3500.00", "income"),
            ("2025-09-04", "Coworking Rent", "Expense", "-300.00", "expense"),
            ("2025-09-06", "Subscription Service", "Expense", "-49.99", "expense"),
        ],
    ),
    (
        "emma@example.com",
        "letmein",
        [
            ("2025-09-02", "Design Project", "Revenue", "1500.00", "income"),
            ("2025-09-03", "Coffee Meeting", "Expense", "-15.00", "expense"),
            ("2025-09-05", "Software License", "Expense", "-250.00", "expense"),
            ("2025-09-07", "New Client Retainer", "Revenue", "1000.00", "income"),
        ],
    ),
]

BULK_DESCRIPTIONS = [
    "Stripe Payment",
    "Client Invoice",
    "Office Supplies",
    "Subscription Service",
    "Misc Transaction",
]
BULK_CATEGORIES = ["Revenue", "Expense", "Operations", "Other"]
BULK_WINDOW_DAYS = 180


def bulk_rows(count: int, rng: random.Random, today: date) -> list[tuple]:
    """Generate random transactions dated within the last 180 days."""
    rows = []
    for _ in range(count):
        txn_type = rng.choice(TransactionType.ALL)
        magnitude = Decimal(rng.randint(100, 500_000)) / 100
        amount = magnitude if txn_type == TransactionType.INCOME else -magnitude
        rows.append(
            (
                today - timedelta(days=rng.randrange(BULK_WINDOW_DAYS)),
                rng.choice(BULK_DESCRIPTIONS),
                rng.choice(BULK_CATEGORIES),
                amount,
                txn_type,
            )
        )
    return rows


@click.command("seed")
@click.option(
    "--bulk",
    type=click.IntRange(min=0),
    default=0,
    help="Also add this many random transactions spread over the demo users",
)
@click.option("--random-seed", type=int, help="Seed for reproducible bulk data")
@click.pass_context
def seed(ctx, bulk: int, random_seed: int | None):
    """Load the demo users and their transactions.

    Users that already exist are left untouched, so running it twice is safe.
    """
    accounts = account_service_or_exit(ctx)
    ledger = LedgerService(ctx.obj["db"])

    user_ids = []
    created = 0
    for email, password, transactions in DEMO_ACCOUNTS:
        try:
            user = accounts.signup(email=email, password=password)
        except ConflictError:
            click.echo(f"Skipping {email}: already exists")
            existing = accounts.get_user_by_email(email)
            user_ids.append(existing.id)
            continue

        for txn_date, description, category, amount, txn_type in transactions:
            ledger.add_transaction(
                user_id=user.id,
                date=txn_date,
                amount=Decimal(amount),
                type=txn_type,
                description=description,
                category=category,
            )
        user_ids.append(user.id)
        created += 1
        click.echo(f"Created {email} with {len(transactions)} transactions")

    if bulk:
        rng = random.Random(random_seed)
        for txn_date, description, category, amount, txn_type in bulk_rows(bulk, rng, date.today()):
            ledger.add_transaction(
                user_id=rng.choice(user_ids),
                date=txn_date,
                amount=amount,
                type=txn_type,
                description=description,
                category=category,
            )
        click.echo(f"Added {bulk} random transactions")

    click.echo(f"Seeded {created} users.")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
