"""Tests for the command line interface."""

from decimal import Decimal

import pytest

from ledgerapi.cli.main import cli


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    monkeypatch.setenv("LEDGERAPI_BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("LEDGERAPI_DATABASE_URL", raising=False)


def run(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_init_db(cli_runner, temp_db):
    result = run(cli_runner, temp_db, "init-db")

    assert result.exit_code == 0
    assert "Database ready (0 users)." in result.output


def test_user_create(cli_runner, temp_db):
    result = run(cli_runner, temp_db, "user", "create", "Alice@Example.com", "--password", "password123")

    assert result.exit_code == 0
    assert "Created user 'alice@example.com'" in result.output
    assert temp_db.find_user_by_email("alice@example.com") is not None


def test_user_create_prompts_for_password(cli_runner, temp_db):
    result = run(
        cli_runner, temp_db, "user", "create", "alice@example.com", input="password123\npassword123\n"
    )

    assert result.exit_code == 0
    assert temp_db.count_users() == 1


def test_user_create_duplicate_fails(cli_runner, temp_db):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    result = run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    assert result.exit_code == 1
    assert "already registered" in result.output
    assert temp_db.count_users() == 1


def test_user_create_invalid_password(cli_runner, temp_db):
    result = run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "123")

    assert result.exit_code == 1
    assert "Invalid email or password" in result.output


def test_add_and_view(cli_runner, temp_db):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    for args in (
        ["--date", "2025-09-01", "--amount", "1200.00", "--type", "income", "--description", "Stripe Payment"],
        ["--date", "2025-09-03", "--amount", "-150", "--type", "expense", "--category", "Expense"],
    ):
        result = run(cli_runner, temp_db, "add", "--email", "alice@example.com", *args)
        assert result.exit_code == 0
        assert "Created transaction" in result.output

    result = run(cli_runner, temp_db, "view", "--email", "alice@example.com", "--summary")

    assert result.exit_code == 0
    assert "Showing 2 transaction(s)" in result.output
    lines = [line for line in result.output.splitlines() if "2025-09-0" in line]
    assert "2025-09-03" in lines[0]
    assert "2025-09-01" in lines[1]
    assert "Income:   $1,200.00" in result.output
    assert "Expenses: $150.00" in result.output
    assert "Net:      $1,050.00" in result.output


def test_add_accepts_terminal_style_amounts(cli_runner, temp_db):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    for amount, txn_type in (("$1,234.56", "income"), ("(50.00)", "expense")):
        result = run(
            cli_runner,
            temp_db,
            "add",
            "--email",
            "alice@example.com",
            "--date",
            "2025-09-01",
            "--amount",
            amount,
            "--type",
            txn_type,
        )
        assert result.exit_code == 0

    user = temp_db.find_user_by_email("alice@example.com")
    amounts = sorted(txn.amount for txn in temp_db.list_transactions(user_id=user.id))
    assert amounts == [Decimal("-50.00"), Decimal("1234.56")]


@pytest.mark.parametrize("amount", ["lots", "$1,000,000,000,000.00"])
def test_add_rejects_bad_amount(cli_runner, temp_db, amount):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    result = run(
        cli_runner,
        temp_db,
        "add",
        "--email",
        "alice@example.com",
        "--date",
        "2025-09-01",
        "--amount",
        amount,
        "--type",
        "income",
    )

    assert result.exit_code == 1
    assert "Invalid amount" in result.output
    user = temp_db.find_user_by_email("alice@example.com")
    assert temp_db.list_transactions(user_id=user.id) == []


def test_add_for_unknown_user_fails(cli_runner, temp_db):
    result = run(
        cli_runner,
        temp_db,
        "add",
        "--email",
        "nobody@example.com",
        "--date",
        "2025-09-01",
        "--amount",
        "10",
        "--type",
        "income",
    )

    assert result.exit_code == 1
    assert "User 'nobody@example.com' not found" in result.output


def test_add_rejects_bad_date(cli_runner, temp_db):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    result = run(
        cli_runner,
        temp_db,
        "add",
        "--email",
        "alice@example.com",
        "--date",
        "2025-02-30",
        "--amount",
        "10",
        "--type",
        "income",
    )

    assert result.exit_code == 1
    assert "Invalid date" in result.output


def test_view_empty(cli_runner, temp_db):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    result = run(cli_runner, temp_db, "view", "--email", "alice@example.com")

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_view_rejects_inverted_range(cli_runner, temp_db):
    run(cli_runner, temp_db, "user", "create", "alice@example.com", "--password", "password123")

    result = run(
        cli_runner,
        temp_db,
        "view",
        "--email",
        "alice@example.com",
        "--start-date",
        "2025-09-30",
        "--end-date",
        "2025-09-01",
    )

    assert result.exit_code == 1


def test_seed_is_idempotent(cli_runner, temp_db):
    first = run(cli_runner, temp_db, "seed")
    assert first.exit_code == 0
    assert "Created test@example.com with 4 transactions" in first.output
    assert "Seeded 4 users." in first.output

    second = run(cli_runner, temp_db, "seed")
    assert second.exit_code == 0
    assert "Skipping test@example.com: already exists" in second.output
    assert "Seeded 0 users." in second.output

    user = temp_db.find_user_by_email("test@example.com")
    assert len(temp_db.list_transactions(user_id=user.id)) == 4


def test_seed_bulk(cli_runner, temp_db):
    result = run(cli_runner, temp_db, "seed", "--bulk", "20", "--random-seed", "7")

    assert result.exit_code == 0
    assert "Added 20 random transactions" in result.output
    total = sum(
        len(temp_db.list_transactions(user_id=temp_db.find_user_by_email(email).id))
        for email in ("test@example.com", "sarah@example.com", "david@example.com", "emma@example.com")
    )
    assert total == 15 + 20


def test_serve_requires_secret(cli_runner, temp_db, monkeypatch):
    monkeypatch.delenv("LEDGERAPI_SECRET_KEY", raising=False)

    result = run(cli_runner, temp_db, "serve")

    assert result.exit_code == 1
    assert "LEDGERAPI_SECRET_KEY must be set" in result.output
