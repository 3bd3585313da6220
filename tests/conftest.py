"""Shared pytest fixtures for ledgerapi tests."""

import tempfile
import os
from datetime import datetime, timedelta, UTC
import pytest

from ledgerapi.api import create_app
from ledgerapi.config import Settings
from ledgerapi.database.factories import create_sqlite_database
from ledgerapi.domain.account import AccountService
from ledgerapi.domain.ledger import LedgerService
from ledgerapi.domain.passwords import PasswordHasher
from ledgerapi.domain.tokens import TokenService

TEST_SECRET = "test-secret-key"
# Lowest cost bcrypt accepts; keeps the suite fast
TEST_ROUNDS = 4


class FrozenClock:
    """Manually advanced clock for token expiry tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def clock():
    """A clock frozen at a whole second."""
    return FrozenClock(datetime(2025, 9, 10, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=TEST_ROUNDS)


@pytest.fixture
def token_service(clock):
    return TokenService(TEST_SECRET, ttl=timedelta(hours=1), clock=clock)


@pytest.fixture
def account_service(temp_db, hasher, token_service):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db, hasher, token_service)


@pytest.fixture
def ledger_service(temp_db):
    """Create a LedgerService with a temporary database."""
    return LedgerService(temp_db)


@pytest.fixture
def sample_user(account_service):
    """Create a sample user for testing."""
    return account_service.signup(email="alice@example.com", password="password123")


@pytest.fixture
def other_user(account_service):
    """Create a second user for isolation tests."""
    return account_service.signup(email="bob@example.com", password="hunter22")


@pytest.fixture
def settings(temp_db):
    return Settings(
        secret_key=TEST_SECRET,
        database_url=temp_db.database_url,
        token_ttl=timedelta(hours=1),
        bcrypt_rounds=TEST_ROUNDS,
    )


@pytest.fixture
def app(settings, temp_db, clock):
    """Create the Flask app over the temporary database."""
    app = create_app(settings=settings, db=temp_db, clock=clock)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Return a helper that signs a user up, logs in and returns auth headers."""

    def _login(email="alice@example.com", password="password123"):
        client.post("/api/auth/signup", json={"email": email, "password": password})
        response = client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.get_json()['token']}"}

    return _login


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def secret_key():
    return TEST_SECRET
