"""Tests for the account service: signup, login and authentication."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from ledgerapi.domain.account import AccountService
from ledgerapi.domain.errors import AuthError, AuthFailure, ConflictError, ValidationError


def test_signup_creates_user(account_service, temp_db):
    user = account_service.signup(email="alice@example.com", password="password123")

    assert user.id is not None
    assert user.email == "alice@example.com"
    stored = temp_db.find_user_by_email("alice@example.com")
    assert stored.id == user.id


def test_signup_stores_hash_not_plaintext(account_service, hasher):
    user = account_service.signup(email="alice@example.com", password="password123")

    assert user.password_hash != "password123"
    assert hasher.verify("password123", user.password_hash)


def test_signup_normalizes_email(account_service):
    user = account_service.signup(email="  Alice@Example.COM ", password="password123")
    assert user.email == "alice@example.com"


@pytest.mark.parametrize(
    "email,password",
    [
        ("not-an-email", "password123"),
        ("missing@tld", "password123"),
        ("with space@example.com", "password123"),
        ("alice@example.com", "short"),
        ("alice@example.com", "x" * 73),
        (None, "password123"),
        ("alice@example.com", None),
        (123, "password123"),
    ],
)
def test_signup_rejects_invalid_input(account_service, temp_db, email, password):
    with pytest.raises(ValidationError):
        account_service.signup(email=email, password=password)
    assert temp_db.count_users() == 0


def test_signup_duplicate_email_conflicts(account_service, temp_db, sample_user):
    with pytest.raises(ConflictError):
        account_service.signup(email="alice@example.com", password="different-pass")
    assert temp_db.count_users() == 1


def test_signup_duplicate_email_differing_case_conflicts(account_service, sample_user):
    with pytest.raises(ConflictError):
        account_service.signup(email="ALICE@example.com", password="password123")


def test_concurrent_signups_create_one_user(temp_db, hasher):
    """Racing signups for one email leave exactly one row."""
    service = AccountService(temp_db, hasher)

    def attempt(_):
        try:
            service.signup(email="race@example.com", password="password123")
            return "created"
        except ConflictError:
            return "conflict"

    with ThreadPoolExecutor(max_workers=8) as pool:
        outcomes = list(pool.map(attempt, range(8)))

    assert outcomes.count("created") == 1
    assert outcomes.count("conflict") == 7
    assert temp_db.count_users() == 1


def test_store_constraint_is_translated_to_conflict(temp_db, hasher):
    """A second insert that skips the pre-check still fails as a conflict."""
    temp_db.create_user(email="alice@example.com", password_hash=hasher.hash("password123"))

    with pytest.raises(ConflictError):
        temp_db.create_user(email="alice@example.com", password_hash=hasher.hash("password123"))
    assert temp_db.count_users() == 1


def test_login_returns_verifiable_token(account_service, token_service, sample_user):
    token = account_service.login(email="alice@example.com", password="password123")

    claims = token_service.verify(token)
    assert claims.user_id == sample_user.id
    assert claims.email == "alice@example.com"


def test_login_is_case_insensitive_on_email(account_service, sample_user):
    token = account_service.login(email="ALICE@EXAMPLE.COM", password="password123")
    assert account_service.authenticate(token).user_id == sample_user.id


def test_login_wrong_password_and_unknown_email_fail_identically(account_service, sample_user):
    with pytest.raises(AuthError) as wrong_password:
        account_service.login(email="alice@example.com", password="wrong-password")
    with pytest.raises(AuthError) as unknown_email:
        account_service.login(email="nobody@example.com", password="password123")

    assert str(wrong_password.value) == str(unknown_email.value)
    assert wrong_password.value.reason is AuthFailure.INVALID_CREDENTIALS
    assert unknown_email.value.reason is AuthFailure.INVALID_CREDENTIALS


def test_unknown_email_login_costs_one_bcrypt_check(account_service, hasher, monkeypatch):
    """Even the first unknown-email login does no hashing, only one verify."""
    calls = []
    real_verify = hasher.verify

    def fail_hash(plaintext):
        raise AssertionError("login must not hash")

    def counting_verify(plaintext, password_hash):
        calls.append(password_hash)
        return real_verify(plaintext, password_hash)

    monkeypatch.setattr(hasher, "hash", fail_hash)
    monkeypatch.setattr(hasher, "verify", counting_verify)

    for _ in range(2):
        with pytest.raises(AuthError):
            account_service.login(email="nobody@example.com", password="password123")

    assert len(calls) == 2
    assert calls[0] == calls[1]


def test_login_rejects_malformed_input(account_service):
    with pytest.raises(ValidationError):
        account_service.login(email="not-an-email", password="password123")


def test_login_without_token_service_fails_loudly(temp_db, hasher):
    service = AccountService(temp_db, hasher)
    service.signup(email="alice@example.com", password="password123")

    with pytest.raises(RuntimeError):
        service.login(email="alice@example.com", password="password123")


def test_authenticate_rejects_garbage(account_service):
    with pytest.raises(AuthError):
        account_service.authenticate("not.a.token")
