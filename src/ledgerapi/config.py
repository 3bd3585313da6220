"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_TOKEN_TTL = timedelta(days=7)
DEFAULT_BCRYPT_ROUNDS = 12
DEFAULT_MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 50


class ConfigurationError(ValueError):
    """Required setting missing or malformed."""


@dataclass(frozen=True)
class Settings:
    """Service settings.

    ``secret_key`` has no default: tokens must never be signed with a value
    that ships in the source tree.
    """

    secret_key: str = field(repr=False)
    database_url: str
    token_ttl: timedelta = DEFAULT_TOKEN_TTL
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    default_page_size: int = DEFAULT_PAGE_SIZE
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.secret_key:
            raise ConfigurationError("LEDGERAPI_SECRET_KEY must be set")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ConfigurationError(
                f"bcrypt rounds must be between 4 and 31, got {self.bcrypt_rounds}"
            )
        if self.token_ttl <= timedelta(0):
            raise ConfigurationError("Token TTL must be positive")
        if self.max_page_size < 1:
            raise ConfigurationError("Maximum page size must be at least 1")
        if self.default_page_size < 1:
            raise ConfigurationError("Default page size must be at least 1")


def sqlite_url(database_path: str) -> str:
    return f"sqlite:///{database_path}"


def default_database_path() -> str:
    """Return ~/.ledgerapi/ledgerapi.db, creating the directory."""
    db_dir = Path.home() / ".ledgerapi"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "ledgerapi.db")


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'")


def load_settings(
    environ: Optional[Mapping[str, str]] = None, database_path: Optional[str] = None
) -> Settings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.
        database_path: SQLite file path overriding ``LEDGERAPI_DB_PATH``.

    Raises:
        ConfigurationError: If the secret is missing or a value is malformed
    """
    if environ is None:
        environ = os.environ

    database_url = environ.get("LEDGERAPI_DATABASE_URL")
    if database_path is not None:
        database_url = sqlite_url(database_path)
    elif not database_url:
        database_url = sqlite_url(environ.get("LEDGERAPI_DB_PATH") or default_database_path())

    default_ttl = int(DEFAULT_TOKEN_TTL.total_seconds())
    ttl_seconds = _int_setting(environ, "LEDGERAPI_TOKEN_TTL_SECONDS", default_ttl)

    origins = environ.get("LEDGERAPI_CORS_ORIGINS", "*")
    cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",)

    return Settings(
        secret_key=environ.get("LEDGERAPI_SECRET_KEY", ""),
        database_url=database_url,
        token_ttl=timedelta(seconds=ttl_seconds),
        bcrypt_rounds=_int_setting(environ, "LEDGERAPI_BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS),
        max_page_size=_int_setting(environ, "LEDGERAPI_MAX_PAGE_SIZE", DEFAULT_MAX_PAGE_SIZE),
        cors_origins=cors_origins,
        log_level=environ.get("LEDGERAPI_LOG_LEVEL", "INFO"),
    )


def load_bcrypt_rounds(environ: Optional[Mapping[str, str]] = None) -> int:
    """Read the hashing cost factor alone, for tools that never sign tokens."""
    if environ is None:
        environ = os.environ
    rounds = _int_setting(environ, "LEDGERAPI_BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS)
    if not 4 <= rounds <= 31:
        raise ConfigurationError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
    return rounds
