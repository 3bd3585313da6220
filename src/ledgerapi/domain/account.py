"""Account domain service: signup, login and token authentication."""

from typing import TYPE_CHECKING, Optional

from ledgerapi.domain.entities import TokenClaims, User as UserEntity
from ledgerapi.domain.errors import (
    AuthError,
    AuthFailure,
    ConflictError,
    ValidationError,
    INVALID_CREDENTIALS,
    email_already_registered,
)
from ledgerapi.domain.passwords import PasswordHasher
from ledgerapi.domain.tokens import TokenService
from ledgerapi.logging_setup import get_logger
from ledgerapi.utils.credentials import is_valid_email, is_valid_password, normalize_email

if TYPE_CHECKING:
    from ledgerapi.database.base import Database

logger = get_logger("ledgerapi.domain.account")

INVALID_EMAIL_OR_PASSWORD = "Invalid email or password"


class AccountService:
    """Service for creating accounts and authenticating users."""

    def __init__(
        self, db: "Database", hasher: PasswordHasher, tokens: Optional[TokenService] = None
    ):
        """Initialize account service.

        Args:
            db: Database instance
            hasher: Password hasher
            tokens: Token service used for issuing and verifying bearer tokens;
                only login and authentication need one
        """
        self.db = db
        self.hasher = hasher
        self.tokens = tokens
        # Logins for unknown emails verify against this hash
        self._dummy_hash = hasher.hash("ledgerapi-timing-equalizer")

    def _validate_credentials(self, email: object, password: object) -> str:
        if not is_valid_email(email) or not is_valid_password(password):
            raise ValidationError(INVALID_EMAIL_OR_PASSWORD)
        return normalize_email(email)

    def signup(self, email: str, password: str) -> UserEntity:
        """Register a new user.

        Args:
            email: Email address; stored lower-cased
            password: Plaintext password, 6 to 72 bytes

        Returns:
            The created user

        Raises:
            ValidationError: If email or password are malformed
            ConflictError: If the email is already registered
        """
        email = self._validate_credentials(email, password)

        if self.db.find_user_by_email(email) is not None:
            raise ConflictError(email_already_registered(email))

        # The store's unique constraint settles concurrent signups
        user = self.db.create_user(email=email, password_hash=self.hasher.hash(password))
        logger.info("Created user %s", user.id)
        return user

    def login(self, email: str, password: str) -> str:
        """Check credentials and issue a bearer token.

        Unknown emails and wrong passwords fail identically.

        Raises:
            ValidationError: If email or password are malformed
            AuthError: If the credentials do not match a user
        """
        email = self._validate_credentials(email, password)

        user = self.db.find_user_by_email(email)
        if user is None:
            # Burn the same bcrypt cost as a real check
            self.hasher.verify(password, self._dummy_hash)
            logger.info("Login rejected")
            raise AuthError(INVALID_CREDENTIALS, AuthFailure.INVALID_CREDENTIALS)

        if not self.hasher.verify(password, user.password_hash):
            logger.info("Login rejected")
            raise AuthError(INVALID_CREDENTIALS, AuthFailure.INVALID_CREDENTIALS)

        logger.info("User %s logged in", user.id)
        return self._require_tokens().issue(user_id=user.id, email=user.email)

    def authenticate(self, token: str) -> TokenClaims:
        """Verify a bearer token and return the identity it carries."""
        return self._require_tokens().verify(token)

    def get_user_by_email(self, email: str) -> UserEntity | None:
        """Get user by email, matching case-insensitively."""
        return self.db.find_user_by_email(normalize_email(email))

    def _require_tokens(self) -> TokenService:
        if self.tokens is None:
            raise RuntimeError("No token service configured")
        return self.tokens
