"""Signed bearer tokens."""

from datetime import datetime, timedelta, UTC
from typing import Callable, Optional

from jose import JWTError, jwt

from ledgerapi.config import DEFAULT_TOKEN_TTL
from ledgerapi.domain.entities import TokenClaims
from ledgerapi.domain.errors import AuthError, AuthFailure

ALGORITHM = "HS256"

# Expiry is enforced below against the injected clock
_DECODE_OPTIONS = {"verify_exp": False, "verify_aud": False}


def utcnow() -> datetime:
    return datetime.now(UTC)


class TokenService:
    """Issues and verifies HS256 JWTs carrying a user's identity.

    A token is valid strictly before its ``exp`` instant and rejected from
    that instant on.
    """

    def __init__(
        self,
        secret_key: str,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        algorithm: str = ALGORITHM,
        clock: Callable[[], datetime] = utcnow,
    ):
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        self._secret_key = secret_key
        self.ttl = ttl
        self.algorithm = algorithm
        self.clock = clock

    def __repr__(self) -> str:
        return f"TokenService(algorithm={self.algorithm!r}, ttl={self.ttl!r})"

    def issue(self, user_id: int, email: str, ttl: Optional[timedelta] = None) -> str:
        """Issue a token for a user.

        Args:
            user_id: Identifier of the authenticated user
            email: The user's email
            ttl: Lifetime overriding the service default

        Returns:
            Encoded token
        """
        issued_at = int(self.clock().timestamp())
        lifetime = int((ttl if ttl is not None else self.ttl).total_seconds())
        claims = {
            "sub": str(user_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Raises:
            AuthError: ``INVALID`` for a bad signature, foreign key or malformed
                token; ``EXPIRED`` once the expiry instant is reached
        """
        if not isinstance(token, str) or not token:
            raise AuthError("Token is missing", AuthFailure.MISSING)

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                options=_DECODE_OPTIONS,
            )
        except JWTError as e:
            raise AuthError(f"Token rejected: {e}", AuthFailure.INVALID) from e

        try:
            user_id = int(payload["sub"])
            email = payload["email"]
            issued_at = int(payload["iat"])
            expires_at = int(payload["exp"])
        except (KeyError, TypeError, ValueError) as e:
            raise AuthError("Token claims are malformed", AuthFailure.INVALID) from e

        if not isinstance(email, str):
            raise AuthError("Token claims are malformed", AuthFailure.INVALID)

        if self.clock().timestamp() >= expires_at:
            raise AuthError("Token has expired", AuthFailure.EXPIRED)

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )
