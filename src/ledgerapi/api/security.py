"""Bearer token authentication for protected routes."""

from functools import wraps

from flask import g, request

from ledgerapi.api.context import get_services
from ledgerapi.domain.errors import AuthError, AuthFailure
from ledgerapi.logging_setup import get_logger

logger = get_logger("ledgerapi.api.security")

BEARER_PREFIX = "Bearer "


def extract_bearer_token(header: str | None) -> str:
    """Return the token from an ``Authorization`` header value.

    Raises:
        AuthError: ``MISSING`` when the header is absent or not a bearer header
    """
    if not header or not header.startswith(BEARER_PREFIX):
        raise AuthError("Missing bearer token", AuthFailure.MISSING)
    token = header[len(BEARER_PREFIX):].strip()
    if not token or " " in token:
        raise AuthError("Malformed bearer token", AuthFailure.MISSING)
    return token


def require_auth(view):
    """Reject the request unless it carries a valid bearer token.

    The verified claims are stored on ``g.identity``.
    """

    @wraps(view)
    def wrapped(*args, **kwargs):
        try:
            token = extract_bearer_token(request.headers.get("Authorization"))
            g.identity = get_services().accounts.authenticate(token)
        except AuthError as e:
            logger.info("Rejected %s %s: %s", request.method, request.path, e.reason.value)
            raise
        return view(*args, **kwargs)

    return wrapped
