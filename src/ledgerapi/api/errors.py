"""Mapping of domain errors to JSON responses."""

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from ledgerapi.domain.errors import (
    AuthError,
    AuthFailure,
    ConflictError,
    DomainError,
    NotFoundError,
    StoreError,
    ValidationError,
    UNAUTHORIZED,
)
from ledgerapi.logging_setup import get_logger

logger = get_logger("ledgerapi.api.errors")

NOT_FOUND = "Not found"
INTERNAL_ERROR = "Internal server error"


def error_response(message: str, status: int, **extra):
    body = {"error": message}
    body.update(extra)
    return jsonify(body), status


def register_error_handlers(app: Flask) -> None:
    """Register handlers that turn exceptions into JSON error bodies."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error: ValidationError):
        if error.field:
            return error_response(str(error), 400, field=error.field)
        return error_response(str(error), 400)

    @app.errorhandler(ConflictError)
    def handle_conflict_error(error: ConflictError):
        return error_response(str(error), 409)

    @app.errorhandler(AuthError)
    def handle_auth_error(error: AuthError):
        # Login failures already carry the generic credentials message
        message = str(error) if error.reason is AuthFailure.INVALID_CREDENTIALS else UNAUTHORIZED
        return error_response(message, 401)

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(error: NotFoundError):
        return error_response(NOT_FOUND, 404)

    @app.errorhandler(StoreError)
    def handle_store_error(error: StoreError):
        logger.error("Store failure: %s", error)
        return error_response(INTERNAL_ERROR, 500)

    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        return error_response(str(error), 400)

    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unmatched_route(error: HTTPException):
        # Unsupported methods on a known path are reported like unknown paths
        return handle_not_found_error(NotFoundError(NOT_FOUND))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error: HTTPException):
        return error_response(error.description or error.name, error.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception("Unhandled error")
        return error_response(INTERNAL_ERROR, 500)
