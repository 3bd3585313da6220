"""HTTP interface: the Flask application factory."""

from datetime import datetime
from typing import Callable, Optional

from flask import Flask, jsonify
from flask_cors import CORS

from ledgerapi.api.auth import auth_bp
from ledgerapi.api.context import EXTENSION_KEY, Services
from ledgerapi.api.errors import register_error_handlers
from ledgerapi.api.ledger import ledger_bp
from ledgerapi.config import Settings, load_settings
from ledgerapi.database.base import Database
from ledgerapi.database.factories import create_database
from ledgerapi.domain.account import AccountService
from ledgerapi.domain.ledger import LedgerService
from ledgerapi.domain.passwords import PasswordHasher
from ledgerapi.domain.tokens import TokenService, utcnow
from ledgerapi.logging_setup import get_logger

logger = get_logger("ledgerapi.api")


def create_app(
    settings: Optional[Settings] = None,
    db: Optional[Database] = None,
    clock: Callable[[], datetime] = utcnow,
) -> Flask:
    """Build the Flask application.

    Args:
        settings: Service settings; read from the environment when omitted
        db: Database to use; built from ``settings.database_url`` when omitted
        clock: Time source for token issuance and expiry checks
    """
    if settings is None:
        settings = load_settings()

    if db is None:
        db = create_database(settings.database_url)
        db.connect()
        db.initialize_schema()

    tokens = TokenService(settings.secret_key, ttl=settings.token_ttl, clock=clock)
    services = Services(
        settings=settings,
        db=db,
        accounts=AccountService(db, PasswordHasher(settings.bcrypt_rounds), tokens),
        ledger=LedgerService(
            db,
            max_page_size=settings.max_page_size,
            default_page_size=settings.default_page_size,
        ),
    )

    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions[EXTENSION_KEY] = services

    CORS(app, resources={r"/api/*": {"origins": list(settings.cors_origins)}})

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(ledger_bp, url_prefix="/api")
    register_error_handlers(app)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    logger.info("Application ready")
    return app


__all__ = ["create_app"]
