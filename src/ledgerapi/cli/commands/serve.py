"""Run the HTTP service."""

import click

from ledgerapi.api import create_app
from ledgerapi.cli.error_handling import handle_domain_error
from ledgerapi.config import ConfigurationError, load_settings
from ledgerapi.logging_setup import configure_logging


@click.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", default=8787, show_default=True, type=int, help="Port to listen on")
@click.option("--debug", is_flag=True, help="Enable the Flask debugger and reloader")
@click.pass_context
def serve(ctx, host: str, port: int, debug: bool):
    """Serve the Account & Ledger API.

    LEDGERAPI_SECRET_KEY must be set; the server refuses to start without it.
    """
    try:
        settings = load_settings(database_path=ctx.obj["db_path"])
    except ConfigurationError as e:
        handle_domain_error(ctx, e)

    configure_logging(settings.log_level)
    app = create_app(settings=settings, db=ctx.obj["db"])
    app.run(host=host, port=port, debug=debug, threaded=True)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
