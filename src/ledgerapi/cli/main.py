"""Main CLI entry point."""

import os

import click
from ledgerapi.database.factories import create_database, create_sqlite_database
from ledgerapi.logging_setup import configure_logging

# Import and register all commands at module level
from ledgerapi.cli.commands import (
    init_db,
    serve,
    seed,
    user,
    add,
    view,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides LEDGERAPI_DB_PATH environment variable)",
    envvar="LEDGERAPI_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """Ledger API - accounts and transaction ledger service.

    Run the HTTP service and manage its users and transactions from the
    command line.
    """
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        database_url = os.environ.get("LEDGERAPI_DATABASE_URL")
        if db_path is None and database_url:
            db = create_database(database_url)
        else:
            db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
init_db.register_commands(cli)
serve.register_commands(cli)
seed.register_commands(cli)
user.register_commands(cli)
add.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
