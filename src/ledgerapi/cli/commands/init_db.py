"""Initialize the database schema."""

import click


@click.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the users and transactions tables if they do not exist."""
    # The group callback already ran initialize_schema on connect
    db = ctx.obj["db"]
    click.echo(f"Database ready ({db.count_users()} users).")


def register_commands(cli):
    """Register init-db command with main CLI."""
    cli.add_command(init_db)
