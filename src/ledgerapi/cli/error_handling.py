"""CLI error handling helpers."""

import click

from ledgerapi.config import ConfigurationError
from ledgerapi.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ConfigurationError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
