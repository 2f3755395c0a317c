"""CLI error handling helpers."""

from datetime import date
from decimal import Decimal

import click

from finscore.domain.errors import DomainError
from finscore.utils.amount_parser import parse_amount
from finscore.utils.date_parser import parse_date


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str) -> Decimal:
    """Parse a user amount, or exit with a CLI error."""
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def parse_date_or_exit(ctx: click.Context, value: str) -> date:
    """Parse a user date, or exit with a CLI error."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def format_money(amount) -> str:
    """Format an amount for terminal output, e.g. $1,234.50."""
    return f"${float(amount):,.2f}"
