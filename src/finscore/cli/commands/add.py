"""Add transaction command."""

import click
from finscore.cli.error_handling import (
    format_money,
    handle_domain_error,
    parse_amount_or_exit,
    parse_date_or_exit,
)
from finscore.domain.entities import TransactionType
from finscore.domain.transaction import TransactionService


@click.command("add")
@click.argument(
    "transaction_type", type=click.Choice(["income", "expense"], case_sensitive=False)
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 50000 or 1.250,50)")
@click.option("--category", required=True, help="Category name (e.g., 'Comida', 'Salario')")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", help="Transaction description")
@click.pass_context
def add_transaction(
    ctx,
    transaction_type: str,
    amount: str,
    category: str,
    date: str,
    description: str | None,
):
    """Add an income or expense.

    Examples:
        finscore add expense --amount 45000 --category Comida --description "Mercado"
        finscore add income --amount 3500000 --category Salario --date 2024-03-01
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn_date = parse_date_or_exit(ctx, date)
    txn_amount = parse_amount_or_exit(ctx, amount)

    try:
        transaction_id = service.create_transaction(
            transaction_type=TransactionType(transaction_type.lower()),
            amount=txn_amount,
            category=category,
            date=txn_date,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {transaction_type.lower()}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {format_money(txn_amount)}")
    click.echo(f"  Category: {category}")
    if description:
        click.echo(f"  Description: {description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
