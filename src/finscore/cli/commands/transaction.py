"""Transaction management commands."""

import click
from finscore.cli.error_handling import (
    format_money,
    handle_domain_error,
    parse_amount_or_exit,
    parse_date_or_exit,
)
from finscore.domain.entities import TransactionType
from finscore.domain.transaction import TransactionService
from finscore.utils.date_parser import PERIODS, get_date_range


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@click.option("--period", type=click.Choice(PERIODS), help="Named period instead of explicit dates")
@click.option(
    "--type", "transaction_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="Only show incomes or expenses",
)
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    period: str | None,
    transaction_type: str | None,
):
    """View transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    if period and (start_date or end_date):
        click.echo("Error: --period cannot be combined with --start-date or --end-date.", err=True)
        ctx.exit(1)

    start = end = None
    if period:
        start, end = get_date_range(period)
    if start_date:
        start = parse_date_or_exit(ctx, start_date)
    if end_date:
        end = parse_date_or_exit(ctx, end_date)

    transactions = service.list_transactions(
        start_date=start,
        end_date=end,
        transaction_type=TransactionType(transaction_type.lower()) if transaction_type else None,
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>16}  {'Category':<18} Description")
    click.echo("-" * 80)
    for txn in transactions:
        sign = "+" if txn.is_income else "-"
        amount = f"{sign}{format_money(txn.amount)}"
        link = f" [savings {txn.linked_savings_id}]" if txn.linked_savings_id else ""
        click.echo(
            f"{txn.id:<6} {txn.date.strftime('%Y-%m-%d'):<12} {txn.type.value:<8} "
            f"{amount:>16}  {txn.category:<18} {txn.description or ''}{link}"
        )
    click.echo(f"\nTotal: {len(transactions)} transaction(s)")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option(
    "--type", "transaction_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="New transaction type",
)
@click.option("--amount", help="New amount")
@click.option("--category", help="New category name")
@click.option("--date", help="New date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--description", help="New description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    transaction_type: str | None,
    amount: str | None,
    category: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Transactions created by
    savings contributions or withdrawals cannot be edited.

    Examples:
        finscore transaction update 3 --amount 52000
        finscore transaction update 3 --category Hogar --description "Arriendo"
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn_date = parse_date_or_exit(ctx, date) if date is not None else None
    txn_amount = parse_amount_or_exit(ctx, amount) if amount is not None else None

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            transaction_type=TransactionType(transaction_type.lower()) if transaction_type else None,
            amount=txn_amount,
            category=category,
            date=txn_date,
            description=description,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Deleting a savings transaction also deletes its contribution or
    withdrawal.
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes:
        click.echo(f"Transaction {transaction_id}:")
        click.echo(f"  Date: {txn.date.strftime('%Y-%m-%d')}")
        click.echo(f"  Type: {txn.type.value}")
        click.echo(f"  Amount: {format_money(txn.amount)}")
        click.echo(f"  Category: {txn.category}")
        if txn.linked_savings_id:
            click.echo(f"  Linked savings entry: {txn.linked_savings_id} (will also be deleted)")
        if not click.confirm("\nAre you sure you want to delete this transaction?"):
            click.echo("Cancelled.")
            return

    try:
        service.delete_transaction(transaction_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
