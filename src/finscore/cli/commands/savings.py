"""Savings goal, contribution and withdrawal commands."""

import click
from finscore.cli.error_handling import (
    format_money,
    handle_domain_error,
    parse_amount_or_exit,
    parse_date_or_exit,
)
from finscore.domain.entities import SavingsEntryKind
from finscore.domain.savings import SavingsService


@click.group()
def savings_group():
    """Manage savings goal, contributions and withdrawals."""
    pass


@savings_group.group("goal")
def goal_group():
    """Manage the savings goal."""
    pass


@goal_group.command("set")
@click.argument("amount")
@click.pass_context
def set_goal(ctx, amount: str):
    """Set the savings goal."""
    service = SavingsService(ctx.obj["db"])
    goal = parse_amount_or_exit(ctx, amount)
    try:
        service.set_goal(goal)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Savings goal set to {format_money(goal)}")


@goal_group.command("clear")
@click.pass_context
def clear_goal(ctx):
    """Remove the savings goal."""
    SavingsService(ctx.obj["db"]).clear_goal()
    click.echo("Savings goal cleared")


@goal_group.command("show")
@click.pass_context
def show_goal(ctx):
    """Show the goal and progress towards it."""
    service = SavingsService(ctx.obj["db"])
    goal = service.get_goal()
    net = service.net_savings()

    click.echo(f"Net savings: {format_money(net)}")
    if goal is None:
        click.echo("No savings goal set. Use 'finscore savings goal set AMOUNT'.")
        return
    progress = min(float(net) / float(goal) * 100, 100.0) if net > 0 else 0.0
    click.echo(f"Goal: {format_money(goal)}")
    click.echo(f"Progress: {progress:.1f}%")


@savings_group.command("contribute")
@click.argument("amount")
@click.option("--date", default="today", show_default=True, help="Contribution date")
@click.pass_context
def contribute(ctx, amount: str, date: str):
    """Add money to savings (recorded as an 'Ahorro' expense)."""
    service = SavingsService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)
    when = parse_date_or_exit(ctx, date)
    try:
        entry_id = service.contribute(value, when)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded contribution {entry_id} of {format_money(value)}")


@savings_group.command("withdraw")
@click.argument("amount")
@click.option("--date", default="today", show_default=True, help="Withdrawal date")
@click.pass_context
def withdraw(ctx, amount: str, date: str):
    """Take money out of savings (recorded as a 'Retiro de ahorro' income)."""
    service = SavingsService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)
    when = parse_date_or_exit(ctx, date)
    try:
        entry_id = service.withdraw(value, when)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Recorded withdrawal {entry_id} of {format_money(value)}")


@savings_group.command("list")
@click.pass_context
def list_entries(ctx):
    """List contributions and withdrawals."""
    service = SavingsService(ctx.obj["db"])
    entries = service.list_contributions() + service.list_withdrawals()
    if not entries:
        click.echo("No savings entries found.")
        return

    entries.sort(key=lambda e: (e.date, e.id), reverse=True)
    click.echo(f"\n{'ID':<6} {'Date':<12} {'Kind':<14} {'Amount':>16}")
    click.echo("-" * 50)
    for entry in entries:
        sign = "+" if entry.kind == SavingsEntryKind.CONTRIBUTION else "-"
        click.echo(
            f"{entry.id:<6} {entry.date.strftime('%Y-%m-%d'):<12} {entry.kind.value:<14} "
            f"{sign + format_money(entry.amount):>16}"
        )
    click.echo(f"\nNet savings: {format_money(service.net_savings())}")


@savings_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_entry(ctx, entry_id: int, yes: bool):
    """Delete a contribution or withdrawal and its transaction."""
    service = SavingsService(ctx.obj["db"])
    if not yes and not click.confirm(
        f"Delete savings entry {entry_id} and its linked transaction?"
    ):
        click.echo("Cancelled.")
        return
    try:
        service.delete_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted savings entry {entry_id}")


def register_commands(cli):
    """Register savings commands with main CLI."""
    cli.add_command(savings_group, name="savings")
