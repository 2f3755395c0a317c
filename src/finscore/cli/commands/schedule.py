"""Scheduled action commands."""

import click
from finscore.cli.error_handling import (
    format_money,
    handle_domain_error,
    parse_amount_or_exit,
    parse_date_or_exit,
)
from finscore.domain.entities import ScheduledActionType
from finscore.domain.scheduled import ScheduledActionService


def _parse_days(ctx, days: str) -> list[int]:
    try:
        return [int(day) for day in days.replace(" ", "").split(",") if day]
    except ValueError:
        click.echo(f"Error: Invalid days '{days}', expected e.g. '1,15'", err=True)
        ctx.exit(1)


@click.group()
def schedule_group():
    """Manage recurring automated expenses and savings."""
    pass


@schedule_group.command("create")
@click.argument("action_type", type=click.Choice(["debt", "savings"], case_sensitive=False))
@click.argument("name")
@click.option("--amount", required=True, help="Amount recorded on each run")
@click.option("--days", required=True, help="Comma separated days of the month, e.g. '1,15'")
@click.option("--category", help="Expense category for debt actions")
@click.pass_context
def create_action(ctx, action_type: str, name: str, amount: str, days: str, category: str | None):
    """Create a scheduled action.

    Examples:
        finscore schedule create debt "Arriendo" --amount 1200000 --days 5 --category Hogar
        finscore schedule create savings "Ahorro quincenal" --amount 200000 --days 15,30
    """
    service = ScheduledActionService(ctx.obj["db"])
    value = parse_amount_or_exit(ctx, amount)
    try:
        action_id = service.create_action(
            action_type=ScheduledActionType(action_type.lower()),
            name=name,
            amount=value,
            days=_parse_days(ctx, days),
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created scheduled action {action_id}")


@schedule_group.command("list")
@click.pass_context
def list_actions(ctx):
    """List scheduled actions."""
    actions = ScheduledActionService(ctx.obj["db"]).list_actions()
    if not actions:
        click.echo("No scheduled actions found.")
        return

    click.echo(f"\n{'ID':<6} {'Type':<8} {'Name':<24} {'Amount':>16}  {'Days':<12} Status")
    click.echo("-" * 80)
    for action in actions:
        days = ",".join(str(day) for day in action.days)
        status = "active" if action.active else "paused"
        click.echo(
            f"{action.id:<6} {action.type.value:<8} {action.name:<24} "
            f"{format_money(action.amount):>16}  {days:<12} {status}"
        )


@schedule_group.command("pause")
@click.argument("action_id", type=int)
@click.pass_context
def pause_action(ctx, action_id: int):
    """Pause a scheduled action."""
    try:
        ScheduledActionService(ctx.obj["db"]).set_active(action_id, False)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Paused scheduled action {action_id}")


@schedule_group.command("resume")
@click.argument("action_id", type=int)
@click.pass_context
def resume_action(ctx, action_id: int):
    """Resume a paused scheduled action."""
    try:
        ScheduledActionService(ctx.obj["db"]).set_active(action_id, True)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Resumed scheduled action {action_id}")


@schedule_group.command("delete")
@click.argument("action_id", type=int)
@click.pass_context
def delete_action(ctx, action_id: int):
    """Delete a scheduled action."""
    try:
        ScheduledActionService(ctx.obj["db"]).delete_action(action_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted scheduled action {action_id}")


@schedule_group.command("run")
@click.option("--date", "today", default="today", show_default=True, help="Reference date")
@click.pass_context
def run_pending(ctx, today: str):
    """Execute pending runs for the current month."""
    reference = parse_date_or_exit(ctx, today)
    count = ScheduledActionService(ctx.obj["db"]).run_pending(reference)
    if count:
        click.echo(f"Executed {count} scheduled action run(s)")
    else:
        click.echo("No pending scheduled actions")


def register_commands(cli):
    """Register schedule commands with main CLI."""
    cli.add_command(schedule_group, name="schedule")
