"""Goal simulator command."""

import click
from finscore.cli.error_handling import format_money, handle_domain_error, parse_amount_or_exit
from finscore.domain.savings import SavingsService
from finscore.domain.simulator import DEFAULT_ANNUAL_RATE, format_duration, simulate_goal


@click.command("simulate")
@click.option("--goal", help="Target amount (defaults to the saved savings goal)")
@click.option("--monthly", required=True, help="Amount saved every month")
@click.option(
    "--rate",
    type=float,
    default=DEFAULT_ANNUAL_RATE,
    show_default=True,
    help="Annual interest rate in percent",
)
@click.pass_context
def simulate(ctx, goal: str | None, monthly: str, rate: float):
    """Project how long it takes to reach a savings goal."""
    if goal is not None:
        target = parse_amount_or_exit(ctx, goal)
    else:
        target = SavingsService(ctx.obj["db"]).get_goal()
        if target is None:
            click.echo("Error: No savings goal set. Pass --goal or set one first.", err=True)
            ctx.exit(1)
    monthly_amount = parse_amount_or_exit(ctx, monthly)

    try:
        projection = simulate_goal(target, monthly_amount, rate)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if projection.reached:
        click.echo(f"Goal of {format_money(target)} reached in {format_duration(projection.months)}")
    else:
        click.echo(
            f"Goal of {format_money(target)} not reached after "
            f"{format_duration(projection.months)}"
        )
    click.echo(f"  Contributed: {format_money(projection.total_contributed)}")
    click.echo(f"  Interest earned: {format_money(projection.total_interest)}")


def register_commands(cli):
    """Register simulate command with main CLI."""
    cli.add_command(simulate)
