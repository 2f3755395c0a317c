"""Budget bucket spending command."""

import click
from finscore.cli.error_handling import format_money
from finscore.domain.insights import InsightsService
from finscore.domain.methods import get_method_by_id


@click.command("budget")
@click.option("--method", "method_id", help="Evaluate this method instead of the selected one")
@click.pass_context
def show_budget(ctx, method_id: str | None):
    """Show spending against each bucket of the budgeting method."""
    service = InsightsService(ctx.obj["db"])

    method = None
    if method_id:
        method = get_method_by_id(method_id)
        if method is None:
            click.echo(f"Error: Budget method '{method_id}' not found", err=True)
            ctx.exit(1)
    else:
        method = service.selected_method()

    if method is None:
        click.echo("No budget method selected. Use 'finscore method select METHOD'.")
        return

    results = service.bucket_spending(method)
    click.echo(f"\n{method.icon} {method.name}")
    click.echo(f"{'Bucket':<28} {'Spent':>16} {'Limit':>16} {'Used':>8}")
    click.echo("-" * 72)
    for result in results:
        if result.limit > 0:
            limit = format_money(result.limit)
            used = f"{result.percentage_used:.0f}%"
        else:
            limit = "-"
            used = "-"
        flag = "  over budget" if result.is_over_budget else ""
        click.echo(
            f"{result.bucket.name:<28} {format_money(result.spent):>16} {limit:>16} {used:>8}{flag}"
        )


def register_commands(cli):
    """Register budget command with main CLI."""
    cli.add_command(show_budget)
