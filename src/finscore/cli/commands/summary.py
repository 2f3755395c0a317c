"""Summary commands."""

import click
from finscore.cli.error_handling import format_money, parse_date_or_exit
from finscore.domain.summary import SummaryService


@click.group()
def summary_group():
    """Show totals and period summaries."""
    pass


@summary_group.command("totals")
@click.pass_context
def show_totals(ctx):
    """Show overall income, expense and savings totals."""
    totals = SummaryService(ctx.obj["db"]).totals()
    click.echo(f"Incomes:       {format_money(totals.incomes):>18}")
    click.echo(f"Expenses:      {format_money(totals.expenses):>18}")
    click.echo(f"Available:     {format_money(totals.available):>18}")
    click.echo(f"Contributions: {format_money(totals.total_contributions):>18}")
    click.echo(f"Withdrawals:   {format_money(totals.total_withdrawals):>18}")
    click.echo(f"Net savings:   {format_money(totals.net_savings):>18}")


@summary_group.command("weekly")
@click.option("--date", "today", default="today", show_default=True, help="Reference date")
@click.pass_context
def show_weekly(ctx, today: str):
    """Summarize the current week (Monday to today)."""
    summary = SummaryService(ctx.obj["db"]).weekly_summary(parse_date_or_exit(ctx, today))
    click.echo(f"Week {summary.start} to {summary.end}")
    click.echo(f"  Incomes:  {format_money(summary.incomes)}")
    click.echo(f"  Expenses: {format_money(summary.expenses)}")
    click.echo(f"  Balance:  {format_money(summary.balance)}")
    click.echo(f"  Transactions: {summary.transaction_count}")
    if summary.top_category:
        click.echo(f"  Top expense category: {summary.top_category}")


@summary_group.command("monthly")
@click.option("--months", type=click.IntRange(min=1), default=6, show_default=True)
@click.option("--date", "today", default="today", show_default=True, help="Reference date")
@click.pass_context
def show_monthly(ctx, months: int, today: str):
    """Compare incomes and expenses over the last months."""
    rows = SummaryService(ctx.obj["db"]).monthly_totals(parse_date_or_exit(ctx, today), months)
    click.echo(f"\n{'Month':<10} {'Incomes':>16} {'Expenses':>16}")
    click.echo("-" * 44)
    for row in rows:
        click.echo(f"{row.month:<10} {format_money(row.incomes):>16} {format_money(row.expenses):>16}")


def register_commands(cli):
    """Register summary commands with main CLI."""
    cli.add_command(summary_group, name="summary")
