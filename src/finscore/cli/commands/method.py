"""Budget method commands."""

import click
from finscore.cli.error_handling import handle_domain_error
from finscore.domain.insights import InsightsService
from finscore.domain.methods import get_method_by_id, list_methods


@click.group()
def method_group():
    """Browse and select budgeting methods."""
    pass


@method_group.command("list")
@click.pass_context
def list_budget_methods(ctx):
    """List available budgeting methods."""
    selected = InsightsService(ctx.obj["db"]).selected_method()
    for method in list_methods():
        marker = "*" if selected is not None and selected.id == method.id else " "
        click.echo(f"{marker} {method.id:<12} {method.icon} {method.name}: {method.short_description}")


@method_group.command("show")
@click.argument("method_id")
@click.pass_context
def show_method(ctx, method_id: str):
    """Show a method's description, buckets and tips."""
    method = get_method_by_id(method_id)
    if method is None:
        click.echo(f"Error: Budget method '{method_id}' not found", err=True)
        ctx.exit(1)

    click.echo(f"\n{method.icon} {method.name} ({method.id})")
    click.echo(f"Origin: {method.origin}")
    click.echo(f"\n{method.description}")
    click.echo("\nBuckets:")
    for bucket in method.buckets:
        share = f"{bucket.percentage}%" if bucket.percentage > 0 else "no fixed share"
        categories = ", ".join(sorted(bucket.match_categories))
        click.echo(f"  {bucket.icon} {bucket.name} ({share}): {categories}")
    click.echo("\nTips:")
    for tip in method.tips:
        click.echo(f"  - {tip}")


@method_group.command("select")
@click.argument("method_id")
@click.pass_context
def select_method(ctx, method_id: str):
    """Select the budgeting method to follow."""
    try:
        method = InsightsService(ctx.obj["db"]).select_method(method_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Selected {method.name} ({method.id})")


@method_group.command("clear")
@click.pass_context
def clear_method(ctx):
    """Stop following a budgeting method."""
    InsightsService(ctx.obj["db"]).clear_method()
    click.echo("Budget method cleared")


def register_commands(cli):
    """Register method commands with main CLI."""
    cli.add_command(method_group, name="method")
