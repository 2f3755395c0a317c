"""Category management commands."""

import click
from finscore.cli.error_handling import handle_domain_error
from finscore.domain.category import CategoryService
from finscore.domain.entities import TransactionType


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option(
    "--type", "category_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    help="Only list income or expense categories",
)
@click.pass_context
def list_categories(ctx, category_type: str | None):
    """List categories by type."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    types = [TransactionType(category_type.lower())] if category_type else list(TransactionType)
    for ctype in types:
        categories = service.list_categories(ctype)
        click.echo(f"\n{ctype.value.capitalize()} categories:")
        if not categories:
            click.echo("  (none)")
        for cat in categories:
            click.echo(f"  {cat.icon} {cat.name}".rstrip())


@category_group.command("create")
@click.argument("name")
@click.option(
    "--type", "category_type",
    type=click.Choice(["income", "expense"], case_sensitive=False),
    default="expense",
    help="Category type (default: expense)",
)
@click.option("--icon", default="", help="Icon (emoji) shown next to the name")
@click.pass_context
def create_category(ctx, name: str, category_type: str, icon: str):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(
            name=name, category_type=TransactionType(category_type.lower()), icon=icon
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created {category_type.lower()} category '{name.strip()}' (ID: {category_id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
