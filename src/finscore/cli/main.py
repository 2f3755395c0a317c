"""Main CLI entry point."""

import logging

import click
from finscore.database.factories import create_sqlite_database
from finscore.domain.category import CategoryService

# Import and register all commands at module level
from finscore.cli.commands import (
    add,
    advice,
    budget,
    category,
    method,
    savings,
    schedule,
    score,
    simulate,
    summary,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINSCORE_DB_PATH environment variable)",
    envvar="FINSCORE_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Finscore - Personal finance tracking and health scoring.

    Record incomes, expenses and savings, follow a budgeting method and get a
    financial health score with ranked recommendations.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        CategoryService(db).initialize_defaults()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
category.register_commands(cli)
savings.register_commands(cli)
method.register_commands(cli)
budget.register_commands(cli)
score.register_commands(cli)
advice.register_commands(cli)
simulate.register_commands(cli)
schedule.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
