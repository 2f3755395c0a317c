"""Recommendations command."""

import json

import click
from finscore.domain.insights import InsightsService

DEFAULT_VISIBLE = 5


@click.command("advice")
@click.option("--all", "show_all", is_flag=True, help="Show every recommendation, not only the top five")
@click.option(
    "--ai-payload",
    is_flag=True,
    help="Print the JSON financial summary used for AI advice instead of recommendations",
)
@click.pass_context
def show_advice(ctx, show_all: bool, ai_payload: bool):
    """Show ranked recommendations."""
    service = InsightsService(ctx.obj["db"])

    if ai_payload:
        payload = {"financialData": service.advisor_payload()}
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    recommendations = service.recommendations()
    visible = recommendations if show_all else recommendations[:DEFAULT_VISIBLE]
    for rec in visible:
        click.echo(f"\n{rec.icon} [{rec.type.value}] {rec.title}")
        click.echo(f"   {rec.description}")
        if rec.actionable:
            click.echo(f"   -> {rec.actionable}")

    hidden = len(recommendations) - len(visible)
    if hidden > 0:
        click.echo(f"\n{hidden} more recommendation(s). Use --all to show them.")


def register_commands(cli):
    """Register advice command with main CLI."""
    cli.add_command(show_advice)
