"""Financial health score command."""

import click
from finscore.domain.insights import InsightsService


@click.command("score")
@click.option("--achievements/--no-achievements", default=True, help="Show achievements")
@click.pass_context
def show_score(ctx, achievements: bool):
    """Show the financial health score, level and achievements."""
    score = InsightsService(ctx.obj["db"]).score()

    click.echo(f"\nScore: {score.total}/100 (grade {score.grade})")
    click.echo(f"Level {score.level}: {score.level_name} ({score.xp} XP", nl=False)
    if score.xp_to_next > 0:
        click.echo(f", {score.xp_to_next} XP to next level)")
    else:
        click.echo(", max level)")

    click.echo("\nBreakdown:")
    for category in score.breakdown:
        click.echo(f"  {category.icon} {category.name:<24} {category.score:>3}/100  ({category.weight}%)")
        click.echo(f"      {category.tip}")

    if achievements:
        click.echo(f"\nAchievements ({score.unlocked_count}/{len(score.achievements)}):")
        for achievement in score.achievements:
            status = "x" if achievement.unlocked else " "
            click.echo(
                f"  [{status}] {achievement.icon} {achievement.name}: "
                f"{achievement.description} ({achievement.progress:.0f}%)"
            )


def register_commands(cli):
    """Register score command with main CLI."""
    cli.add_command(show_score)
