"""High score commands."""

import click

from simonpad.cli.context import load_config
from simonpad.storage import JsonScoreStore


@click.group(name="score")
def score_group():
    """High score commands."""
    pass


@score_group.command(name="show")
@click.pass_context
def show_score(ctx: click.Context):
    """Show the stored high score."""
    config = load_config(ctx)
    store = JsonScoreStore(config.storage_path)
    click.echo(f"High score: {store.load()}")
    click.echo(f"Stored in: {config.storage_path}")


@score_group.command(name="reset")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset_score(ctx: click.Context, yes: bool):
    """Reset the stored high score to 0."""
    config = load_config(ctx)
    store = JsonScoreStore(config.storage_path)
    current = store.load()

    if not yes and not click.confirm(f"Reset high score {current} to 0?"):
        click.echo("Cancelled")
        return

    store.reset()
    if store.degraded:
        click.echo(f"[FAIL] Could not write {config.storage_path}", err=True)
        raise SystemExit(1)
    click.echo("[OK] High score reset")
