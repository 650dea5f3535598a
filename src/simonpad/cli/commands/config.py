"""Configuration commands."""

import click

from simonpad.cli.context import config_path, load_config


@click.group(name="config")
def config_group():
    """Inspect SimonPad settings."""
    pass


@config_group.command(name="show")
@click.option("--field", "-f", type=str, default=None, help="Show a single field")
@click.pass_context
def show_config(ctx: click.Context, field: str | None):
    """Display the effective configuration as JSON."""
    config = load_config(ctx)
    if field is None:
        click.echo(config.model_dump_json(indent=2))
        return

    data = config.model_dump(mode="json")
    if field not in data:
        raise click.BadParameter(f"Unknown field. Fields: {', '.join(data)}", param_hint="--field")
    click.echo(f"{field}: {data[field]}")


@config_group.command(name="path")
@click.pass_context
def show_config_path(ctx: click.Context):
    """Print the location of the config file."""
    path = config_path(ctx)
    suffix = "" if path.exists() else " (not created yet, defaults in use)"
    click.echo(f"{path}{suffix}")
