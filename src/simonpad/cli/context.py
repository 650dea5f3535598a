"""Helpers shared by CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from simonpad.exceptions import ConfigurationError, format_error_for_display
from simonpad.models import GameConfig
from simonpad.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Path:
    """Config file chosen with --config, or the default location."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or DEFAULT_CONFIG_PATH


def load_config(ctx: click.Context) -> GameConfig:
    """Load the config for a command, exiting with a clean message on errors."""
    path = config_path(ctx)
    try:
        return GameConfig.load_or_default(path)
    except (ConfigurationError, OSError) as e:
        logger.exception(f"Failed to load config from {path}")
        fail(e)


def fail(error: Exception, log_path: Optional[Path] = None) -> NoReturn:
    """Print a user-facing error (no traceback) and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: simonpad --help", err=True)

    sys.exit(1)
