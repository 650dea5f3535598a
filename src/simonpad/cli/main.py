"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from simonpad import __version__
from simonpad.models.config import DEFAULT_HOME

from .commands import audio_group, config_group, score_group, serve
from .context import fail, load_config

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = DEFAULT_HOME / "logs"
DEBUG_LOG_NAME = "simonpad-debug.log"


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Log file for the given flags: --log-file, ./simonpad-debug.log, or ~/.simonpad/logs."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / DEBUG_LOG_NAME
    return DEFAULT_LOG_DIR / "simonpad.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    The terminal UI owns stdout, so all logging goes to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level to ./simonpad-debug.log
        log_file: Custom log file path (optional)
        log_level: Log level used together with --log-file

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keep the last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="simonpad")
@click.option(
    '--config',
    '-c',
    'config_file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.simonpad/config.json)'
)
@click.option(
    '--sounds-dir',
    '-d',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help='Directory with piano-<color>.wav samples'
)
@click.option(
    '--mute',
    is_flag=True,
    help='Start with sound off'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help=f'Enable debug mode (DEBUG level, logs to ./{DEBUG_LOG_NAME})'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for --log-file (default: INFO)'
)
def cli(
    ctx,
    config_file: Optional[Path],
    sounds_dir: Optional[Path],
    mute: bool,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    SimonPad - the Simon memory game in your terminal.

    Watch the four pads light up and repeat the sequence. Every round adds
    one pad and plays a little faster. One mistake ends the game.

    \b
    Keys (default):
      A / S / D / F   green / red / yellow / blue
      Space / Enter   start
      M               mute
      ?               rules

    \b
    Examples:
      # Play
      simonpad

      # Play with piano samples
      simonpad --sounds-dir ./sounds

      # Serve the browser version on port 3000
      simonpad serve

      # Enable debug logging
      simonpad --debug
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file
    log_path = setup_logging(verbose, debug, log_file, log_level)
    ctx.obj["log_path"] = log_path

    if ctx.invoked_subcommand is not None:
        return

    # Lazy import keeps textual out of the utility commands
    from simonpad.tui import SimonPadApp

    logger.info("Starting SimonPad")

    config = load_config(ctx)
    updates = {}
    if sounds_dir is not None:
        updates["sounds_dir"] = sounds_dir
    if mute:
        updates["muted"] = True
    if updates:
        config = config.model_copy(update=updates)

    try:
        SimonPadApp(config).run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running application")
        fail(e, log_path)

    logger.info("SimonPad exited")


cli.add_command(serve)
cli.add_command(score_group)
cli.add_command(audio_group)
cli.add_command(config_group)


def main() -> None:
    """Console script entry point."""
    cli(prog_name="simonpad")


if __name__ == "__main__":
    sys.exit(main())
