"""Static file server command."""

from pathlib import Path
from typing import Optional

import click

from simonpad.cli.context import load_config
from simonpad.server import resolve_port, serve as run_server, startup_message


@click.command(name="serve")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory to serve (default: from config, else the current directory)",
)
@click.option(
    "--port",
    "-p",
    type=click.IntRange(0, 65535),
    default=None,
    help="Port to listen on (default: $PORT, else 3000)",
)
@click.option("--host", type=str, default=None, help="Interface to bind (default: 127.0.0.1)")
@click.pass_context
def serve(ctx: click.Context, root: Optional[Path], port: Optional[int], host: Optional[str]):
    """
    Serve the browser version of the game as static files.

    '/' serves game.html from the site root.

    \b
    Examples:
      simonpad serve
      simonpad serve --root ./web --port 8080
      PORT=8080 simonpad serve
    """
    server_config = load_config(ctx).server
    port = resolve_port(port, default=server_config.port)
    root = root or server_config.root
    host = host or server_config.host

    click.echo(startup_message(port))
    run_server(root, host=host, port=port, entry_document=server_config.entry_document)
