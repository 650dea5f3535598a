"""Static file server for the browser build of the game."""

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask, Response, current_app
from werkzeug.security import safe_join

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000

MIME_TYPES = {
    ".html": "text/html",
    ".js": "text/javascript",
    ".css": "text/css",
}
DEFAULT_MIME_TYPE = "text/plain"

NOT_FOUND_BODY = "<h1>404 - File Not Found</h1>"


def content_type_for(path: str) -> str:
    """Content type from the file extension (case-insensitive)."""
    return MIME_TYPES.get(os.path.splitext(path)[1].lower(), DEFAULT_MIME_TYPE)


def resolve_port(port: Optional[int] = None, default: int = DEFAULT_PORT) -> int:
    """Explicit port, else the PORT environment variable, else `default`."""
    if port is not None:
        return port
    return int(os.environ.get("PORT", default))


def create_app(root: Path, entry_document: str = "game.html") -> Flask:
    """
    Create the static file server.

    Args:
        root: Directory served as the site root
        entry_document: Document served for '/'
    """
    flask_app = Flask(__name__)
    flask_app.config["SITE_ROOT"] = str(Path(root).resolve())
    flask_app.config["ENTRY_DOCUMENT"] = entry_document

    @flask_app.route("/", defaults={"filename": None})
    @flask_app.route("/<path:filename>")
    def serve_file(filename: Optional[str]) -> Response:
        return _serve(filename or current_app.config["ENTRY_DOCUMENT"])

    return flask_app


def _serve(filename: str) -> Response:
    # safe_join returns None for paths escaping the root; treat those as missing
    file_path = safe_join(current_app.config["SITE_ROOT"], filename)
    if file_path is None:
        logger.debug(f"Rejected path outside site root: {filename}")
        return Response(NOT_FOUND_BODY, 404, content_type="text/html")

    try:
        with open(file_path, "rb") as f:
            data = f.read()
    except FileNotFoundError:
        logger.debug(f"Not found: {filename}")
        return Response(NOT_FOUND_BODY, 404, content_type="text/html")
    except OSError as e:
        logger.error(f"Failed to read {file_path}: {e}")
        return Response(f"Server Error: {e}", 500, content_type=DEFAULT_MIME_TYPE)

    return Response(data, 200, content_type=content_type_for(file_path))


def startup_message(port: int) -> str:
    return f"Simon Game server is running on port {port}"


def serve(root: Path, host: str = "127.0.0.1", port: Optional[int] = None,
          entry_document: str = "game.html") -> None:
    """Run the server until interrupted."""
    port = resolve_port(port)
    flask_app = create_app(root, entry_document)
    logger.info(f"Serving {flask_app.config['SITE_ROOT']} on {host}:{port}")
    logger.info(startup_message(port))
    flask_app.run(host=host, port=port)
