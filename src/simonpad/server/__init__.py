"""Static file server."""

from .app import MIME_TYPES, NOT_FOUND_BODY, content_type_for, create_app, resolve_port, serve, startup_message

__all__ = [
    "MIME_TYPES",
    "NOT_FOUND_BODY",
    "content_type_for",
    "create_app",
    "resolve_port",
    "serve",
    "startup_message",
]
