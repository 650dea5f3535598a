"""Decorators for TUI components."""

from functools import wraps

from simonpad.exceptions import handle_errors as _handle_errors


def handle_action_errors(operation_name: str):
    """
    Decorator for TUI action methods that wraps the centralized error handler.

    Errors are shown with self.notify and not re-raised, so a failing
    action never takes the game down.

    Example:
        @handle_action_errors("toggle mute")
        def action_toggle_mute(self):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            handler = _handle_errors(
                operation_name=operation_name,
                user_notification=lambda msg: self.notify(msg, severity="error", timeout=5),
                re_raise=False,
                fallback_value=None
            )
            return handler(func)(self, *args, **kwargs)
        return wrapper
    return decorator
