"""Storage-related exceptions."""

from .base import SimonPadError


class StorageError(SimonPadError):
    """Persistent storage is unavailable."""
    pass


class ScoreStorageError(StorageError):
    """The high score file cannot be read or written."""

    def __init__(self, file_path: str, operation: str, reason: str):
        """
        Initialize score storage error.

        Args:
            file_path: Path of the storage file
            operation: "read" or "write"
            reason: The underlying error message
        """
        super().__init__(
            user_message=f"Could not {operation} the high score file.",
            technical_message=f"Failed to {operation} {file_path}: {reason}",
            recoverable=True,
            recovery_hint=(
                f"Check permissions of {file_path}. "
                "The high score is kept in memory until the file is writable again."
            ),
        )
        self.file_path = file_path
        self.operation = operation
        self.reason = reason
