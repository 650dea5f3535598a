"""Audio-related exceptions.

Audio problems never stop a game: these are raised by the low-level audio
helpers and caught by the AudioOutput implementations, which log them and
degrade to a synthesized tone or to silence.
"""

from pathlib import Path

from .base import SimonPadError


class AudioError(SimonPadError):
    """Audio playback or loading failed."""

    def __init__(self, user_message: str, device_id: int | None = None, **kwargs):
        """
        Initialize audio error.

        Args:
            user_message: User-friendly error message
            device_id: The device ID involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.device_id = device_id


class AudioBackendUnavailableError(AudioError):
    """No usable audio backend or output device."""

    def __init__(self, reason: str, device_id: int | None = None):
        """
        Initialize backend-unavailable error.

        Args:
            reason: Why the backend could not be used
            device_id: The device ID that was requested
        """
        super().__init__(
            user_message="No audio output is available. The game will run silently.",
            technical_message=f"Audio backend unavailable (device={device_id}): {reason}",
            device_id=device_id,
            recoverable=True,
            recovery_hint=(
                "Install PortAudio for your platform and run 'simonpad audio list' "
                "to see available devices."
            ),
        )
        self.reason = reason


class SampleLoadError(AudioError):
    """A pad sample could not be loaded."""

    def __init__(self, path: Path, reason: str):
        """
        Initialize sample load error.

        Args:
            path: Path of the sample file
            reason: Why loading failed
        """
        super().__init__(
            user_message=f"Could not load sample '{path.name}'.",
            technical_message=f"Failed to load sample {path}: {reason}",
            recoverable=True,
            recovery_hint="A synthesized tone is used instead. Check the sounds directory.",
        )
        self.path = path
        self.reason = reason
