"""Audio output device access through sounddevice."""

import logging
from types import ModuleType
from typing import Optional

from simonpad.exceptions import AudioBackendUnavailableError

from .data import AudioData

logger = logging.getLogger(__name__)


def _import_sounddevice() -> ModuleType:
    """
    Import sounddevice on first use.

    sounddevice raises OSError at import time when the PortAudio library is
    missing, so importing it at module level would make the whole audio
    package unusable on such machines.

    Raises:
        AudioBackendUnavailableError: If sounddevice or PortAudio is missing
    """
    try:
        import sounddevice
    except (ImportError, OSError) as e:
        raise AudioBackendUnavailableError(str(e)) from e
    return sounddevice


class AudioDevice:
    """
    Fire-and-forget playback on a sounddevice output.

    Each play() replaces whatever the device was playing, which matches
    the game's one-cue-at-a-time sound design.
    """

    def __init__(self, device: Optional[int] = None):
        """
        Initialize audio device.

        Args:
            device: Output device ID (None for the system default)

        Raises:
            AudioBackendUnavailableError: If sounddevice cannot be imported
        """
        self._sd = _import_sounddevice()
        self.device = device

    def probe(self) -> None:
        """
        Check that the configured output device exists and can output audio.

        Raises:
            AudioBackendUnavailableError: If no usable output device is found
        """
        sd = self._sd
        try:
            info = sd.query_devices(self.device, kind='output')
        except (sd.PortAudioError, ValueError) as e:
            raise AudioBackendUnavailableError(str(e), device_id=self.device) from e

        if info['max_output_channels'] < 1:
            raise AudioBackendUnavailableError(
                f"device '{info['name']}' has no output channels", device_id=self.device
            )
        logger.info(f"Audio device: {info['name']} ({info['default_samplerate']:.0f} Hz)")

    def play(self, audio: AudioData) -> None:
        """Start playing `audio` without blocking. Playback errors are logged."""
        try:
            self._sd.play(audio.data, audio.sample_rate, device=self.device)
        except Exception as e:
            logger.warning(f"Audio playback failed: {e}")

    @property
    def device_name(self) -> str:
        """Name of the configured output device."""
        sd = self._sd
        try:
            info = sd.query_devices(self.device, kind='output')
        except (sd.PortAudioError, ValueError):
            return "Unknown Device"
        suffix = "" if self.device is not None else " (default)"
        return f"{info['name']}{suffix}"

    @staticmethod
    def list_output_devices() -> list[tuple[int, str, str]]:
        """
        List output-capable devices.

        Returns:
            List of (device_id, device_name, host_api_name)

        Raises:
            AudioBackendUnavailableError: If sounddevice cannot be imported
        """
        sd = _import_sounddevice()
        hostapis = sd.query_hostapis()
        return [
            (i, device['name'], hostapis[device['hostapi']]['name'])
            for i, device in enumerate(sd.query_devices())
            if device['max_output_channels'] > 0
        ]

    @staticmethod
    def get_default_device() -> int:
        """
        Get default output device ID (-1 when none is configured).

        Raises:
            AudioBackendUnavailableError: If sounddevice cannot be imported
        """
        return _import_sounddevice().default.device[1]
