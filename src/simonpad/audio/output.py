"""AudioOutput implementations used by the RoundController."""

import logging
from pathlib import Path
from typing import Optional, Protocol

from simonpad.exceptions import AudioBackendUnavailableError, collect_errors
from simonpad.models import GameConfig, PadColor
from simonpad.protocols import AudioOutput

from .data import AudioData
from .device import AudioDevice
from .loader import SampleLoader
from .synth import ToneSynth

logger = logging.getLogger(__name__)

SAMPLE_GAIN = 0.9


def sample_filename(color: PadColor) -> str:
    """File name of the sample for a pad, e.g. 'piano-green.wav'."""
    return f"piano-{color.value}.wav"


class Player(Protocol):
    """Anything that can start playing an AudioData buffer."""

    def play(self, audio: AudioData) -> None:
        ...


class SilentAudioOutput:
    """Used when no audio output is available."""

    def play_pad(self, color: PadColor) -> None:
        pass

    def play_error(self) -> None:
        pass


class ToneAudioOutput:
    """Plays synthesized tones. All buffers are rendered once up front."""

    def __init__(self, player: Player, synth: Optional[ToneSynth] = None):
        self._player = player
        self._synth = synth or ToneSynth()
        self._pad_buffers: dict[PadColor, AudioData] = {
            color: self._synth.pad_tone(color) for color in PadColor
        }
        self._error_buffer = self._synth.error_tone()

    def play_pad(self, color: PadColor) -> None:
        self._player.play(self._pad_buffers[color])

    def play_error(self) -> None:
        self._player.play(self._error_buffer)


class SampleAudioOutput(ToneAudioOutput):
    """
    Plays per-pad samples from a sounds directory.

    Pads whose sample is missing or unreadable keep the synthesized tone,
    so a partial sample set still gives every pad a sound. The error cue
    is always synthesized.
    """

    def __init__(
        self,
        player: Player,
        sounds_dir: Path,
        synth: Optional[ToneSynth] = None,
        loader: Optional[SampleLoader] = None,
        gain: float = SAMPLE_GAIN,
    ):
        super().__init__(player, synth)
        self.sounds_dir = sounds_dir
        self.loaded: set[PadColor] = set()

        loader = loader or SampleLoader()
        collector = collect_errors("load pad samples")
        for color in PadColor:
            with collector.try_operation(f"load {color.value}"):
                sample = loader.load(sounds_dir / sample_filename(color))
                self._pad_buffers[color] = sample.scaled(gain)
                self.loaded.add(color)

        if collector.has_errors:
            logger.warning(f"{collector.get_summary()}\nUsing synthesized tones for those pads")
        logger.info(f"Loaded {len(self.loaded)} of {len(PadColor)} pad samples from {sounds_dir}")


def create_audio_output(config: GameConfig) -> AudioOutput:
    """
    Pick the best AudioOutput the runtime supports.

    - No sounddevice/PortAudio or no output device: SilentAudioOutput
    - `sounds_dir` configured: SampleAudioOutput
    - Otherwise: ToneAudioOutput
    """
    try:
        device = AudioDevice(config.audio_device)
        device.probe()
    except AudioBackendUnavailableError as e:
        logger.warning(e.get_full_message())
        return SilentAudioOutput()

    if config.sounds_dir is not None:
        return SampleAudioOutput(device, config.sounds_dir)
    return ToneAudioOutput(device)
