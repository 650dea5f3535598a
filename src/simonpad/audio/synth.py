"""Tone synthesis for pads without samples and for the error cue."""

import numpy as np

from simonpad.models import PadColor

from .data import AudioData

PAD_FREQUENCIES: dict[PadColor, float] = {
    PadColor.GREEN: 392.0,
    PadColor.RED: 523.25,
    PadColor.YELLOW: 329.63,
    PadColor.BLUE: 261.63,
}

PAD_TONE_MS = 300
PAD_TONE_PEAK = 0.25

ERROR_FREQUENCY = 150.0
ERROR_TONE_MS = 350
ERROR_TONE_PEAK = 0.6

ATTACK_MS = 10
RELEASE_MS = 20
SILENCE_LEVEL = 0.0001  # Exponential ramps cannot start at zero


class ToneSynth:
    """
    Renders short enveloped oscillator tones.

    Envelope: exponential attack to the peak over 10 ms, sustain for the
    tone length, then an exponential release over 20 ms.
    """

    def __init__(self, sample_rate: int = 44100):
        self.sample_rate = sample_rate

    def pad_tone(self, color: PadColor) -> AudioData:
        """Sine tone for a pad."""
        return self.render(PAD_FREQUENCIES[color], PAD_TONE_MS, PAD_TONE_PEAK, waveform="sine")

    def error_tone(self) -> AudioData:
        """Low sawtooth buzz played on a wrong press."""
        return self.render(ERROR_FREQUENCY, ERROR_TONE_MS, ERROR_TONE_PEAK, waveform="sawtooth")

    def render(self, frequency: float, duration_ms: int, peak: float, waveform: str = "sine") -> AudioData:
        """
        Render a mono tone.

        Args:
            frequency: Oscillator frequency in Hz
            duration_ms: Time from onset to start of release
            peak: Envelope peak (0.0 to 1.0)
            waveform: "sine" or "sawtooth"

        Raises:
            ValueError: For an unknown waveform
        """
        total_frames = self._frames(duration_ms + RELEASE_MS)
        t = np.arange(total_frames, dtype=np.float64) / self.sample_rate

        if waveform == "sine":
            wave = np.sin(2 * np.pi * frequency * t)
        elif waveform == "sawtooth":
            phase = (frequency * t) % 1.0
            wave = 2.0 * phase - 1.0
        else:
            raise ValueError(f"Unknown waveform: {waveform}")

        envelope = np.full(total_frames, peak, dtype=np.float64)
        attack = min(self._frames(ATTACK_MS), total_frames)
        envelope[:attack] = np.geomspace(SILENCE_LEVEL, peak, attack)
        release = self._frames(RELEASE_MS)
        envelope[total_frames - release:] = np.geomspace(peak, SILENCE_LEVEL, release)

        return AudioData.from_array((wave * envelope).astype(np.float32), self.sample_rate)

    def _frames(self, ms: int) -> int:
        return int(self.sample_rate * ms / 1000)
