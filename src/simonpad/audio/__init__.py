"""Audio output: pad samples, synthesized tones and silence."""

from .data import AudioData
from .device import AudioDevice
from .loader import SampleLoader
from .output import (
    SampleAudioOutput,
    SilentAudioOutput,
    ToneAudioOutput,
    create_audio_output,
    sample_filename,
)
from .synth import PAD_FREQUENCIES, ToneSynth

__all__ = [
    "AudioData",
    "AudioDevice",
    "SampleLoader",
    "ToneSynth",
    "PAD_FREQUENCIES",
    "SampleAudioOutput",
    "SilentAudioOutput",
    "ToneAudioOutput",
    "create_audio_output",
    "sample_filename",
]
