"""Audio buffer structure.

AudioData is a plain slotted dataclass rather than a Pydantic model: it
carries a NumPy buffer that is neither serializable nor worth validating
on every tone.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import numpy.typing as npt


@dataclass(slots=True)
class AudioData:
    """Raw audio buffer ready to hand to the output device."""

    data: npt.NDArray[np.float32]  # Samples as float32
    sample_rate: int                # Sample rate in Hz
    num_channels: int               # 1=mono, 2=stereo
    num_frames: int                 # Samples per channel
    format: Optional[str] = None    # File format, e.g. 'WAV'
    subtype: Optional[str] = None   # File subtype, e.g. 'PCM_16'

    @classmethod
    def from_array(
        cls,
        data: npt.NDArray[np.float32],
        sample_rate: int
    ) -> "AudioData":
        """
        Create AudioData from a NumPy array.

        Args:
            data: Shape (num_frames,) for mono or (num_frames, num_channels)
            sample_rate: Sample rate in Hz

        Raises:
            ValueError: If the array is not 1D or 2D
        """
        if data.ndim == 1:
            num_channels = 1
            num_frames = len(data)
        elif data.ndim == 2:
            num_frames, num_channels = data.shape
        else:
            raise ValueError(f"Audio data must be 1D or 2D, got {data.ndim}D")

        if data.dtype != np.float32:
            data = data.astype(np.float32)

        return cls(
            data=data,
            sample_rate=sample_rate,
            num_channels=num_channels,
            num_frames=num_frames
        )

    @property
    def duration(self) -> float:
        """Duration in seconds."""
        return self.num_frames / self.sample_rate

    def scaled(self, gain: float) -> "AudioData":
        """Return a copy with every sample multiplied by `gain`."""
        return AudioData(
            data=(self.data * gain).astype(np.float32),
            sample_rate=self.sample_rate,
            num_channels=self.num_channels,
            num_frames=self.num_frames,
            format=self.format,
            subtype=self.subtype,
        )

    def get_info(self) -> dict:
        """Summary used by `simonpad audio test`."""
        info = {
            'duration': self.duration,
            'sample_rate': self.sample_rate,
            'num_channels': self.num_channels,
            'num_frames': self.num_frames,
        }
        if self.format:
            info['format'] = self.format
        if self.subtype:
            info['subtype'] = self.subtype
        return info
