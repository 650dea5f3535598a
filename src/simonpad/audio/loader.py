"""Sample loader for pad sample files."""

from pathlib import Path

import soundfile as sf

from simonpad.exceptions import SampleLoadError

from .data import AudioData


class SampleLoader:
    """
    Load audio files into AudioData structures.

    Handles WAV, FLAC, OGG and every other format soundfile supports.
    """

    def load(self, path: Path) -> AudioData:
        """
        Load an audio file.

        Args:
            path: Path to audio file

        Returns:
            AudioData containing the loaded audio

        Raises:
            SampleLoadError: If the file is missing, empty or unreadable
        """
        if not path.exists():
            raise SampleLoadError(path, "file not found")

        try:
            data, sample_rate = sf.read(str(path), dtype='float32')
            info = sf.info(str(path))
        except RuntimeError as e:  # LibsndfileError subclasses RuntimeError
            raise SampleLoadError(path, str(e)) from e

        if len(data) == 0:
            raise SampleLoadError(path, "file is empty")

        audio = AudioData.from_array(data, sample_rate)
        audio.format = info.format
        audio.subtype = info.subtype
        return audio
