"""Audio loading utilities."""

from pathlib import Path
from typing import Optional, Union

from .audio import AudioData, decode_wav


class AudioLoader:
    """Handles audio file loading."""

    SUPPORTED_FORMATS = {".wav"}

    def load(self, path: Union[str, Path]) -> AudioData:
        """
        Load a WAV file.

        Args:
            path: Path to audio file

        Returns:
            Decoded mono AudioData

        Raises:
            ValueError: If file format not supported
            FileNotFoundError: If file doesn't exist
            WavFileError: If the WAV bit depth or channel count is unsupported
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Audio file not found: {path}")

        if path.suffix.lower() not in self.SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported format: {path.suffix}. "
                f"Supported: {self.SUPPORTED_FORMATS}"
            )

        return decode_wav(path)

    def get_duration(self, audio: AudioData, sr: Optional[int] = None) -> float:
        """Get duration in seconds."""
        sr = sr or audio.sample_rate
        return audio.duration / sr
