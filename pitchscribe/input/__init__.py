"""Input layer - audio buffers and WAV decoding."""

from .audio import AudioData, decode_wav
from .loader import AudioLoader

__all__ = ["AudioData", "AudioLoader", "decode_wav"]
