"""In-memory audio buffer and WAV decoding."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

import numpy as np
import soundfile as sf

from ..analysis.frames import Frame, FrameExtractor
from ..core.constants import MAX_SAMPLE_VALUES
from ..core.errors import UnsupportedBitDepth, UnsupportedChannelCount

# libsndfile subtype -> (bit depth, read dtype)
_PCM_SUBTYPES = {
    "PCM_16": (16, "int16"),
    "PCM_24": (24, "int32"),
    "PCM_32": (32, "int32"),
}
_OTHER_BIT_DEPTHS = {"PCM_U8": 8, "PCM_S8": 8, "DOUBLE": 64}


@dataclass
class AudioData:
    """A mono sample buffer with its sample rate."""

    sample_rate: int  # Hz
    duration: int  # Length in samples
    samples: np.ndarray

    @classmethod
    def from_samples(cls, samples: Sequence[float], sample_rate: int) -> "AudioData":
        samples = np.asarray(samples, dtype=np.float64)
        return cls(sample_rate=sample_rate, duration=len(samples), samples=samples)

    @classmethod
    def read_wav_file(cls, path: Union[str, Path]) -> "AudioData":
        """Decode a WAV file. See `decode_wav`."""
        return decode_wav(path)

    @property
    def duration_seconds(self) -> float:
        return self.duration / self.sample_rate

    def get_frames(
        self,
        frame_width: int,
        step_size: int,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Frame]:
        """Fixed-width frames; see `FrameExtractor.get_frames`."""
        return FrameExtractor(self.samples).get_frames(frame_width, step_size, start, end)

    def get_frames_by_index(self, indices: Sequence[int]) -> List[Frame]:
        """Index-delimited frames; see `FrameExtractor.get_frames_by_index`."""
        return FrameExtractor(self.samples).get_frames_by_index(indices)


def decode_wav(path: Union[str, Path]) -> AudioData:
    """
    Decode a WAV file into normalized mono samples.

    Integer PCM samples are divided by the maximum value for their bit
    depth; float samples are passed through. Stereo files keep only the
    left channel.

    Raises:
        UnsupportedBitDepth: For bit depths other than 16, 24 or 32
        UnsupportedChannelCount: For files that are neither mono nor stereo
    """
    info = sf.info(str(path))

    if info.subtype in _PCM_SUBTYPES:
        bit_depth, dtype = _PCM_SUBTYPES[info.subtype]
    elif info.subtype == "FLOAT":
        bit_depth, dtype = 32, "float32"
    else:
        raise UnsupportedBitDepth(_OTHER_BIT_DEPTHS.get(info.subtype, info.subtype))

    if info.channels not in (1, 2):
        raise UnsupportedChannelCount(info.channels)

    data, sample_rate = sf.read(str(path), dtype=dtype, always_2d=True)

    if dtype == "float32":
        samples = data.astype(np.float64)
    else:
        raw = data.astype(np.int64)
        if bit_depth == 24:
            # libsndfile left-justifies 24-bit samples in 32-bit integers
            raw = raw >> 8
        samples = raw / MAX_SAMPLE_VALUES[bit_depth]

    # Left channel only
    samples = np.ascontiguousarray(samples[:, 0])

    return AudioData(sample_rate=int(sample_rate), duration=len(samples), samples=samples)
