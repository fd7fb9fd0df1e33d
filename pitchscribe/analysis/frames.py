"""Frame extraction from sample buffers."""

from dataclasses import dataclass
from typing import List, Optional, Sequence

import librosa
import numpy as np

from ..core.errors import (
    DuplicateFrameIndices,
    FrameIndexOutOfBounds,
    FrameIndicesNotSorted,
)


@dataclass
class Frame:
    """A contiguous slice of a sample buffer."""

    start_pos: int  # Offset of the first sample in the buffer
    samples: np.ndarray

    @property
    def width(self) -> int:
        return len(self.samples)

    def truncate(self, max_width: int) -> "Frame":
        """Return a frame holding at most the leading `max_width` samples."""
        return Frame(self.start_pos, self.samples[:max_width])

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return self.start_pos == other.start_pos and np.array_equal(
            self.samples, other.samples
        )


class FrameExtractor:
    """Slices a sample buffer into fixed-width or index-delimited frames."""

    def __init__(self, samples: Sequence[float]):
        self.samples = np.asarray(samples, dtype=np.float64)

    def __len__(self) -> int:
        return len(self.samples)

    @staticmethod
    def frame_count(
        length: int,
        frame_width: int,
        step_size: int,
        start: int = 0,
        end: Optional[int] = None,
    ) -> int:
        """Number of frames `get_frames` produces for the given parameters."""
        end = length if end is None else min(end, length)
        if end - start < frame_width:
            return 0
        return (end - start - frame_width) // step_size + 1

    def get_frames(
        self,
        frame_width: int,
        step_size: int,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Frame]:
        """
        Extract frames of a fixed width at regular intervals.

        Args:
            frame_width: Number of samples each frame contains
            step_size: Interval between the starts of consecutive frames
            start: First frame starts at this sample (default 0)
            end: Final frame ends at, but does not include, this sample
                (default and upper bound: buffer length)

        Returns:
            List of frames in ascending order of position

        Raises:
            ValueError: If frame_width or step_size is zero, or start is negative
        """
        if frame_width <= 0:
            raise ValueError(f"frame width must be positive, got {frame_width}")
        if step_size <= 0:
            raise ValueError(f"step size must be positive, got {step_size}")

        start = 0 if start is None else start
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        end = len(self.samples) if end is None else min(end, len(self.samples))

        if end - start < frame_width:
            return []

        frames = librosa.util.frame(
            self.samples[start:end],
            frame_length=frame_width,
            hop_length=step_size,
            axis=0,
        )

        return [
            Frame(start_pos=start + i * step_size, samples=np.array(frame))
            for i, frame in enumerate(frames)
        ]

    def get_frames_by_index(self, indices: Sequence[int]) -> List[Frame]:
        """
        Extract frames that start at the given indices.

        Each frame runs up to (not including) the next index; the final
        frame runs to the end of the buffer.

        Raises:
            FrameIndicesNotSorted: If indices are not in ascending order
            FrameIndexOutOfBounds: If an index is negative or past the end
                of the buffer
            DuplicateFrameIndices: If two adjacent indices are equal
        """
        indices = list(indices)
        if any(a > b for a, b in zip(indices, indices[1:])):
            raise FrameIndicesNotSorted()

        n_samples = len(self.samples)
        frames = []

        for i, index in enumerate(indices):
            if not 0 <= index < n_samples:
                raise FrameIndexOutOfBounds(index)

            if i < len(indices) - 1:
                next_index = indices[i + 1]
                if not 0 <= next_index < n_samples:
                    raise FrameIndexOutOfBounds(next_index)
                if index == next_index:
                    raise DuplicateFrameIndices(index, i, i + 1)
                end = next_index
            else:
                end = n_samples

            frames.append(Frame(start_pos=index, samples=self.samples[index:end].copy()))

        return frames
