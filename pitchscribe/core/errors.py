"""Error types raised by the analysis pipeline and the WAV loader."""


class FrameError(ValueError):
    """Base class for invalid index-delimited framing requests."""


class FrameIndicesNotSorted(FrameError):
    def __init__(self):
        super().__init__("frame indices are not sorted in ascending order")


class FrameIndexOutOfBounds(FrameError):
    def __init__(self, index: int):
        self.index = index
        super().__init__(f"frame index `{index}` is out of bounds")


class DuplicateFrameIndices(FrameError):
    def __init__(self, index: int, first: int, second: int):
        self.index = index
        self.first = first
        self.second = second
        super().__init__(
            f"duplicate frame index `{index}` at positions {first} and {second}"
        )

    def __eq__(self, other):
        if not isinstance(other, DuplicateFrameIndices):
            return NotImplemented
        return (self.index, self.first, self.second) == (
            other.index,
            other.first,
            other.second,
        )

    __hash__ = ValueError.__hash__


class WavFileError(ValueError):
    """Base class for WAV files the decoder cannot handle."""


class UnsupportedBitDepth(WavFileError):
    def __init__(self, bit_depth):
        self.bit_depth = bit_depth
        super().__init__(
            f"unsupported bit depth `{bit_depth}`, expected 16, 24, or 32"
        )


class UnsupportedChannelCount(WavFileError):
    def __init__(self, channels: int):
        self.channels = channels
        super().__init__(
            f"unsupported channel count `{channels}`, expected mono or stereo audio"
        )
