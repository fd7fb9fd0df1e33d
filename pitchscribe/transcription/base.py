"""Base class for transcribers."""

from abc import ABC, abstractmethod
from typing import List

import numpy as np

from ..core import Note


class Transcriber(ABC):
    """Turns a mono sample buffer into an ordered note sequence."""

    @abstractmethod
    def transcribe(self, audio: np.ndarray, sr: int) -> List[Note]:
        """
        Transcribe audio to notes.

        Args:
            audio: Mono samples, roughly in [-1, 1]
            sr: Sample rate in Hz

        Returns:
            Notes in temporal order, positioned in samples
        """
        pass
