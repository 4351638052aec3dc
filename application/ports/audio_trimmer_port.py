# application/ports/audio_trimmer_port.py
# Port interface for silence trimming.

from abc import ABC, abstractmethod
import numpy as np


class ISilenceTrimmer(ABC):
    """Abstract base class for leading/trailing silence trimmers."""

    @abstractmethod
    def trim(
        self,
        samples: np.ndarray,
        threshold_db: float,
        window_size: int,
    ) -> np.ndarray:
        """
        Remove leading and trailing silence from a mono sample buffer.

        Args:
            samples:      Mono audio as a 1-D int16 array.
            threshold_db: Silence threshold in dBFS (0 dBFS = 32768).
            window_size:  Samples per RMS window. Must be positive.

        Returns:
            A new int16 array holding the non-silent sub-range, or an
            empty array if every window is silent.
        """
        ...
