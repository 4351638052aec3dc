# infrastructure/audio/numpy_audio_trimmer.py
# Implementation of ISilenceTrimmer using windowed RMS over NumPy arrays.

import numpy as np
from application.ports.audio_trimmer_port import ISilenceTrimmer
from trimmer.silence import trim_samples


class RmsSilenceTrimmer(ISilenceTrimmer):
    """Trim leading/trailing silence by comparing window RMS to a dBFS threshold."""

    def trim(
        self,
        samples: np.ndarray,
        threshold_db: float,
        window_size: int,
    ) -> np.ndarray:
        return trim_samples(samples, threshold_db, window_size)
