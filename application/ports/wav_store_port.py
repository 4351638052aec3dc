# application/ports/wav_store_port.py
# Port interface for reading and writing WAV files.
# Domain layer: must not import infrastructure or adapter code.

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from application.dto.wav_dto import WavFormat


class IWavStore(ABC):

    @abstractmethod
    def read(self, path: str, expected: WavFormat) -> Tuple[np.ndarray, WavFormat]:
        """
        Decode every sample of *path*.

        Raises UnsupportedFormatError if the header does not match
        *expected* (channels, rate, bit depth and encoding) or the
        container is not RIFF/WAVE.
        """
        ...

    @abstractmethod
    def write(self, path: str, samples: np.ndarray, wav_format: WavFormat) -> None:
        """Write *samples* to *path* using the header fields of *wav_format*."""
        ...
