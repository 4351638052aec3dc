# infrastructure/audio/soundfile_wav_store.py
# Implementation of IWavStore on top of libsndfile (soundfile).

import logging
from typing import Tuple

import numpy as np
import soundfile as sf

from application.dto.wav_dto import WavFormat
from application.ports.wav_store_port import IWavStore
from trimmer.errors import WavReadError, WavWriteError
from trimmer.utils import validate_wav_format

logger = logging.getLogger(__name__)


def _describe(wav: sf.SoundFile) -> WavFormat:
    return WavFormat.from_subtype(
        channels=wav.channels,
        sample_rate=wav.samplerate,
        subtype=wav.subtype,
        container=wav.format,
    )


class SoundfileWavStore(IWavStore):
    """Read and write PCM WAV files as int16 NumPy arrays."""

    def read(self, path: str, expected: WavFormat) -> Tuple[np.ndarray, WavFormat]:
        try:
            wav: sf.SoundFile = sf.SoundFile(path)
        except (sf.SoundFileError, OSError) as exc:
            raise WavReadError(f"Failed to open input WAV file: {exc}") from exc

        with wav:
            wav_format: WavFormat = _describe(wav)
            validate_wav_format(wav_format, expected)
            try:
                samples: np.ndarray = wav.read(dtype="int16")
            except (sf.SoundFileError, OSError) as exc:
                raise WavReadError(f"Failed to read samples: {exc}") from exc

        logger.debug("read %s: %d samples (%s)", path, len(samples), wav_format.describe())
        return samples, wav_format

    def write(self, path: str, samples: np.ndarray, wav_format: WavFormat) -> None:
        try:
            out: sf.SoundFile = sf.SoundFile(
                path,
                mode="w",
                samplerate=wav_format.sample_rate,
                channels=wav_format.channels,
                subtype=wav_format.subtype,
                format=wav_format.container,
            )
        except (sf.SoundFileError, OSError, ValueError) as exc:
            raise WavWriteError(f"Failed to create output WAV file: {exc}") from exc

        try:
            with out:
                if len(samples):
                    out.write(np.ascontiguousarray(samples, dtype=np.int16))
        except (sf.SoundFileError, OSError) as exc:
            raise WavWriteError(f"Failed to write WAV file: {exc}") from exc
