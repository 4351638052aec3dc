from typing import Sequence, Union

import numpy as np

from trimmer.utils import FULL_SCALE

SampleBuffer = Union[np.ndarray, Sequence[int]]


def rms(chunk: SampleBuffer) -> float:
    """
    Root-mean-square amplitude of a chunk of int16 samples.

    Samples are widened to float64 before squaring, so full-scale input
    cannot overflow. An empty chunk returns 0.0.
    """
    values: np.ndarray = np.asarray(chunk, dtype=np.float64)
    if values.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(values * values)))


def db_to_rms_threshold(threshold_db: float) -> float:
    """Convert a dBFS threshold to a linear RMS level (0 dBFS = 32768)."""
    return float(10.0 ** (threshold_db / 20.0) * FULL_SCALE)


def trim_samples(
    samples: SampleBuffer,
    threshold_db: float,
    window_size: int,
) -> np.ndarray:
    """
    Remove leading and trailing silence from a mono int16 buffer.

    The start boundary is the first window (on a grid anchored at index 0)
    whose RMS is strictly above the threshold. The end boundary is the
    right edge of the last such window on a grid anchored at the end of
    the buffer. Everything outside [start, end) is dropped.

    A higher (less negative) threshold_db raises the bar for "not silence"
    and therefore trims more.

    Args:
        samples:      1-D int16 samples. Not modified.
        threshold_db: Silence threshold in dBFS.
        window_size:  Samples per RMS window. Must be positive; this is
                      not checked here.

    Returns:
        A new int16 array, empty if no window exceeds the threshold.
    """
    data: np.ndarray = np.asarray(samples, dtype=np.int16)
    length: int = len(data)
    if length == 0:
        return np.empty(0, dtype=np.int16)

    threshold_rms: float = db_to_rms_threshold(threshold_db)

    # Forward scan: windows [i, i + w) starting at 0
    start: int = length
    for i in range(0, length, window_size):
        if rms(data[i:i + window_size]) > threshold_rms:
            start = i
            break

    # Backward scan: windows [i - w, i) ending at len, len - w, ... 0
    end: int = 0
    for i in range(length, -1, -window_size):
        if rms(data[max(0, i - window_size):i]) > threshold_rms:
            end = i
            break

    if start < end:
        return data[start:end].copy()
    return np.empty(0, dtype=np.int16)
