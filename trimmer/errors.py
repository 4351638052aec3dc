# trimmer/errors.py
# Exception taxonomy for the trim pipeline.
# Fatal errors abort the run; everything else is caught per file.


class TrimError(Exception):
    """Base class for errors raised by the trim pipeline."""


class OutputDirectoryError(TrimError):
    """The output root (or a needed subdirectory) could not be created."""


class WavReadError(TrimError):
    """The input WAV container could not be opened or decoded."""


class WavWriteError(TrimError):
    """The output WAV file could not be created, written or finalized."""


class UnsupportedFormatError(TrimError, ValueError):
    """The input WAV is not mono 16-bit integer PCM at 16 kHz."""
