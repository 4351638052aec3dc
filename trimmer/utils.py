import logging
import os
from pathlib import Path
from typing import List

from application.dto.wav_dto import WavFormat
from trimmer.errors import OutputDirectoryError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# Audio constants
SAMPLE_RATE: int = 16_000
WINDOW_SIZE: int = 800          # 50 ms at 16 kHz
FULL_SCALE: float = 32768.0     # 0 dBFS for signed 16-bit samples
WAV_EXTENSION: str = ".wav"     # matched case-sensitively
WAV_CONTAINERS: tuple[str, ...] = ("WAV", "WAVEX")

REQUIRED_FORMAT: WavFormat = WavFormat(
    channels=1,
    sample_rate=SAMPLE_RATE,
    bits_per_sample=16,
    encoding="int",
)

# Default parameters
DEFAULT_PARAMS: dict[str, float] = {
    "threshold": -50.0,
}

THRESHOLD_ENV_VAR: str = "WAV_TRIM_THRESHOLD_DB"


def get_default_threshold() -> float:
    """Return the CLI default threshold, honouring WAV_TRIM_THRESHOLD_DB."""
    raw: str = os.environ.get(THRESHOLD_ENV_VAR, "").strip()
    if not raw:
        return DEFAULT_PARAMS["threshold"]
    try:
        return float(raw)
    except ValueError:
        raise ValueError(
            f"Invalid {THRESHOLD_ENV_VAR} value: '{raw}'.\n"
            f"    → Use a number in dBFS, e.g. {THRESHOLD_ENV_VAR}=-45"
        ) from None


# Validation helpers
def validate_input_dir(path: str) -> None:
    """Raise FileNotFoundError / NotADirectoryError if the input root is invalid."""
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Input directory does not exist: '{path}'.\n"
            f"    → Check the path and try again."
        )
    if not os.path.isdir(path):
        raise NotADirectoryError(
            f"Input path is not a directory: '{path}'.\n"
            f"    → Provide a directory containing .wav files."
        )


def prepare_output_dir(path: str) -> None:
    """Create the output root (and parents). Raise OutputDirectoryError on failure."""
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Failed to create output directory '{path}': {exc}"
        ) from exc


def validate_wav_format(actual: WavFormat, expected: WavFormat = REQUIRED_FORMAT) -> None:
    """Raise UnsupportedFormatError unless *actual* is a WAV matching *expected* exactly."""
    if actual.container not in WAV_CONTAINERS:
        raise UnsupportedFormatError(
            f"Unsupported container: got {actual.container}, expected RIFF/WAVE"
        )
    if (
        actual.channels != expected.channels
        or actual.sample_rate != expected.sample_rate
        or actual.bits_per_sample != expected.bits_per_sample
        or actual.encoding != expected.encoding
    ):
        raise UnsupportedFormatError(
            f"Unsupported WAV format: got {actual.describe()}, "
            f"expected mono 16-bit PCM at 16kHz"
        )


# Path helpers

def get_output_path(input_root: str, output_root: str, file_path: str) -> str:
    """
    Mirror *file_path* from under *input_root* onto *output_root*.

    Example: in/, out/, in/a/b.wav  →  out/a/b.wav

    Raises ValueError if *file_path* is not inside *input_root*.
    """
    rel: Path = Path(file_path).relative_to(input_root)
    return str(Path(output_root) / rel)


def is_wav_file(path: Path) -> bool:
    """Regular, non-symlinked file with a lower-case .wav extension."""
    return path.suffix == WAV_EXTENSION and path.is_file() and not path.is_symlink()


def _log_walk_error(exc: OSError) -> None:
    logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc)


def discover_wav_files(input_root: str) -> List[str]:
    """Recursively list .wav files under *input_root*, sorted by full path."""
    found: List[str] = []
    for dirpath, _, filenames in os.walk(
        input_root, onerror=_log_walk_error, followlinks=False
    ):
        for name in filenames:
            candidate: Path = Path(dirpath) / name
            if is_wav_file(candidate):
                found.append(str(candidate))
    return sorted(found)
