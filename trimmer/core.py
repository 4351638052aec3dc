import logging
import os
from pathlib import Path
from typing import Optional, Callable

import numpy as np

from application.dto.batch_dto import BatchResultDTO, FileResultDTO
from application.dto.wav_dto import WavFormat
from application.ports.audio_trimmer_port import ISilenceTrimmer
from application.ports.wav_store_port import IWavStore
from infrastructure.audio import RmsSilenceTrimmer, SoundfileWavStore
from trimmer.errors import OutputDirectoryError
from trimmer.utils import (
    REQUIRED_FORMAT,
    WINDOW_SIZE,
    discover_wav_files,
    get_output_path,
    prepare_output_dir,
    validate_input_dir,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]
ErrorCallback = Callable[[str, str], None]


def trim_wav(
    input_path   : str,
    output_path  : str,
    threshold_db : float,
    trimmer      : Optional[ISilenceTrimmer] = None,
    wav_store    : Optional[IWavStore] = None,
) -> FileResultDTO:
    """
    Trim one WAV file: read → validate → trim → write.

    Args:
        input_path:   Source WAV (mono, 16-bit PCM, 16 kHz).
        output_path:  Destination WAV. Parent directories are created.
        threshold_db: Silence threshold in dBFS.
        trimmer:      ISilenceTrimmer to use (default RmsSilenceTrimmer).
        wav_store:    IWavStore to use (default SoundfileWavStore).

    Raises:
        OutputDirectoryError, WavReadError, UnsupportedFormatError,
        WavWriteError.
    """
    trimmer = trimmer or RmsSilenceTrimmer()
    wav_store = wav_store or SoundfileWavStore()

    parent: Path = Path(output_path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Failed to create output subdirectory '{parent}': {exc}"
        ) from exc

    samples: np.ndarray
    wav_format: WavFormat
    samples, wav_format = wav_store.read(input_path, REQUIRED_FORMAT)

    trimmed: np.ndarray = trimmer.trim(samples, threshold_db, WINDOW_SIZE)

    # Output keeps the source header fields; only the length changes
    wav_store.write(output_path, trimmed, wav_format)

    logger.info(
        "trimmed %s: %d -> %d samples", input_path, len(samples), len(trimmed)
    )
    return FileResultDTO(
        input_path=input_path,
        output_path=output_path,
        samples_in=len(samples),
        samples_out=len(trimmed),
    )


def process_directory(
    input_dir    : str,
    output_dir   : str,
    threshold_db : float,
    trimmer      : Optional[ISilenceTrimmer] = None,
    wav_store    : Optional[IWavStore] = None,
    progress_callback : Optional[ProgressCallback] = None,
    error_callback    : Optional[ErrorCallback] = None,
) -> BatchResultDTO:
    """
    Trim every .wav file under *input_dir* into a mirrored tree under *output_dir*.

    A failing file is recorded in the result (and reported through
    *error_callback*) without stopping the batch.

    Args:
        progress_callback: Optional callback (step_idx, total_steps, step_name),
                           called before each file and once when done.
        error_callback:    Optional callback (input_path, message).

    Raises:
        FileNotFoundError / NotADirectoryError: input root is missing.
        OutputDirectoryError: output root cannot be created.
    """
    # ── Fatal checks ─────────────────────────────────────────────
    validate_input_dir(input_dir)
    prepare_output_dir(output_dir)

    trimmer = trimmer or RmsSilenceTrimmer()
    wav_store = wav_store or SoundfileWavStore()

    files: list[str] = discover_wav_files(input_dir)
    batch: BatchResultDTO = BatchResultDTO(
        input_dir=input_dir,
        output_dir=output_dir,
        total=len(files),
    )
    logger.info("found %d WAV files under %s", len(files), input_dir)

    def _report(step_idx: int, name: str) -> None:
        if progress_callback:
            progress_callback(step_idx, len(files) + 1, name)

    for idx, input_path in enumerate(files):
        _report(idx, os.path.basename(input_path))
        output_path: str = ""
        try:
            output_path = get_output_path(input_dir, output_dir, input_path)
            result: FileResultDTO = trim_wav(
                input_path, output_path, threshold_db, trimmer, wav_store
            )
        except Exception as exc:
            # Per-file boundary: record, report, continue
            logger.debug("file=%s failed", input_path, exc_info=True)
            result = FileResultDTO(
                input_path=input_path,
                output_path=output_path,
                status="error",
                error=str(exc),
            )
            if error_callback:
                error_callback(input_path, str(exc))
        batch.add(result)

    _report(len(files), "Done")
    logger.info(
        "processed %d/%d files (%d failed)",
        batch.processed, batch.total, len(batch.failed_paths),
    )
    return batch
