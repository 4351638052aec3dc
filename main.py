#!/usr/bin/env python3
"""
wav-files-trim CLI
Recursively trims silence from the start and end of WAV files in a directory.

Usage:
    python main.py recordings/ trimmed/
    python main.py recordings/ trimmed/ --threshold -40
    python main.py recordings/ trimmed/ -t -35 --quiet
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from tqdm import tqdm

from trimmer.core import process_directory
from trimmer.errors import OutputDirectoryError
from trimmer.printer import OutputPrinter
from trimmer.utils import WINDOW_SIZE, SAMPLE_RATE, get_default_threshold


def build_parser(default_threshold: float) -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="wav-files-trim",
        description=(
            "Recursively trims silence from the start and end of WAV files "
            "in a directory."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  python main.py recordings/ trimmed/
  python main.py recordings/ trimmed/ --threshold -40

Input files must be mono 16-bit PCM at {SAMPLE_RATE} Hz; anything else is
reported and skipped. Silence is measured as RMS over {WINDOW_SIZE}-sample
(50 ms) windows.

Threshold guide (dBFS, 0 = full scale):
  -60  keep almost everything  | -50 default | -35  trim aggressively
        """,
    )

    parser.add_argument(
        "input_dir",
        metavar="INPUT_DIR",
        help="Input directory containing WAV files (processed recursively).",
    )
    parser.add_argument(
        "output_dir",
        metavar="OUTPUT_DIR",
        help="Output directory for trimmed WAV files (mirrors input structure).",
    )

    parser.add_argument(
        "--threshold",
        "-t",
        type=float,
        default=default_threshold,
        metavar="DB",
        help=(
            f"Silence detection threshold in dBFS (default: {default_threshold}; "
            "higher values trim more aggressively)."
        ),
    )

    out_group = parser.add_argument_group("Output Options")
    out_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress all output except errors.",
    )
    out_group.add_argument(
        "--no-color",
        "-n",
        action="store_true",
        help="Disable colored output (also auto-disabled when NO_COLOR env var is set).",
    )
    out_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-file details and tracebacks to stderr.",
    )

    return parser


def log_level(verbose: bool) -> int:
    """DEBUG (per-file tracebacks) with --verbose, otherwise WARNING."""
    return logging.DEBUG if verbose else logging.WARNING


def main(argv: Optional[Sequence[str]] = None) -> None:
    printer: OutputPrinter = OutputPrinter()

    try:
        default_threshold: float = get_default_threshold()
    except ValueError as exc:
        printer.error(str(exc))
        sys.exit(1)

    parser: argparse.ArgumentParser = build_parser(default_threshold)
    args: argparse.Namespace = parser.parse_args(argv)

    printer = OutputPrinter(quiet=args.quiet, no_color=args.no_color)

    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        if args.quiet:
            batch = process_directory(
                args.input_dir,
                args.output_dir,
                args.threshold,
                error_callback=printer.file_error,
            )
        else:
            with tqdm(desc="Trimming", unit="file", leave=False) as pbar:

                def cli_callback(step_idx: int, total: int, name: str) -> None:
                    pbar.total = total - 1
                    pbar.set_postfix_str(name)
                    if step_idx > 0:
                        pbar.update(1)

                batch = process_directory(
                    args.input_dir,
                    args.output_dir,
                    args.threshold,
                    progress_callback=cli_callback,
                    error_callback=printer.file_error,
                )

    except (FileNotFoundError, NotADirectoryError) as exc:
        printer.error(str(exc))
        sys.exit(1)
    except OutputDirectoryError as exc:
        printer.error(str(exc), hint="Check permissions on the output location.")
        sys.exit(1)
    except KeyboardInterrupt:
        printer.warning("Trimming cancelled.", hint="Files already written were kept.")
        sys.exit(130)

    printer.summary(batch.processed)


if __name__ == "__main__":
    main()
