# trimmer/printer.py
# Centralized output formatter for the wav-files-trim CLI.

import os
import sys
from typing import Optional, TextIO

from tqdm import tqdm


class OutputPrinter:
    """
    Output formatter for the wav-files-trim CLI.

    - Results go to stdout, errors and warnings to stderr.
    - Colour is optional (--no-color or the NO_COLOR env var) and only
      used when the target stream is a terminal.
    - Quiet mode hides everything except errors.
    """

    SYMBOLS : dict[str, str] = {
        "error"   : "✖",
        "warning" : "!",
        "hint"    : "→",
    }

    COLORS : dict[str, str] = {
        "red"    : "31",
        "yellow" : "33",
        "cyan"   : "36",
    }

    def __init__(self, quiet : bool = False, no_color : bool = False) -> None:
        self.quiet    : bool = quiet
        self.no_color : bool = no_color or bool(os.environ.get("NO_COLOR", ""))

    # ── Internal ─────────────────────────────────────────────────

    def _colorize(self, text : str, code : str, stream : Optional[TextIO] = None) -> str:
        """Apply ANSI color code if color is enabled and *stream* is a terminal."""
        if self.no_color:
            return text
        if stream is not None and not stream.isatty():
            return text
        return f"\033[{code}m{text}\033[0m"

    # ── Outputs ──────────────────────────────────────────────────

    def summary(self, processed : int) -> None:
        """Print the end-of-run count of successfully trimmed files."""
        if self.quiet:
            return
        print(f"Processed {processed} WAV files.")

    def file_error(self, path : str, message : str) -> None:
        """Report a per-file failure on stderr without disturbing a progress bar."""
        line : str = self._colorize(
            f"Error processing {path}: {message}", self.COLORS["red"], sys.stderr
        )
        tqdm.write(line, file=sys.stderr)

    def error(self, message : str, hint : Optional[str] = None) -> None:
        """Print a fatal error to stderr with an optional fix hint."""
        symbol : str = self._colorize(self.SYMBOLS["error"], self.COLORS["red"], sys.stderr)
        msg    : str = self._colorize(message, self.COLORS["red"], sys.stderr)
        print(f"{symbol}  {msg}", file=sys.stderr)
        if hint:
            h : str = self._colorize(
                f"{self.SYMBOLS['hint']} {hint}", self.COLORS["cyan"], sys.stderr
            )
            print(f"    {h}", file=sys.stderr)

    def warning(self, message : str, hint : Optional[str] = None) -> None:
        if self.quiet:
            return
        symbol : str = self._colorize(self.SYMBOLS["warning"], self.COLORS["yellow"], sys.stderr)
        msg    : str = self._colorize(message, self.COLORS["yellow"], sys.stderr)
        print(f"{symbol} {msg}", file=sys.stderr)
        if hint:
            h : str = self._colorize(
                f"{self.SYMBOLS['hint']} {hint}", self.COLORS["cyan"], sys.stderr
            )
            print(f"    {h}", file=sys.stderr)
