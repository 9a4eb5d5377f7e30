"""Coloured CLI output helpers.

Listings and confirmations go to stdout; errors go to stderr.
"""

import sys
from typing import TextIO

GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _colorize(text: str, color: str, stream: TextIO) -> str:
    """Apply color to text when the target stream is a terminal."""
    if hasattr(stream, "isatty") and stream.isatty():
        return f"{color}{text}{RESET}"
    return text


def _emit(marker: str, color: str, message: str, stream: TextIO) -> None:
    print(f"{_colorize(marker, color, stream)} {message}", file=stream)


def success(message: str) -> None:
    """Print a confirmation with a green checkmark."""
    _emit(CHECK, GREEN, message, sys.stdout)


def info(message: str) -> None:
    """Print a note with a yellow bullet."""
    _emit(BULLET, YELLOW, message, sys.stdout)


def header(message: str) -> None:
    """Print a section title (board column, profile name) in blue."""
    print(_colorize(message, BLUE, sys.stdout))


def error(message: str) -> None:
    """Print an error with a red cross to stderr."""
    _emit(CROSS, RED, message, sys.stderr)
