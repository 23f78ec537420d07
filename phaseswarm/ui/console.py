#!/usr/bin/env python3
# phaseswarm/ui/console.py
from __future__ import annotations

import sys
import threading
from typing import TextIO

from .ansi import colorize

# Single shared print mutex for all UI output (status lines and logging).
PRINT_MUTEX = threading.Lock()

# Prefix used by every user-facing status line.
STATUS_PREFIX = "[PhaseSwarm]"


def print_line(text: str = "", *, file: TextIO | None = None, flush: bool = False) -> None:
    """Thread-safe single-line print. Resolves sys.stdout at call time."""
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def _status(color: str, message: str, file: TextIO | None) -> None:
    print_line(f"{colorize(STATUS_PREFIX, color)} {message}", file=file)


def log_success(message: str, *, file: TextIO | None = None) -> None:
    _status("green", message, file)


def log_error(message: str, *, file: TextIO | None = None) -> None:
    _status("red", message, file)


def log_info(message: str, *, file: TextIO | None = None) -> None:
    _status("blue", message, file)


def log_warning(message: str, *, file: TextIO | None = None) -> None:
    _status("yellow", message, file)


def print_banner(lines: list[str], color: str = "cyan", *, width: int = 38) -> None:
    """Print a ruled block of lines, e.g. the installer header."""
    rule = colorize("=" * width, color)
    print_line(rule)
    for line in lines:
        print_line(colorize(line, color))
    print_line(rule)
