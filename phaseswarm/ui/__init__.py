#!/usr/bin/env python3
# phaseswarm/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .ansi import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    set_color_enabled,
    color_enabled,
    colorize,
)
from .console import (
    PRINT_MUTEX,
    STATUS_PREFIX,
    print_line,
    print_banner,
    log_success,
    log_error,
    log_info,
    log_warning,
)
from .logging import init_logger, ColorizingStreamHandler, PlainFormatter

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "set_color_enabled",
    "color_enabled",
    "colorize",
    "PRINT_MUTEX",
    "STATUS_PREFIX",
    "print_line",
    "print_banner",
    "log_success",
    "log_error",
    "log_info",
    "log_warning",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
