#!/usr/bin/env python3
# phaseswarm/boot/boot.py
from __future__ import annotations
"""
Startup sequence for the phaseswarm CLI.

Steps run in order and are traced at DEBUG level once the logger exists;
a failing step propagates its exception to the caller.
"""

import logging
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from phaseswarm.commands import REGISTRY
from phaseswarm.db import AppConfig, load_config
from phaseswarm.interface import load_commands
from phaseswarm.ui import enable_windows_vt, init_logger, set_color_enabled


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    loaded_count: int


def _step(logger: Optional[logging.Logger], label: str, fn: Callable[[], Any]) -> Any:
    """Run a boot step, tracing its outcome when a logger is available."""
    try:
        out = fn()
    except Exception as exc:
        if logger is not None:
            logger.debug("[FAILED] %s (%s: %s)", label, type(exc).__name__, exc)
        raise
    if logger is not None:
        logger.debug("[  OK  ] %s", label)
    return out


def boot_sequence(
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> BootState:
    # ---------- console + config ----------
    enable_windows_vt()
    config: AppConfig = load_config(cwd=cwd, environ=environ, home=home)
    set_color_enabled(None if config.color else False)

    # ---------- logging ----------
    logger = init_logger("phaseswarm", level=config.log_level, logfile=config.log_file)
    _step(
        logger,
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
    )
    _step(logger, f"Load configuration (working dir {config.working_dir})", lambda: config)

    # ---------- commands ----------
    _step(logger, "Load command modules", load_commands)
    loaded_count = _step(logger, "Count command definitions", lambda: len(REGISTRY.all()))

    return BootState(config=config, logger=logger, loaded_count=loaded_count)
