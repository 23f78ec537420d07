#!/usr/bin/env python3
# phaseswarm/cli.py
from __future__ import annotations

"""
Console entry point.

Usage:
    phaseswarm init [--global|--local]   Install commands to .claude/commands/
    phaseswarm list [--all|-a]           List registered PhaseSwarm projects
    phaseswarm help [command]            Show help
"""

import sys
from pathlib import Path
from typing import Mapping, Sequence

from phaseswarm.boot import boot_sequence
from phaseswarm.commands import CommandContext
from phaseswarm.interface import EXIT_FAILURE, handle_args
from phaseswarm.ui import log_error


def main(
    argv: Sequence[str] | None = None,
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> int:
    """Run one command and return its exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        state = boot_sequence(cwd=cwd, environ=environ, home=home)
    except ValueError as exc:
        log_error(f"Invalid configuration: {exc}")
        return EXIT_FAILURE

    ctx = CommandContext(config=state.config, logger=state.logger)
    return handle_args(args, ctx)


if __name__ == "__main__":
    raise SystemExit(main())
