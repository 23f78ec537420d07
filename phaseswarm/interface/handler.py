#!/usr/bin/env python3
# phaseswarm/interface/handler.py
from __future__ import annotations

"""
Command dispatch and help formatting.

This is the error boundary of the tool: every failure raised by a command is
reported here as a single status line and converted into an exit code.
"""

import difflib
import inspect
from typing import Sequence

from phaseswarm import __version__
from phaseswarm.commands import REGISTRY, CommandContext, CommandResult
from phaseswarm.install import SLASH_COMMANDS
from phaseswarm.interface.parser import UsageError, bind_args, build_usage
from phaseswarm.ui import colorize, log_error, print_line

PROGRAM = "phaseswarm"
PROJECT_URL = "https://github.com/bryhearnchi-bot/phaseswarm"

# Short hint shown in unknown command errors
HELP_TEXT = f'Run "{PROGRAM} help" for usage information.'

HELP_NAMES = {"help", "--help", "-h"}
VERSION_NAMES = {"version", "--version", "-V"}

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------


def _suggest_similar_names(name: str) -> str:
    """Return a short suggestion string for misspelled commands."""
    universe = REGISTRY.names() + ["help", "version"]
    matches = difflib.get_close_matches(name.lower(), universe, n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""


def format_help() -> str:
    """Render the top-level help screen."""
    rows = [
        (cmd.name, cmd.description)
        for cmd in sorted(REGISTRY.all(), key=lambda c: c.name)
    ]
    rows += [("help", "Show this help message"), ("version", "Show the installed version")]
    width = max(len(name) for name, _ in rows) + 2

    lines = [
        "",
        colorize(
            "PhaseSwarm - Multi-phase, multi-agent execution planning for Claude Code", "cyan"),
        "",
        "Usage:",
        f"  {PROGRAM} <command> [options]",
        "",
        "Commands:",
    ]
    for name, description in rows:
        padding = " " * (width - len(name))
        lines.append(f"  {colorize(name, 'green')}{padding}{description}")
    lines += ["", "After installation, use these commands in Claude Code:"]
    slash_width = max(len(name) for name in SLASH_COMMANDS) + 3
    for name, description in SLASH_COMMANDS.items():
        padding = " " * (slash_width - len(name) - 1)
        lines.append(f"  {colorize('/' + name, 'blue')}{padding}{description}")
    lines += ["", f"Learn more: {PROJECT_URL}", ""]
    return "\n".join(lines)


def format_command_help(name: str) -> str:
    """Render help for a single command."""
    command_obj = REGISTRY.get(name)
    if not command_obj:
        return f"No such command: {name}.{_suggest_similar_names(name)}"

    usage_string = build_usage(
        command_obj.name, command_obj.callback, flags=command_obj.flags)
    alias_text = ", ".join(command_obj.aliases) if command_obj.aliases else "(none)"
    lines = [
        f"Name:        {command_obj.name}",
        f"Aliases:     {alias_text}",
        f"Category:    {command_obj.category}",
        f"Description: {command_obj.description or '(none)'}",
        f"Example:     {command_obj.example or '(none)'}",
        f"Usage:       {PROGRAM} {usage_string}",
    ]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def _print_result(result: object) -> int:
    """Normalize a command's return value to printed output and an exit code."""
    if isinstance(result, CommandResult):
        if result.message:
            if result.ok:
                print_line(result.message)
            else:
                log_error(result.message)
        return result.exit_code
    if result is not None:
        print_line(str(result))
    return EXIT_OK


def handle_args(argv: Sequence[str], ctx: CommandContext) -> int:
    """
    Run one command line (argv without the program name). Returns the exit code.
    No argument means help.
    """
    if not argv:
        print_line(format_help())
        return EXIT_OK

    name, *arg_tokens = argv
    lowered = name.lower()

    if lowered in HELP_NAMES:
        print_line(format_command_help(arg_tokens[0]) if arg_tokens else format_help())
        return EXIT_OK

    if name in VERSION_NAMES or lowered in VERSION_NAMES:
        print_line(f"{PROGRAM} {__version__}")
        return EXIT_OK

    command_obj = REGISTRY.get(lowered)
    if not command_obj:
        log_error(f"Unknown command: {name}.{_suggest_similar_names(name)}")
        print_line("")
        print_line(HELP_TEXT)
        return EXIT_FAILURE

    injected = {}
    if "ctx" in inspect.signature(command_obj.callback).parameters:
        injected["ctx"] = ctx

    try:
        positional_args, keyword_args = bind_args(
            command_obj.callback, list(arg_tokens),
            flags=command_obj.flags, injected=injected)
    except UsageError as exc:
        usage = build_usage(command_obj.name, command_obj.callback, flags=command_obj.flags)
        log_error(str(exc))
        print_line(f"Usage: {PROGRAM} {usage}")
        return EXIT_FAILURE

    try:
        result = command_obj.invoke(*positional_args, **keyword_args)
    except (KeyboardInterrupt, EOFError):
        print_line("")
        log_error("Aborted.")
        return EXIT_INTERRUPTED
    except Exception as exc:
        ctx.logger.debug("Command %s failed", command_obj.name, exc_info=True)
        log_error(f"{type(exc).__name__}: {exc}")
        return EXIT_FAILURE

    return _print_result(result)
