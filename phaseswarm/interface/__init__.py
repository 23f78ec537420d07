#!/usr/bin/env python3
# phaseswarm/interface/__init__.py
from __future__ import annotations

"""
Package for command-line input and command dispatch.

Provides:
- Input frontends (prompt_toolkit / plain) and the registry-type question.
- Parser utilities for binding argv tokens to command functions.
- Command dispatcher and help formatting.
- Dynamic command loader for the plugins package.
"""


from .parser import UsageError, bind_args, build_usage
from .prompt import (
    BaseInput,
    PromptToolkitInput,
    PlainInput,
    make_input,
    parse_registry_choice,
    ask_registry_type,
    GLOBAL_CHOICES,
)
from .loader import load_commands, DEFAULT_COMMANDS_PACKAGE
from .handler import (
    handle_args,
    format_help,
    format_command_help,
    HELP_TEXT,
    EXIT_OK,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
)

__all__ = [
    "UsageError",
    "bind_args",
    "build_usage",
    "BaseInput",
    "PromptToolkitInput",
    "PlainInput",
    "make_input",
    "parse_registry_choice",
    "ask_registry_type",
    "GLOBAL_CHOICES",
    "load_commands",
    "DEFAULT_COMMANDS_PACKAGE",
    "handle_args",
    "format_help",
    "format_command_help",
    "HELP_TEXT",
    "EXIT_OK",
    "EXIT_FAILURE",
    "EXIT_INTERRUPTED",
]
