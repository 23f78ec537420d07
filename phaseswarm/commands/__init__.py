#!/usr/bin/env python3
# phaseswarm/commands/__init__.py
from __future__ import annotations

"""
Package for command management and registration.

Provides:
- Data structures (`Command`, `CommandResult`, `CommandContext`, `CommandCallback`).
- In-memory registry and decorator (`REGISTRY`, `command`).
"""


from .command_types import Command, CommandResult, CommandContext, CommandCallback
from .commands import REGISTRY, CommandRegistry, command

__all__ = [
    "Command",
    "CommandResult",
    "CommandContext",
    "CommandCallback",
    "REGISTRY",
    "CommandRegistry",
    "command",
]
