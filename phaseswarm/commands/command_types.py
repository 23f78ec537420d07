#!/usr/bin/env python3
# phaseswarm/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- CommandCallback: the callable protocol for any command implementation.
- CommandResult: a normalized result container for command outputs.
- CommandContext: the explicit configuration handed to commands that ask for it.
- Command: a registered command with metadata and a callable.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Protocol

if TYPE_CHECKING:
    from phaseswarm.db.config import AppConfig


class CommandCallback(Protocol):
    """Protocol for any command function."""

    def __call__(self, *args: Any, **kwargs: Any) -> Any:  # pragma: no cover - signature only
        ...


@dataclass(slots=True)
class CommandResult:
    """
    Normalized result container from command execution.

    Attributes:
        ok: True if the command completed successfully.
        message: Human-readable summary printed by the dispatcher.
        data: Optional machine-readable payload.
    """
    ok: bool = True
    message: str = ""
    data: Any = None

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def __str__(self) -> str:
        return self.message if self.message else ("ok" if self.ok else "error")


@dataclass(slots=True)
class CommandContext:
    """Per-invocation state injected into commands with a `ctx` parameter."""

    config: "AppConfig"
    logger: logging.Logger


@dataclass(slots=True)
class Command:
    """
    A registered command with metadata and a callable to execute.

    Important fields:
        name: Primary unique command name.
        description: Short, user-facing description.
        example: One-line example usage string (optional).
        callback: Function implementing the command.
        module: Python module path where the command is defined.
        category: Logical group for help output.
        aliases: Extra names resolving to the same command.
        flags: Short flag -> parameter name (e.g. {"-a": "all"}).
        param_names: All parameter names discovered from the command signature.
    """

    name: str
    description: str
    example: str
    callback: CommandCallback
    module: str = field(default="", repr=False)
    category: str = "general"
    aliases: list[str] = field(default_factory=list)  # type: ignore
    flags: Mapping[str, str] = field(default_factory=dict)  # type: ignore
    param_names: list[str] = field(default_factory=list)  # type: ignore

    def invoke(self, *args: Any, **kwargs: Any) -> Any:
        """Execute the underlying command callback with provided arguments."""
        return self.callback(*args, **kwargs)
