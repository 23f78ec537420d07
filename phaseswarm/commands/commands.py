#!/usr/bin/env python3
# phaseswarm/commands/commands.py
from __future__ import annotations

"""
The `phaseswarm` command table and the `@command` decorator plugins use to
fill it. Names and aliases share one case-insensitive namespace.
"""

import inspect
from typing import Any, Callable, Dict, Mapping, Optional

from phaseswarm.commands.command_types import Command


class CommandRegistry:
    def __init__(self) -> None:
        self._primary: Dict[str, Command] = {}
        # every accepted spelling, primary names included
        self._lookup: Dict[str, Command] = {}

    def register(self, command_obj: Command) -> None:
        """Add a command under its name and aliases. Any clash raises ValueError."""
        keys = [command_obj.name.lower(), *(a.lower() for a in command_obj.aliases)]
        for key in keys:
            taken = self._lookup.get(key)
            if taken is not None:
                raise ValueError(
                    f"'{key}' for command '{command_obj.name}' is already taken by '{taken.name}'.")
        for key in keys:
            self._lookup[key] = command_obj
        self._primary[keys[0]] = command_obj

    def get(self, name: str) -> Optional[Command]:
        return self._lookup.get(name.lower())

    def all(self) -> list[Command]:
        """One entry per command, aliases excluded."""
        return list(self._primary.values())

    def names(self) -> list[str]:
        return list(self._lookup)


REGISTRY = CommandRegistry()


def _check_flags(func: Callable[..., Any], flags: Mapping[str, str], params: list[str]) -> None:
    for flag, target in flags.items():
        if not flag.startswith("-"):
            raise ValueError(f"Flag '{flag}' of {func.__name__} must start with '-'.")
        if target not in params:
            raise ValueError(
                f"Flag '{flag}' targets unknown parameter '{target}' of {func.__name__}.")


def command(
    *,
    name: str | None = None,
    description: str | None = None,
    example: str | None = None,
    category: str | None = None,
    aliases: list[str] | None = None,
    flags: Mapping[str, str] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Register the decorated function in REGISTRY.

    `name` defaults to the function name with underscores as dashes, and
    `description` to its docstring. `flags` maps option spellings such as
    `--all` or `-a` to the keyword-only parameter they switch on.
    """

    def wrapper(func: Callable[..., Any]) -> Callable[..., Any]:
        params = list(inspect.signature(func).parameters)
        flag_map = dict(flags or {})
        _check_flags(func, flag_map, params)

        REGISTRY.register(Command(
            name=(name or func.__name__).replace("_", "-"),
            description=(description or func.__doc__ or "").strip(),
            example=example or "",
            callback=func,
            module=func.__module__,
            category=category or "general",
            aliases=list(aliases or []),
            flags=flag_map,
            param_names=params,
        ))
        return func

    return wrapper
