#!/usr/bin/env python3
# phaseswarm/interface/prompt.py
from __future__ import annotations

"""
Interactive input frontends and the registry-type question.

Selection order:
    1) prompt_toolkit, when stdin and stdout are terminals
    2) plain line reader (piped or redirected input)
"""

import sys
from typing import Callable

from phaseswarm.ui import print_line

# Inputs selecting the global registry; everything else means local.
GLOBAL_CHOICES = frozenset({"2", "global", "g"})

Reader = Callable[[str], str]


class BaseInput:
    """
    Base interface for input frontends.

    Subclasses implement get_line(message) and return one line of input
    without the trailing newline.
    """

    def get_line(self, message: str) -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def __call__(self, message: str) -> str:
        return self.get_line(message)


# ===== Preferred: prompt_toolkit =====
class PromptToolkitInput(BaseInput):
    """Line editor for interactive terminals. Ctrl-C / Ctrl-D propagate."""

    def __init__(self) -> None:
        from prompt_toolkit import PromptSession

        self._session: PromptSession[str] = PromptSession()

    def get_line(self, message: str) -> str:
        return self._session.prompt(message)


# ===== Fallback: plain line reader =====
class PlainInput(BaseInput):
    """Reads one line from a non-interactive stdin. EOF reads as an empty answer."""

    def get_line(self, message: str) -> str:
        sys.stdout.write(message)
        sys.stdout.flush()
        line = sys.stdin.readline()
        return line.rstrip("\r\n")


def make_input() -> BaseInput:
    """Factory to select the input frontend for the current process."""
    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptToolkitInput()
    return PlainInput()


def parse_registry_choice(text: str | None) -> str:
    """Map a free-text answer to 'global' or 'local'. Invalid input means local."""
    answer = (text or "").strip().lower()
    return "global" if answer in GLOBAL_CHOICES else "local"


def ask_registry_type(
    reader: Reader | None = None,
    *,
    local_path: str = "./.phaseswarm-registry.json",
    global_path: str = "~/.phaseswarm-registry.json",
) -> str:
    """Ask once where projects are tracked. No re-prompt on invalid input."""
    reader = reader or make_input()
    print_line("Where should PhaseSwarm track projects?")
    print_line(f"  1) Local  - {local_path} (this directory only)")
    print_line(f"  2) Global - {global_path} (all repositories)")
    return parse_registry_choice(reader("Choose [1/2] (default: 1): "))
