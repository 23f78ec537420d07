#!/usr/bin/env python3
# phaseswarm/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: configuration, logging and command loading, in order.
- BootState: Dataclass containing config, logger and command count.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
