#!/usr/bin/env python3
# phaseswarm/install/__init__.py
from __future__ import annotations
"""
Template installer package.

Exports:
- ensure_commands_dir / install_templates / verify_installation
- TEMPLATE_FILES, SLASH_COMMANDS
- InstallError, MissingTemplate
"""


from .templates import (
    TEMPLATE_FILES,
    SLASH_COMMANDS,
    InstallError,
    MissingTemplate,
    InstalledFile,
    ensure_commands_dir,
    install_templates,
    verify_installation,
)

__all__ = [
    "TEMPLATE_FILES",
    "SLASH_COMMANDS",
    "InstallError",
    "MissingTemplate",
    "InstalledFile",
    "ensure_commands_dir",
    "install_templates",
    "verify_installation",
]
