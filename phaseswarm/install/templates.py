#!/usr/bin/env python3
# phaseswarm/install/templates.py
from __future__ import annotations
"""
Template installation into the assistant's commands directory.

Templates are opaque payloads: copied byte-for-byte, never parsed.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("phaseswarm.install")

# Shipped with the package under phaseswarm/templates/
TEMPLATE_FILES: tuple[str, ...] = ("phaseswarm-create.md", "phaseswarm-run.md")

# Slash commands the templates become once installed
SLASH_COMMANDS = {
    "phaseswarm-create": "Create a new PhaseSwarm from a PRD",
    "phaseswarm-run": "Execute an existing PhaseSwarm",
}


class InstallError(Exception):
    """Installing into the target directory failed."""


class MissingTemplate(InstallError):
    """A bundled template is absent: the package itself is broken."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Source file not found: {path}")
        self.path = path


@dataclass(frozen=True, slots=True)
class InstalledFile:
    name: str
    target: Path
    overwritten: bool


def ensure_commands_dir(target_dir: Path) -> bool:
    """Create the commands directory (and parents). Returns True if it was created."""
    if target_dir.is_dir():
        return False
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallError(f"Failed to create directory {target_dir}: {exc}") from exc
    return True


def install_templates(
    source_dir: Path,
    target_dir: Path,
    names: tuple[str, ...] = TEMPLATE_FILES,
) -> list[InstalledFile]:
    """
    Copy every template into target_dir, overwriting existing copies.

    All sources are checked before anything is written so that a broken
    package never leaves a half-installed directory behind.
    """
    for name in names:
        source = source_dir / name
        if not source.is_file():
            raise MissingTemplate(source)

    installed: list[InstalledFile] = []
    for name in names:
        source = source_dir / name
        target = target_dir / name
        overwritten = target.exists()
        try:
            shutil.copyfile(source, target)
        except OSError as exc:
            raise InstallError(f"Failed to install {name}: {exc}") from exc
        logger.debug("Copied %s -> %s", source, target)
        installed.append(InstalledFile(name=name, target=target, overwritten=overwritten))
    return installed


def verify_installation(
    target_dir: Path,
    names: tuple[str, ...] = TEMPLATE_FILES,
) -> dict[Path, bool]:
    """Map each expected installed path to whether it is present."""
    return {target_dir / name: (target_dir / name).is_file() for name in names}
