#!/usr/bin/env python3
# phaseswarm/db/registry.py
from __future__ import annotations
"""
JSON persistence for the project registry.

Two candidate files exist per invocation, both passed in explicitly:
  local:  <cwd>/.phaseswarm-registry.json
  global: ~/.phaseswarm-registry.json

The local file always wins when present. Local and global registries are
never merged. Writes are plain rewrites: no locking, last writer wins.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from phaseswarm.db.models import (
    REGISTRY_TYPES,
    REGISTRY_VERSION,
    Project,
    Registry,
)

logger = logging.getLogger("phaseswarm.db.registry")


class CorruptRegistry(Exception):
    """The registry file exists but does not hold a valid registry document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class ResolvedRegistry:
    path: Path
    registry_type: str


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# -------- resolution --------

def _declared_type(path: Path) -> str | None:
    """Best-effort read of `registry_type`; any failure means 'not declared'."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    declared = data.get("registry_type")
    return declared if isinstance(declared, str) and declared else None


def resolve_registry(local_path: Path, global_path: Path) -> Optional[ResolvedRegistry]:
    """
    Pick the single authoritative registry file.

    Only existence decides which file wins; a corrupt file is still selected
    and reported later by read_registry. Returns None when neither exists.
    """
    for path, default_type in ((local_path, "local"), (global_path, "global")):
        if path.is_file():
            registry_type = _declared_type(path) or default_type
            logger.debug("Resolved %s registry at %s", registry_type, path)
            return ResolvedRegistry(path=path, registry_type=registry_type)
    logger.debug("No registry at %s or %s", local_path, global_path)
    return None


# -------- read / write --------

def read_registry(path: Path) -> Registry:
    """Load a registry file. Raises CorruptRegistry on invalid content."""
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CorruptRegistry(path, str(exc)) from exc

    if not isinstance(data, dict):
        raise CorruptRegistry(path, "top-level value is not an object")
    projects = data.get("projects")
    if projects is not None and not isinstance(projects, list):
        raise CorruptRegistry(path, "'projects' is not a list")

    version = data.get("registry_version")
    if isinstance(version, int) and version > REGISTRY_VERSION:
        logger.warning(
            "Registry %s has version %s; reading it as version %s",
            path, version, REGISTRY_VERSION)

    return Registry.from_dict(data)


def save_registry(path: Path, registry: Registry) -> None:
    """Rewrite the whole registry document (2-space indented UTF-8 JSON)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(registry.to_dict(), indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote registry %s (%d projects)", path, len(registry.projects))


def create_registry(path: Path, registry_type: str, *, now: Optional[datetime] = None) -> bool:
    """Create an empty registry unless one already exists. Returns True if created."""
    if registry_type not in REGISTRY_TYPES:
        raise ValueError(f"registry_type must be one of {REGISTRY_TYPES}, got {registry_type!r}")
    if path.exists():
        return False
    save_registry(path, Registry(
        registry_version=REGISTRY_VERSION,
        registry_type=registry_type,
        created=utc_timestamp(now),
        projects=[],
    ))
    return True


# -------- project records --------

def upsert_project(registry: Registry, project: Project) -> bool:
    """Replace the record with the same path, or append. Returns True if appended."""
    for index, existing in enumerate(registry.projects):
        if existing.path == project.path:
            registry.projects[index] = project
            return False
    registry.projects.append(project)
    return True


def touch_project(registry: Registry, path: str, *, now: Optional[datetime] = None) -> bool:
    """Stamp last_accessed on the record with this path. False if not registered."""
    for project in registry.projects:
        if project.path == path:
            project.last_accessed = utc_timestamp(now)
            return True
    return False
