#!/usr/bin/env python3
# phaseswarm/db/query.py
from __future__ import annotations

"""
Registry query engine: directory scoping, ordering and status tags.

Everything here is pure; callers pass the working directory and the
resolved registry type explicitly.
"""

import enum
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Sequence

from phaseswarm.db.models import Project

# Missing or unreadable timestamps sort as the earliest possible instant.
_EARLIEST = float("-inf")


class SelectionOutcome(enum.Enum):
    OK = "ok"
    EMPTY = "empty"          # registry holds no projects at all
    NO_MATCH = "no_match"    # projects exist, none rooted at/above cwd


@dataclass(slots=True)
class Selection:
    outcome: SelectionOutcome
    projects: list[Project] = field(default_factory=list)
    total: int = 0


def is_within_root(project_root: Any, cwd: str, *, sep: str = os.sep) -> bool:
    """
    True when cwd equals project_root or lies strictly below it.

    Plain string comparison: no canonicalisation, no symlink resolution and
    no case folding, so '/a/bc' is not inside '/a/b'.
    """
    if not isinstance(project_root, str) or not project_root:
        return False
    return cwd == project_root or cwd.startswith(project_root + sep)


def filter_projects(
    projects: Sequence[Project],
    registry_type: str,
    cwd: str,
    show_all: bool = False,
    *,
    sep: str = os.sep,
) -> list[Project]:
    """Scope a global registry to the caller's directory; local registries pass through."""
    if show_all or registry_type == "local":
        return list(projects)
    return [p for p in projects if is_within_root(p.project_root, cwd, sep=sep)]


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 string (or epoch milliseconds). None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(project: Project) -> float:
    parsed = parse_timestamp(project.last_accessed)
    return parsed.timestamp() if parsed is not None else _EARLIEST


def sort_projects(projects: Iterable[Project]) -> list[Project]:
    """Most recently accessed first. Stable, so ties keep input order."""
    return sorted(projects, key=_sort_key, reverse=True)


def status_tag(project: Project) -> tuple[str, str]:
    """
    Return (tag, color) for display.

    Phase counters are echoed verbatim; this is a projection, not a validator.
    """
    if project.status == "complete":
        return "[DONE]", "green"
    if project.status == "active":
        return f"[Phase {project.current_phase}/{project.total_phases}]", "yellow"
    return f"[{project.status or 'unknown'}]", "reset"


def select_projects(
    projects: Sequence[Project],
    registry_type: str,
    cwd: str,
    show_all: bool = False,
) -> Selection:
    if not projects:
        return Selection(SelectionOutcome.EMPTY)
    scoped = filter_projects(projects, registry_type, cwd, show_all)
    if not scoped:
        return Selection(SelectionOutcome.NO_MATCH, total=len(projects))
    return Selection(SelectionOutcome.OK, sort_projects(scoped), total=len(projects))
