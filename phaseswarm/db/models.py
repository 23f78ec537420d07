#!/usr/bin/env python3
# phaseswarm/db/models.py
from __future__ import annotations

"""
Registry document model.

The registry is a flat JSON object:

    {
      "registry_version": 1,
      "registry_type": "global",
      "created": "2024-01-01T00:00:00.000Z",
      "projects": [{"name": ..., "path": ..., ...}]
    }

Parsing is lenient: records keep whatever the file holds, unknown keys
included, so that a rewrite never drops fields owned by other tools.
"""

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

RegistryType = Literal["local", "global"]

REGISTRY_VERSION = 1
REGISTRY_TYPES: tuple[str, ...] = ("local", "global")

_PROJECT_KEYS = (
    "name",
    "path",
    "project_root",
    "status",
    "current_phase",
    "total_phases",
    "last_accessed",
    "prd_source",
)
_REGISTRY_KEYS = ("registry_version", "registry_type", "created", "projects")


@dataclass(slots=True)
class Project:
    name: Any = None
    path: Any = None
    project_root: str | None = None
    status: Any = None
    current_phase: Any = None
    total_phases: Any = None
    last_accessed: str | None = None
    prd_source: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Project":
        known = {k: data[k] for k in _PROJECT_KEYS if k in data}
        extra = {k: v for k, v in data.items() if k not in _PROJECT_KEYS}
        return cls(**known, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for key in _PROJECT_KEYS:
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        out.update(self.extra)
        return out


@dataclass(slots=True)
class Registry:
    registry_version: Any = REGISTRY_VERSION
    registry_type: str | None = None
    created: str | None = None
    projects: list[Project] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Registry":
        raw_projects = data.get("projects") or []
        if not isinstance(raw_projects, list):
            raw_projects = []
        projects = [Project.from_dict(p) for p in raw_projects if isinstance(p, Mapping)]
        return cls(
            registry_version=data.get("registry_version", REGISTRY_VERSION),
            registry_type=data.get("registry_type"),
            created=data.get("created"),
            projects=projects,
            extra={k: v for k, v in data.items() if k not in _REGISTRY_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"registry_version": self.registry_version}
        if self.registry_type is not None:
            out["registry_type"] = self.registry_type
        if self.created is not None:
            out["created"] = self.created
        out["projects"] = [p.to_dict() for p in self.projects]
        out.update(self.extra)
        return out
