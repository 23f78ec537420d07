#!/usr/bin/env python3
# phaseswarm/db/__init__.py
from __future__ import annotations

"""
Package for registry persistence and configuration.

Provides:
- Configuration loader with environment variable overrides (`config`).
- Registry document model (`models`).
- JSON registry resolution, reading and writing (`registry`).
- Directory scoping, ordering and status projection (`query`).
"""


from .config import AppConfig, load_config, BUNDLED_TEMPLATES_DIR
from .models import Project, Registry, REGISTRY_VERSION, REGISTRY_TYPES
from .registry import (
    CorruptRegistry,
    ResolvedRegistry,
    resolve_registry,
    read_registry,
    save_registry,
    create_registry,
    upsert_project,
    touch_project,
    utc_timestamp,
)
from .query import (
    Selection,
    SelectionOutcome,
    is_within_root,
    filter_projects,
    sort_projects,
    parse_timestamp,
    status_tag,
    select_projects,
)

__all__ = [
    "AppConfig",
    "load_config",
    "BUNDLED_TEMPLATES_DIR",
    "Project",
    "Registry",
    "REGISTRY_VERSION",
    "REGISTRY_TYPES",
    "CorruptRegistry",
    "ResolvedRegistry",
    "resolve_registry",
    "read_registry",
    "save_registry",
    "create_registry",
    "upsert_project",
    "touch_project",
    "utc_timestamp",
    "Selection",
    "SelectionOutcome",
    "is_within_root",
    "filter_projects",
    "sort_projects",
    "parse_timestamp",
    "status_tag",
    "select_projects",
]
