#!/usr/bin/env python3
# phaseswarm/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports all modules under a given package (default: 'phaseswarm.plugins').
- Supports 'entrypoint.py' inside a subpackage.
- Derives categories from module paths if not explicitly set.
"""

import importlib
import logging
import pkgutil
from pathlib import Path

from phaseswarm.commands import REGISTRY

logger = logging.getLogger("phaseswarm.interface.loader")

DEFAULT_COMMANDS_PACKAGE = "phaseswarm.plugins"


def load_commands(commands_package: str = DEFAULT_COMMANDS_PACKAGE) -> int:
    """
    Import all modules under the given package.

    Supported layouts:
      1) Plain modules: plugins/foo.py  -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint

    Modules already imported are not re-executed, so calling this twice
    never registers a command twice.
    """
    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{commands_package}' must be a package (folder) with modules.")

    loaded_count = 0
    for base_path in package_paths:
        for modinfo in pkgutil.iter_modules([base_path]):
            module_name = modinfo.name
            if module_name.startswith("_"):
                continue

            target = f"{commands_package}.{module_name}"
            if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                target += ".entrypoint"
            importlib.import_module(target)
            loaded_count += 1
            logger.debug("Loaded command module %s", target)

    _assign_categories_from_modules(commands_package)
    return loaded_count


def _assign_categories_from_modules(commands_package: str) -> None:
    """
    Derive category from first subpackage segment (e.g. 'projects.entrypoint')
    if not explicitly set (default 'general').
    """
    prefix = f"{commands_package}."
    for command_obj in REGISTRY.all():
        if command_obj.category != "general" or not command_obj.module.startswith(prefix):
            continue
        segments = command_obj.module[len(prefix):].split(".")
        if len(segments) >= 2:
            command_obj.category = segments[0]
