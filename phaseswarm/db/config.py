#!/usr/bin/env python3
# phaseswarm/db/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: .env, phaseswarm.toml, phaseswarm.json
  3) Environment variables prefixed with PHASESWARM_

Validation:
  - COMMANDS_DIR / TEMPLATES_DIR / LOCAL_REGISTRY / GLOBAL_REGISTRY: paths,
    relative ones resolved against the working directory (no creation here)
  - LOG_FILE: None or path
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - COLOR: bool
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import json
import os
import re
import tomllib

ENV_PREFIX = "PHASESWARM_"

# Shipped next to the package (see pyproject package-data)
BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

LOCAL_REGISTRY_NAME = ".phaseswarm-registry.json"
GLOBAL_REGISTRY_NAME = ".phaseswarm-registry.json"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "COMMANDS_DIR": str(Path(".claude") / "commands"),
    "TEMPLATES_DIR": None,          # None -> bundled templates
    "LOCAL_REGISTRY": LOCAL_REGISTRY_NAME,
    "GLOBAL_REGISTRY": None,        # None -> ~/.phaseswarm-registry.json
    "LOG_LEVEL": "WARNING",
    "LOG_FILE": None,
    "COLOR": True,
}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    working_dir: Path
    commands_dir: Path
    templates_dir: Path
    local_registry: Path
    global_registry: Path

    log_level: str
    log_file: Path | None
    color: bool

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'DEBUG'}} -> {'LOG_LEVEL': 'DEBUG'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _strip_prefix(d: Mapping[str, Any]) -> dict[str, Any]:
    """Keep PHASESWARM_* keys only, with the prefix removed."""
    return {k[len(ENV_PREFIX):]: v for k, v in d.items() if k.startswith(ENV_PREFIX)}


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in d.items():
        key = str(k).upper()
        if key.startswith(ENV_PREFIX):
            key = key[len(ENV_PREFIX):]
        out[key] = v
    return out


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val) or DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    if up not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def _resolve_under(base: Path, value: Any) -> Path | None:
    """Expand ~ and env vars; anchor relative paths at `base`."""
    v = _as_opt_str(value)
    if v is None:
        return None
    p = Path(os.path.expandvars(os.path.expanduser(v)))
    return p if p.is_absolute() else base / p


# ---------- merge & load ----------

def _find_config_files(cwd: Path) -> list[Path]:
    return [
        cwd / ".env",
        cwd / "phaseswarm.toml",
        cwd / "phaseswarm.json",
    ]


def _merge_sources(cwd: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(cwd):
        if file.name == ".env":
            # .env may hold unrelated keys; only take ours
            merged.update(_strip_prefix(_load_env_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all
    merged.update(_strip_prefix(environ))
    return merged


def _validate_and_build(config: dict[str, Any], cwd: Path, home: Path) -> AppConfig:
    commands_dir = _resolve_under(cwd, config.get("COMMANDS_DIR")) \
        or cwd / DEFAULTS["COMMANDS_DIR"]
    templates_dir = _resolve_under(cwd, config.get("TEMPLATES_DIR")) \
        or BUNDLED_TEMPLATES_DIR
    local_registry = _resolve_under(cwd, config.get("LOCAL_REGISTRY")) \
        or cwd / LOCAL_REGISTRY_NAME
    global_registry = _resolve_under(cwd, config.get("GLOBAL_REGISTRY")) \
        or home / GLOBAL_REGISTRY_NAME

    log_level = _as_log_level(config.get("LOG_LEVEL"))
    log_file = _resolve_under(cwd, config.get("LOG_FILE"))
    color = _as_bool(config.get("COLOR", DEFAULTS["COLOR"]))

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        working_dir=cwd,
        commands_dir=commands_dir,
        templates_dir=templates_dir,
        local_registry=local_registry,
        global_registry=global_registry,
        log_level=log_level,
        log_file=log_file,
        color=color,
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    *,
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects (no directory creation).

    The working directory is taken literally (no symlink resolution) since
    project scoping compares it as a string.
    """
    cwd = cwd if cwd is not None else Path(os.getcwd())
    environ = environ if environ is not None else os.environ
    home = home if home is not None else Path.home()
    return _validate_and_build(_merge_sources(cwd, environ), cwd, home)
