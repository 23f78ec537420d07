#!/usr/bin/env python3
# phaseswarm/interface/parser.py
from __future__ import annotations

"""
Argument parsing helpers for commands.

Responsibilities:
- Bind argv tokens to a callable signature with type coercion based on annotations.
- Map --long and declared short flags onto boolean keyword-only parameters.
- Render compact Usage strings from a function signature.
"""

import inspect
from typing import Any, Mapping


class UsageError(TypeError):
    """Tokens do not fit the command's signature."""


def _signature(func: Any) -> inspect.Signature:
    # Annotations are strings under `from __future__ import annotations`
    return inspect.signature(func, eval_str=True)


def _coerce_value(text_value: str, annotation: Any) -> Any:
    """
    Convert a string to the annotated type when reasonable.

    Supported coercions:
        - str/Any/inspect._empty -> original text
        - bool -> accepts '1,true,yes,y,on' (case-insensitive)
        - int/float -> cast via constructor
    """
    if annotation in (inspect._empty, str, Any):
        return text_value
    if annotation is bool:
        return text_value.lower() in ("1", "true", "yes", "y", "on")
    if annotation in (int, float):
        try:
            return annotation(text_value)
        except ValueError as exc:
            raise UsageError(f"Expected {annotation.__name__}, got {text_value!r}") from exc
    return text_value


def _flag_target(token: str, flags: Mapping[str, str], keyword_names: set[str]) -> str:
    """Resolve '-a' / '--show-all' to a parameter name, or raise UsageError."""
    if token in flags:
        return flags[token]
    if token.startswith("--"):
        name = token[2:].replace("-", "_")
        if name in keyword_names:
            return name
    raise UsageError(f"Unknown option: {token}")


def bind_args(
    func: Any,
    tokens: list[str],
    *,
    flags: Mapping[str, str] | None = None,
    injected: Mapping[str, Any] | None = None,
) -> tuple[tuple[Any, ...], dict[str, Any]]:
    """
    Bind a flat token list to the signature of `func`.

    Supports:
        - positional tokens
        - key=value and --key=value tokens for keyword parameters
        - --flag / declared short flags for boolean keyword-only parameters
        - injected values for parameters the dispatcher owns (e.g. `ctx`)
    """
    flags = flags or {}
    injected = dict(injected or {})
    parameters = [
        p for p in _signature(func).parameters.values() if p.name not in injected
    ]
    keyword_names = {
        p.name for p in parameters
        if p.kind in (p.KEYWORD_ONLY, p.POSITIONAL_OR_KEYWORD)
    }
    annotations = {p.name: p.annotation for p in parameters}

    positional_tokens: list[str] = []
    kw_values: dict[str, Any] = {}
    for token in tokens:
        if token.startswith("-") and token != "-":
            key, eq, value = token.partition("=")
            name = _flag_target(key, flags, keyword_names)
            if eq:
                kw_values[name] = _coerce_value(value, annotations.get(name))
            elif annotations.get(name) is bool:
                kw_values[name] = True
            else:
                raise UsageError(f"Option {key} requires a value ({key}=...)")
        elif "=" in token:
            key, _, value = token.partition("=")
            if key not in keyword_names:
                raise UsageError(f"Unknown argument: {key}")
            kw_values[key] = _coerce_value(value, annotations.get(key))
        else:
            positional_tokens.append(token)

    bound_positional: list[Any] = []
    bound_keywords: dict[str, Any] = dict(injected)
    positional_index = 0
    var_positional = False

    for parameter in parameters:
        if parameter.kind is parameter.VAR_POSITIONAL:
            var_positional = True
            continue

        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            if parameter.name in kw_values:
                bound_keywords[parameter.name] = kw_values.pop(parameter.name)
            elif positional_index < len(positional_tokens):
                bound_positional.append(_coerce_value(
                    positional_tokens[positional_index], parameter.annotation))
                positional_index += 1
            elif parameter.default is inspect._empty:
                raise UsageError(f"Missing required argument: {parameter.name}")
        elif parameter.kind is parameter.KEYWORD_ONLY:
            if parameter.name in kw_values:
                bound_keywords[parameter.name] = kw_values.pop(parameter.name)
            elif parameter.default is inspect._empty:
                raise UsageError(
                    f"Missing required keyword-only argument: {parameter.name}")

    remaining = positional_tokens[positional_index:]
    if var_positional:
        bound_positional.extend(remaining)
    elif remaining:
        raise UsageError("Too many positional arguments.")

    return tuple(bound_positional), bound_keywords


def build_usage(
    command_name: str,
    func: Any,
    *,
    flags: Mapping[str, str] | None = None,
    hidden: tuple[str, ...] = ("ctx",),
) -> str:
    """
    Render a compact usage string based on `func` signature.

    Examples:
        'list [--show-all|-a]'
    """
    declared: dict[str, list[str]] = {}
    for flag, target in (flags or {}).items():
        declared.setdefault(target, []).append(flag)

    usage_parts: list[str] = []
    for parameter in _signature(func).parameters.values():
        if parameter.name in hidden:
            continue
        if parameter.kind is parameter.VAR_POSITIONAL:
            usage_parts.append("[args...]")
            continue
        if parameter.kind is parameter.KEYWORD_ONLY:
            long_flag = "--" + parameter.name.replace("_", "-")
            if parameter.annotation is bool:
                names = declared.get(parameter.name, [])
                if not any(n.startswith("--") for n in names):
                    names = [long_flag, *names]
                usage_parts.append("[" + "|".join(names) + "]")
            else:
                usage_parts.append(f"[{long_flag}=...]")
            continue
        token = f"<{parameter.name}>" if parameter.default is inspect._empty else f"[{parameter.name}]"
        usage_parts.append(token)

    return f"{command_name} " + " ".join(usage_parts) if usage_parts else command_name
