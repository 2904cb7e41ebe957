"""Utility helpers shared by the statisch configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import ConfigParseError


def _describe(value: object) -> str:
    """Return a short type label for error messages."""
    match value:
        case bool():
            return "a boolean"
        case int() | float():
            return "a number"
        case str():
            return "a string"
        case list():
            return "a list"
        case dict():
            return "a mapping"
        case _:
            return type(value).__name__


def _require_mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise fail."""
    match value:
        case dict():
            return value
        case _:
            msg = f"'{where}' must be a mapping, got {_describe(value)}."
            raise ConfigParseError(msg)


def _optional_list(payload: typ.Mapping[str, typ.Any], key: str) -> list[typ.Any]:
    """Return the list stored under ``key``; absent or null yields ``[]``."""
    value = payload.get(key)
    match value:
        case None:
            return []
        case list():
            return value
        case _:
            msg = f"'{key}' must be a list, got {_describe(value)}."
            raise ConfigParseError(msg)


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return the string stored under ``key``, failing when absent or mistyped."""
    if payload.get(key) is None:
        msg = f"'{where}' is missing required key '{key}'."
        raise ConfigParseError(msg)
    return _optional_str(payload, key, where, default="")


def _optional_str(
    payload: typ.Mapping[str, typ.Any], key: str, where: str, *, default: str
) -> str:
    """Return the string under ``key`` or ``default`` when absent or null.

    Plain YAML scalars such as numbers and booleans are taken as their text.
    """
    value = payload.get(key)
    match value:
        case None:
            return default
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case int() | float():
            return str(value)
        case _:
            location = f"{where}.{key}" if where else key
            msg = f"'{location}' must be a string, got {_describe(value)}."
            raise ConfigParseError(msg)


def _optional_path(payload: typ.Mapping[str, typ.Any], key: str) -> Path | None:
    """Return the path stored under ``key``, or ``None`` when absent or null."""
    if payload.get(key) is None:
        return None
    return Path(_optional_str(payload, key, "", default=""))


__all__ = [
    "_describe",
    "_optional_list",
    "_optional_path",
    "_optional_str",
    "_require_mapping",
    "_require_str",
]
