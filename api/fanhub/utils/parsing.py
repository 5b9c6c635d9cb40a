"""
Generic, format-agnostic parsing utilities for upstream payloads.

Upstream JSON is treated as untrusted: missing keys, nulls and wrong types
degrade to defaults instead of raising.
"""

from __future__ import annotations

from typing import Any


def parse_int(value: Any, default: int = 0) -> int:
    """Parse a value to an integer, returning ``default`` for empty input."""
    if value in (None, "", "-"):
        return default
    try:
        return int(float(value))
    except (ValueError, TypeError, OverflowError):
        return default


def parse_float(value: Any, default: float = 0.0) -> float:
    """Parse a value to a float, returning ``default`` for empty input."""
    if value in (None, "", "-"):
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        return default


def localized(value: Any) -> str:
    """Unwrap the NHL API's localized strings ({"default": "..."}) to text."""
    if isinstance(value, dict):
        return str(value.get("default") or "")
    if value is None:
        return ""
    return str(value)


def as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def parse_save_shots(save_shots: str | None) -> tuple[int | None, int | None]:
    """Parse saveShotsAgainst string (e.g., '25/27') to (saves, shots_against)."""
    if not save_shots:
        return None, None
    try:
        parts = str(save_shots).split("/")
        if len(parts) == 2:
            return int(parts[0]), int(parts[1])
    except (ValueError, IndexError):
        pass
    return None, None


def parse_fraction(value: Any) -> tuple[int, int]:
    """Parse a "made/attempts" string such as a power play line ("1/3")."""
    made, attempts = parse_save_shots(value if isinstance(value, str) else None)
    return made or 0, attempts or 0
