"""Small helpers for JSON message objects."""

from __future__ import annotations

from typing import Any

from .errors import JsonAccessError, JsonParseError


def print_json_str(parent: Any, key: str) -> str:
    """Print the string at *key* of *parent* as a body line and return it."""
    if not isinstance(parent, dict) or key not in parent:
        raise JsonParseError(f"Missing key: {key}")
    value = parent[key]
    if value is None:
        raise JsonAccessError(f"Null value at key: {key}")
    body = value if isinstance(value, str) else str(value)
    print(f"body: {body}")
    return body