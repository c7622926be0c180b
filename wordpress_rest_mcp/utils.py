"""Utility functions for serialization, query encoding and error text."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any


def serialize(value: Any) -> Any:
    """Make values JSON-serializable (used as ``json.dumps`` default)."""
    if isinstance(value, (bytes, bytearray)):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return f"<binary {len(value)} bytes>"
    if isinstance(value, Decimal):
        return float(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return str(value)


def to_json(value: Any) -> str:
    """Render a payload the way every tool returns it: indented JSON."""
    return json.dumps(value, indent=2, default=serialize)


def unique(items: Iterable[Any]) -> list[Any]:
    """De-duplicate while keeping first-seen order."""
    seen: list[Any] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_params(data: Mapping[str, Any] | None, prefix: str = "") -> list[tuple[str, str]]:
    """Encode a (possibly nested) mapping as PHP-style query parameters.

    ``{"author": [1, 2]}`` -> ``author[]=1&author[]=2`` and
    ``{"request": {"fields": {"tags": True}}}`` -> ``request[fields][tags]=true``.
    ``None`` values are dropped.

    Args:
        data: Parameters to encode.
        prefix: Key of the enclosing mapping (used for recursion).

    Returns:
        List of ``(key, value)`` pairs suitable for ``httpx`` ``params``.
    """
    pairs: list[tuple[str, str]] = []
    if not data:
        return pairs

    for key, value in data.items():
        if value is None:
            continue
        name = f"{prefix}[{key}]" if prefix else str(key)
        if isinstance(value, Mapping):
            pairs.extend(flatten_params(value, name))
        elif isinstance(value, (list, tuple, set)):
            pairs.extend((f"{name}[]", _param_value(v)) for v in value if v is not None)
        else:
            pairs.append((name, _param_value(value)))
    return pairs


def describe_error(exc: BaseException) -> str:
    """Human-readable message for an exception, never empty."""
    message = str(exc).strip()
    if isinstance(exc, KeyError) and message.startswith("'") and message.endswith("'"):
        message = message[1:-1]
    return message or type(exc).__name__
