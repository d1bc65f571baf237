"""Rendering of values for assertion messages."""

from __future__ import annotations

from typing import Any


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def to_string(value: Any) -> str:
    """Render a value as text; lists and tuples become a brace list of quoted items."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        items = ", ".join(f'"{_format_scalar(item)}"' for item in value)
        return "{" + items + "}"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)