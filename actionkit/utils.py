"""Path conversion, workflow-command escaping and small value helpers."""

from __future__ import annotations

import os
from typing import Optional, TypeVar

T = TypeVar("T", str, bytes)

_DATA_ESCAPES = (("%", "%25"), ("\r", "%0D"), ("\n", "%0A"))
_PROPERTY_ESCAPES = _DATA_ESCAPES + ((":", "%3A"), (",", "%2C"))


def to_posix_path(path: str) -> str:
    """Convert a path to posix form by replacing backslashes with slashes."""
    return path.replace("\\", "/")


def to_win32_path(path: str) -> str:
    """Convert a path to win32 form by replacing slashes with backslashes."""
    return path.replace("/", "\\")


def to_platform_path(path: str) -> str:
    """Replace both kinds of separator with the separator of this platform."""
    return path.replace("/", os.sep).replace("\\", os.sep)


def _escape(text: str, table: tuple[tuple[str, str], ...]) -> str:
    for raw, escaped in table:
        text = text.replace(raw, escaped)
    return text


def escape_data(data: str) -> str:
    """Escape the message part of a workflow command."""
    return _escape(data, _DATA_ESCAPES)


def escape_property(prop: str) -> str:
    """Escape a property value of a workflow command."""
    return _escape(prop, _PROPERTY_ESCAPES)


def not_empty(value: Optional[T]) -> Optional[T]:
    """Return the value, or None if it is empty."""
    if not value:
        return None
    return value