"""Reading and parsing action inputs from an environment."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, TypeVar

from .utils import not_empty

T = TypeVar("T")

_PREFIX = "INPUT_"
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_UNSIGNED = re.compile(r"\+?[0-9]+")
_UINT_MAX = 2**64 - 1


class _Reader(Protocol):
    def get(self, key: str) -> Optional[str]: ...


class _Writer(Protocol):
    def set(self, key: str, value: str) -> None: ...


@dataclass(frozen=True)
class Input:
    """Metadata of an action input as declared in the manifest."""

    description: Optional[str] = None
    deprecation_message: Optional[str] = None
    default: Optional[str] = None
    required: Optional[bool] = None


class ParseError(ValueError):
    """An input value could not be parsed."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value


class BoolParseError(ParseError):
    """An input value is not a recognised boolean."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid boolean value {value!r}", value)


class IntParseError(ParseError):
    """An input value is not a valid unsigned integer."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid integer value {value!r}", value)


def env_var_name(name: str) -> str:
    """Return the environment variable name that holds the input ``name``."""
    rest = name[len(_PREFIX):] if name.startswith(_PREFIX) else name
    return (_PREFIX + rest).translate(_ASCII_UPPER)


def parse_bool(value: str) -> bool:
    """Parse yes/true/t or no/false/f, ignoring ASCII case."""
    lowered = value.translate(_ASCII_LOWER)
    if lowered in ("yes", "true", "t"):
        return True
    if lowered in ("no", "false", "f"):
        return False
    raise BoolParseError(value)


def parse_int(value: str) -> int:
    """Parse an unsigned 64-bit integer."""
    if not _UNSIGNED.fullmatch(value):
        raise IntParseError(value)
    number = int(value)
    if number > _UINT_MAX:
        raise IntParseError(value)
    return number


def set_input(env: _Writer, name: str, value: str) -> None:
    """Set the input ``name`` in ``env``."""
    env.set(env_var_name(name), value)


def get_input(env: _Reader, name: str) -> Optional[str]:
    """Return the raw input value, or None if it is unset or empty."""
    return not_empty(env.get(env_var_name(name)))


def parse_input(
    env: _Reader, name: str, kind: Callable[[str], T] = str
) -> Optional[T]:
    """Parse the input with ``kind`` if it has a value, else return None."""
    value = get_input(env, name)
    if value is None:
        return None
    return kind(value)


def _lines(text: str) -> list[str]:
    pieces = text.split("\n")
    last = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if last:
        lines.append(last)
    return lines


def get_multiline(env: _Reader, name: str) -> Optional[list[str]]:
    """Return the lines of a multiline input, or None if it has no value."""
    value = get_input(env, name)
    if value is None:
        return None
    return _lines(value)