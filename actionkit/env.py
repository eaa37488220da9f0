"""Environment stores: an in-memory map and the process environment."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional, Union

_Source = Union[Mapping[str, str], Iterable[tuple[str, str]], None]


class EnvMap:
    """A thread-safe, in-memory environment."""

    def __init__(self, values: _Source = None) -> None:
        self._values: dict[str, str] = dict(values or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key``, or None if it is not set."""
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``."""
        with self._lock:
            self._values[key] = value

    def __repr__(self) -> str:
        with self._lock:
            return f"EnvMap({self._values!r})"


@dataclass(frozen=True)
class OsEnv:
    """The environment of the running process."""

    def get(self, key: str) -> Optional[str]:
        """Return the value of the environment variable, or None."""
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        """Set the environment variable for this process."""
        os.environ[key] = value