"""An action described by its manifest, with typed access to its inputs."""

from __future__ import annotations

import argparse
import enum
import os
from pathlib import Path
from typing import Callable, Optional, Protocol, TypeVar, Union

from . import input as action_input
from .env import OsEnv
from .ident import str_to_enum_variant
from .manifest import Manifest

T = TypeVar("T")

_PathLike = Union[str, "os.PathLike[str]"]


class _Reader(Protocol):
    def get(self, key: str) -> Optional[str]: ...


def resolve_path(path: _PathLike, root: Optional[_PathLike] = None) -> Path:
    """Locate a manifest relative to ``root``, falling back to ``root/src``."""
    base = Path(root) if root is not None else Path(".")
    candidate = base / path
    if candidate.exists():
        return candidate
    return base / "src" / path


class Action:
    """An action and the inputs declared in its manifest."""

    def __init__(self, manifest: Manifest) -> None:
        self.manifest = manifest
        enum_name = str_to_enum_variant(manifest.name or "Action") + "Input"
        self.input_enum = enum.Enum(
            enum_name,
            [(str_to_enum_variant(name), name) for name in manifest.inputs],
        )

    @classmethod
    def from_manifest(cls, path: _PathLike) -> Action:
        """Create an action from a manifest file."""
        return cls(Manifest.from_action_yml(path))

    @property
    def name(self) -> Optional[str]:
        """Name of the action."""
        return self.manifest.name

    @property
    def description(self) -> Optional[str]:
        """Description of the action."""
        return self.manifest.description

    @property
    def author(self) -> Optional[str]:
        """Author of the action."""
        return self.manifest.author

    def inputs(self) -> dict[str, action_input.Input]:
        """Return the declared inputs keyed by name."""
        return {
            name: action_input.Input(
                description=decl.description,
                deprecation_message=decl.deprecation_message,
                default=decl.default,
                required=decl.required,
            )
            for name, decl in self.manifest.inputs.items()
        }

    def parse(self, env: Optional[_Reader] = None) -> dict[enum.Enum, Optional[str]]:
        """Read every input, falling back to its default."""
        env = env if env is not None else OsEnv()
        values: dict[enum.Enum, Optional[str]] = {}
        for member in self.input_enum:
            value = action_input.parse_input(env, member.value, str)
            if value is None:
                value = self.manifest.inputs[member.value].default
            values[member] = value
        return values

    def parse_input(
        self,
        name: Union[str, enum.Enum],
        kind: Callable[[str], T] = str,
        env: Optional[_Reader] = None,
    ) -> Optional[T]:
        """Parse one declared input with ``kind``; unknown names raise KeyError."""
        input_name = name.value if isinstance(name, enum.Enum) else name
        if input_name not in self.manifest.inputs:
            raise KeyError(input_name)
        env = env if env is not None else OsEnv()
        return action_input.parse_input(env, input_name, kind)


def main(argv: Optional[list[str]] = None) -> int:
    """Print the inputs of an action as read from the environment."""
    parser = argparse.ArgumentParser(description="Show the inputs of an action.")
    parser.add_argument("manifest", nargs="?", default="action.yml")
    args = parser.parse_args(argv)

    action = Action.from_manifest(resolve_path(args.manifest))
    for member, value in action.parse().items():
        print(f"{member.value}: {'' if value is None else value}")
    return 0