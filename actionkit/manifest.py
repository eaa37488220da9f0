"""The action manifest (``action.yml``)."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import yaml


def _opt_str(data: Mapping[str, Any], key: str, where: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{where}: {key!r} must be a string, got {value!r}")
    return value


def _opt_bool(data: Mapping[str, Any], key: str, where: str) -> Optional[bool]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ValueError(f"{where}: {key!r} must be a boolean, got {value!r}")
    return value


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"{where} must be a mapping")
    for key in value:
        if not isinstance(key, str):
            raise ValueError(f"{where}: key {key!r} must be a string")
    return value


@dataclass(frozen=True)
class ManifestInput:
    """An input declared in the manifest."""

    description: Optional[str] = None
    deprecation_message: Optional[str] = None
    default: Optional[str] = None
    required: Optional[bool] = None

    @classmethod
    def _from_data(cls, data: Any, where: str) -> ManifestInput:
        data = _mapping(data, where)
        return cls(
            description=_opt_str(data, "description", where),
            deprecation_message=_opt_str(data, "deprecationMessage", where),
            default=_opt_str(data, "default", where),
            required=_opt_bool(data, "required", where),
        )


@dataclass(frozen=True)
class Output:
    """An output declared in the manifest."""

    description: Optional[str] = None


@dataclass(frozen=True)
class Branding:
    """Icon and colour of the action."""

    icon: Optional[str] = None
    color: Optional[str] = None


@dataclass
class Manifest:
    """The contents of an action manifest."""

    name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    branding: Optional[Branding] = None
    inputs: dict[str, ManifestInput] = field(default_factory=dict)
    outputs: dict[str, Output] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, text: str) -> Manifest:
        """Parse a manifest from YAML text."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid manifest: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ValueError("manifest must be a mapping")
        data = _mapping(data, "manifest")

        branding = None
        if data.get("branding") is not None:
            raw = _mapping(data["branding"], "branding")
            branding = Branding(
                icon=_opt_str(raw, "icon", "branding"),
                color=_opt_str(raw, "color", "branding"),
            )

        inputs = {
            name: ManifestInput._from_data(value, f"input {name!r}")
            for name, value in _mapping(data.get("inputs"), "inputs").items()
        }
        outputs = {
            name: Output(
                description=_opt_str(
                    _mapping(value, f"output {name!r}"), "description", f"output {name!r}"
                )
            )
            for name, value in _mapping(data.get("outputs"), "outputs").items()
        }

        return cls(
            name=_opt_str(data, "name", "manifest"),
            description=_opt_str(data, "description", "manifest"),
            author=_opt_str(data, "author", "manifest"),
            branding=branding,
            inputs=inputs,
            outputs=outputs,
        )

    @classmethod
    def from_action_yml(cls, path: Union[str, os.PathLike[str]]) -> Manifest:
        """Read and parse a manifest file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_yaml(handle.read())