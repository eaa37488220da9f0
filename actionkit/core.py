"""Workflow commands: annotations, groups, exported variables, state and paths."""

from __future__ import annotations

import enum
import os
import sys
import uuid
from collections.abc import Awaitable, Mapping
from dataclasses import dataclass, field
from typing import NoReturn, Optional, Protocol, TypeVar, Union

from .utils import escape_property

T = TypeVar("T")

_CMD_STRING = "::"


class _Reader(Protocol):
    def get(self, key: str) -> Optional[str]: ...


class _Writer(Protocol):
    def set(self, key: str, value: str) -> None: ...


class _ReadWriter(_Reader, _Writer, Protocol):
    pass


class LogLevel(enum.Enum):
    """Severity of an annotation."""

    DEBUG = "debug"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"

    def __str__(self) -> str:
        return self.value


class ExitCode(enum.IntEnum):
    """Process exit codes of an action."""

    SUCCESS = 0
    FAILURE = 1


class CommandError(Exception):
    """A workflow command could not be issued."""


class AddPathError(Exception):
    """A path could not be added to ``PATH``."""


class DelimiterError(CommandError, ValueError):
    """A key or value contains the generated delimiter."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(f"should not contain delimiter `{delimiter}`")
        self.delimiter = delimiter


class FileCommandError(CommandError, AddPathError):
    """A file command could not be written."""

    def __init__(self, message: str, cmd: str) -> None:
        super().__init__(message)
        self.cmd = cmd


@dataclass
class Command:
    """A workflow command as printed to standard output."""

    command: str
    message: str
    props: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        parts = [_CMD_STRING, self.command]
        if self.props:
            parts.append(" ")
        for position, (key, value) in enumerate(self.props.items()):
            if position > 0:
                parts.append(",")
            if not value:
                continue
            parts.append(f"{key}={escape_property(value)}")
        parts.append(_CMD_STRING)
        parts.append(self.message)
        return "".join(parts)


class CommandBuilder:
    """Fluent builder for a :class:`Command`."""

    def __init__(self, command: str, message: str) -> None:
        self.command = command
        self.message = message
        self.props: dict[str, str] = {}

    def property(self, key: str, value: str) -> CommandBuilder:
        """Add one property and return the builder."""
        self.props[key] = value
        return self

    def properties(self, props: Mapping[str, str]) -> CommandBuilder:
        """Add several properties and return the builder."""
        self.props.update(props)
        return self

    def build(self) -> Command:
        """Create the command."""
        return Command(self.command, self.message, dict(self.props))


@dataclass(frozen=True)
class AnnotationProperties:
    """Optional location and title of an annotation."""

    title: Optional[str] = None
    file: Optional[str] = None
    start_line: Optional[int] = None
    end_line: Optional[int] = None
    start_column: Optional[int] = None
    end_column: Optional[int] = None

    def to_properties(self) -> dict[str, str]:
        """Return the properties that are set, keyed by their command names."""
        pairs = (
            ("title", self.title),
            ("file", self.file),
            ("line", self.start_line),
            ("endLine", self.end_line),
            ("col", self.start_column),
            ("endColumn", self.end_column),
        )
        return {key: str(value) for key, value in pairs if value is not None}


def prepare_kv_message(key: str, value: str) -> str:
    """Format a key and value for a file command using a random delimiter."""
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in key or delimiter in value:
        raise DelimiterError(delimiter)
    return f"{key}<<{delimiter}\n{value}\n{delimiter}"


def issue(cmd: Command) -> None:
    """Print a command to standard output."""
    print(cmd)


def issue_file_command(command: str, message: str) -> None:
    """Append a message to the file named by ``GITHUB_<command>``."""
    file_path = os.environ.get(f"GITHUB_{command}")
    if file_path is None:
        raise FileCommandError(
            f"missing env variable for file command {command}", cmd=command
        )
    try:
        fd = os.open(file_path, os.O_WRONLY | os.O_APPEND)
        with open(fd, "a", encoding="utf-8", newline="") as handle:
            handle.write(message + "\n")
    except OSError as exc:
        raise FileCommandError(str(exc), cmd=command) from exc


def export_var(env: _ReadWriter, name: str, value: str) -> None:
    """Set a variable for this action and the following actions of the job."""
    env.set(name, value)
    if env.get("GITHUB_ENV") is not None:
        issue_file_command("ENV", prepare_kv_message(name, value))
        return
    issue(CommandBuilder("set-env", value).property("name", name).build())


def set_secret(secret: str) -> None:
    """Register a secret that will be masked in logs."""
    issue(CommandBuilder("add-mask", secret).build())


def _prepend_to_path(env: _Writer, path: str) -> None:
    if os.pathsep in path or '"' in path and os.name == "nt":
        raise AddPathError(f"path {path!r} contains the separator {os.pathsep!r}")
    old_path = os.environ.get("PATH")
    if old_path is not None:
        env.set("PATH", os.pathsep.join([path, *old_path.split(os.pathsep)]))


def set_command_echo(enabled: bool) -> None:
    """Turn echoing of workflow commands on or off."""
    issue(CommandBuilder("echo", "on" if enabled else "off").build())


def fail(message: object) -> NoReturn:
    """Report an error and exit with the failure code."""
    error(str(message))
    sys.exit(int(ExitCode.FAILURE))


def is_debug() -> bool:
    """Return whether step debugging is enabled."""
    return os.environ.get("RUNNER_DEBUG", "").strip() == "1"


def add_path(env: _ReadWriter, path: Union[str, os.PathLike[str]]) -> None:
    """Prepend a path to ``PATH`` for this action and the following ones."""
    path_string = os.fspath(path)
    _prepend_to_path(env, path_string)
    if env.get("GITHUB_PATH") is not None:
        issue_file_command("PATH", path_string)
    else:
        issue(CommandBuilder("add-path", path_string).build())


def issue_level(
    level: LogLevel,
    message: str,
    props: Optional[AnnotationProperties] = None,
) -> None:
    """Issue an annotation of the given level."""
    props = props or AnnotationProperties()
    issue(CommandBuilder(level.value, message).properties(props.to_properties()).build())


def debug(message: str) -> None:
    """Write a debug message to the log."""
    issue_level(LogLevel.DEBUG, message)


def warning(message: str) -> None:
    """Add a warning annotation."""
    issue_level(LogLevel.WARNING, message)


def error(message: str) -> None:
    """Add an error annotation."""
    issue_level(LogLevel.ERROR, message)


def notice(message: str) -> None:
    """Add a notice annotation."""
    issue_level(LogLevel.NOTICE, message)


def info(message: str) -> None:
    """Write a plain line to the log."""
    print(message)


def start_group(name: str) -> None:
    """Begin a foldable output group."""
    issue(CommandBuilder("group", name).build())


def end_group() -> None:
    """End the current output group."""
    issue(CommandBuilder("endgroup", "").build())


def save_state(env: _Reader, name: str, value: str) -> None:
    """Save state that this action's post step can read."""
    if env.get("GITHUB_STATE") is not None:
        issue_file_command("STATE", prepare_kv_message(name, value))
        return
    issue(CommandBuilder("save-state", value).property("name", name).build())


def get_state(name: str) -> Optional[str]:
    """Return state saved by this action's main step."""
    return os.environ.get(f"STATE_{name}")


async def group(name: str, awaitable: Awaitable[T]) -> T:
    """Await ``awaitable`` inside an output group and return its result."""
    start_group(name)
    try:
        return await awaitable
    finally:
        end_group()