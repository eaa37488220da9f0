# actionkit

A small toolkit for writing GitHub Actions in Python.

It covers the parts of an action that talk to the runner:

- reading action inputs from `INPUT_*` environment variables (`actionkit.input`),
- issuing workflow commands such as `::warning::`, `::group::` and `::add-mask::` (`actionkit.core`),
- file commands for environment variables, `PATH` and saved state (`actionkit.core`),
- reading an `action.yml` manifest (`actionkit.manifest`) and resolving its inputs with
  their defaults (`actionkit.action`).

## Installation

```
pip install actionkit
```

## Environments

Inputs and variables are read through an environment object with `get(key)` and
`set(key, value)`:

- `actionkit.env.OsEnv` uses the process environment,
- `actionkit.env.EnvMap` is a thread-safe in-memory environment, built from a mapping or
  from key/value pairs; handy in tests.

## Reading inputs

```python
from actionkit.env import EnvMap
from actionkit.input import set_input, get_input, parse_input, parse_bool, parse_int, get_multiline

env = EnvMap()
set_input(env, "some-input", "SET")        # stored as INPUT_SOME-INPUT
get_input(env, "some-input")               # "SET"

set_input(env, "verbose", "yes")
parse_input(env, "verbose", parse_bool)    # True

set_input(env, "retries", "3")
parse_input(env, "retries", parse_int)     # 3

set_input(env, "files", "a.txt\nb.txt")
get_multiline(env, "files")                # ["a.txt", "b.txt"]
```

`env_var_name` gives the variable that holds an input: the name is prefixed with
`INPUT_` (unless it already starts with it) and upper-cased. Empty inputs count as
missing, so `get_input` and `parse_input` return `None` for them.

`parse_input` takes any callable that turns a string into a value; the default is
`str`. `parse_bool` accepts `yes`/`true`/`t` and `no`/`false`/`f` in any ASCII case;
`parse_int` accepts unsigned integers that fit in 64 bits. Invalid values raise
`BoolParseError` or `IntParseError`, both subclasses of `ParseError` (itself a
`ValueError`).

## Workflow commands

```python
from actionkit.core import (
    debug, warning, error, notice, info,
    start_group, end_group, set_secret, set_command_echo,
    AnnotationProperties, LogLevel, issue_level,
)

warning("something looks off")
issue_level(LogLevel.ERROR, "bad value", AnnotationProperties(file="src/app.py", start_line=3))

start_group("build")
info("plain log line")
end_group()

set_secret("secret")
set_command_echo(False)
```

The `group` coroutine awaits an awaitable between `start_group` and `end_group` and
returns its result; the group is closed even if the awaitable raises.

Commands can also be built with `CommandBuilder(command, message)`, its `property` and
`properties` methods and `build()`, and printed with `issue`. Property values are
escaped with `actionkit.utils.escape_property`; `escape_data` escapes message text.

## Environment, path and state

- `export_var(env, name, value)` sets the variable in `env` and, if `GITHUB_ENV` is set,
  appends it to that file; otherwise it prints a `set-env` command.
- `add_path(env, path)` prepends the path to `PATH` and appends it to the file named by
  `GITHUB_PATH`, or prints an `add-path` command.
- `save_state(env, name, value)` writes to the `GITHUB_STATE` file, or prints a
  `save-state` command. `get_state(name)` reads `STATE_<name>` from the process
  environment.
- `issue_file_command(command, message)` appends a line to the file named by
  `GITHUB_<command>`; `prepare_kv_message` formats a key and value with a random
  delimiter.
- `is_debug()` tells whether `RUNNER_DEBUG` is `1`, and `fail(message)` issues an error
  and exits with `ExitCode.FAILURE`.

Errors: `FileCommandError` when the file variable is missing or the file cannot be
written, `DelimiterError` when a key or value contains the delimiter (both are
`CommandError`s), and `AddPathError` when a path cannot be added.

## Action manifests

```python
from actionkit.action import Action
from actionkit.env import EnvMap

action = Action.from_manifest("action.yml")
action.inputs()                         # input name -> actionkit.input.Input

values = action.parse(EnvMap())         # enum member -> value, or the input's default
for member, value in values.items():
    print(member.value, value)          # member.value is the input name

action.parse_input("retries", int, EnvMap({"INPUT_RETRIES": "3"}))   # 3
```

Each action gets an enum (`action.input_enum`) with one member per declared input; the
member names come from `actionkit.ident.str_to_enum_variant`, and `parse_str` turns any
string into a valid identifier. `parse` and `parse_input` use the process environment
when no environment is given; `parse_input` raises `KeyError` for inputs the manifest
does not declare.

`Manifest.from_action_yml(path)` and `Manifest.from_yaml(text)` give the raw manifest:
name, description, author, branding, inputs and outputs. Malformed manifests raise
`ValueError`. `resolve_path(path, root)` finds a manifest under `root`, falling back to
`root/src`.

## Command line

```
actionkit action.yml
```

reads the manifest (default `action.yml`, also looked for under `src/`) and prints each
input with its value as resolved from the current environment.

## What it does not do

`actionkit.summary` only holds data types for job summaries (`TableCell`,
`ImageOptions`) and the `ENV_VAR` name; nothing renders or writes a summary. The package
has no support for artifacts, caches, tool caches, running processes, globbing or
calling the GitHub API.