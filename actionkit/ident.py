"""Turning arbitrary input names into valid identifiers."""

from __future__ import annotations

import keyword
from itertools import zip_longest

_RESERVED = frozenset(
    (
        "as", "break", "const", "continue", "crate", "else", "enum", "extern",
        "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
        "move", "mut", "pub", "ref", "return", "self", "static", "struct",
        "super", "trait", "true", "type", "unsafe", "use", "where", "while",
        "abstract", "become", "box", "do", "final", "macro", "override", "priv",
        "typeof", "unsized", "virtual", "yield", "async", "await", "try",
    )
) | frozenset(keyword.kwlist)

_SEPARATORS = str.maketrans({" ": "\0", "_": "\0", "-": "\0"})


def _replace_invalid_identifier_chars(s: str) -> str:
    if s.startswith("$"):
        s = s[1:]
    return "".join(c if c.isalnum() or c == "_" else "_" for c in s)


def _replace_numeric_start(s: str) -> str:
    if s[:1].isnumeric():
        return f"_{s}"
    return s


def _remove_excess_underscores(s: str) -> str:
    return "".join(
        c for c, following in zip_longest(s, s[1:]) if c != "_" or following != "_"
    )


def _capitalize(s: str) -> str:
    return s[:1].upper() + s[1:]


def str_to_enum_variant(s: str) -> str:
    """Convert a name such as ``resolve-versions`` to a variant name."""
    parts = s.translate(_SEPARATORS).split("\0")
    return parse_str("".join(_capitalize(part) for part in parts))


def parse_str(s: str) -> str:
    """Convert an arbitrary string to a valid identifier."""
    if not s:
        return "empty_"
    if all(c == "_" for c in s):
        return "underscore_"

    s = _replace_invalid_identifier_chars(s)
    s = _replace_numeric_start(s)
    s = _remove_excess_underscores(s)

    if not s:
        return "invalid_"
    if s in _RESERVED:
        return f"{s}_"
    return s