# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical classifiers for command-line flags and flag schemas.

Recognized token forms:
- short flag: `-x`
- joined short flags: `-xyz` (two or more flag characters)
- long flag: `--long-name` (internal hyphens allowed)

A flag character is an ASCII letter, a digit, or one of `_ . , ! ? + * $`.

Flag schemas are the strings used to declare options, e.g. `"-f, --file <path>"`.
They consist of an optional short flag, a separator (comma or whitespace), a
long flag and an optional value schema. A long flag starting with `--no-`
declares an inverted switch.

This module holds no state.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from commandeer.exceptions import InvalidFlagSchemaError

FLAG_CHAR = r"[0-9_.,!?+*$a-zA-Z]"

_FLAG_SCHEMA_RE = re.compile(rf"(-{FLAG_CHAR})?[,\s]\s?(--\S+)\s*(\S*)", re.IGNORECASE)
_SHORT_FLAG_RE = re.compile(rf"^-({FLAG_CHAR})$", re.IGNORECASE)
_JOINED_SHORT_FLAGS_RE = re.compile(rf"^-({FLAG_CHAR}{{2,}})$", re.IGNORECASE)
_LONG_FLAG_RE = re.compile(
    rf"^--({FLAG_CHAR}+(-{FLAG_CHAR}+)*)$",
    re.IGNORECASE,
)
_INVERTED_LONG_FLAG_RE = re.compile(r"^--no-", re.IGNORECASE)


@dataclass(frozen=True)
class FlagSchema:
    """The parts extracted from a flag schema string.

    Attributes:
        short_flag (str | None): e.g. `-f`, or None when not declared.
        long_flag (str): e.g. `--file`.
        value_schema (str): e.g. `<path>`, `[name...]`, or "" for switches.
    """

    short_flag: str | None
    long_flag: str
    value_schema: str = ""


def is_short_flag(token: str) -> bool:
    """Return True for a single short flag such as `-s`."""
    return bool(_SHORT_FLAG_RE.match(token))


def is_joined_short_flags(token: str) -> bool:
    """Return True for joined short flags such as `-Cfs`."""
    return bool(_JOINED_SHORT_FLAGS_RE.match(token))


def is_long_flag(token: str) -> bool:
    """Return True for a long flag such as `--file` or `--save-file`."""
    return bool(_LONG_FLAG_RE.match(token))


def is_inverted_long_flag(long_flag: str) -> bool:
    """Return True when the long flag declares an inverted (`--no-`) switch."""
    return bool(_INVERTED_LONG_FLAG_RE.match(long_flag))


def match_flag_schema(schema: str) -> FlagSchema:
    """
    Split a flag schema string into its short flag, long flag and value schema.

    Args:
        schema (str): A flag schema such as `"-f, --file <path>"`.

    Returns:
        FlagSchema: The extracted parts.

    Raises:
        InvalidFlagSchemaError: If the schema is not a string or does not match.
    """
    if not isinstance(schema, str):
        raise InvalidFlagSchemaError(f"Flag schema must be a string, got {schema!r}")
    match = _FLAG_SCHEMA_RE.search(schema)
    if not match:
        raise InvalidFlagSchemaError(f"Invalid flag schema: {schema!r}")
    short_flag, long_flag, value_schema = match.groups()
    return FlagSchema(
        short_flag=short_flag or None,
        long_flag=long_flag,
        value_schema=value_schema.strip(),
    )


def matches_flag(token: str, short_flag: str | None, long_flag: str | None) -> bool:
    """
    Check whether a token selects the given flag pair.

    A short flag must match exactly, joined short flags match when they contain
    the short flag's character, and a long flag must match exactly.
    """
    if is_short_flag(token):
        return token == short_flag
    if is_joined_short_flags(token):
        return bool(short_flag) and short_flag[1:] in token[1:]
    if is_long_flag(token):
        return token == long_flag
    return False
