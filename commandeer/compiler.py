# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Compiles program schemas into `CommandModel`s.

- `compile_command("play <consoleName> [gameTitle]")` → name and positional slots.
- `compile_options(rows, required)` → `OptionSpec`s, deriving each option's kind
  and initial value from its flag schema:

    | long flag   | value schema | kind               | initial value          |
    |-------------|--------------|--------------------|------------------------|
    | `--no-X`    | (ignored)    | SWITCH_CLOSES_TRUE | True                   |
    | other       | empty        | SWITCH_OPENS_FALSE | False                  |
    | other       | `<...>`      | VALUED (required)  | [] if variadic else None |
    | other       | `[...]`      | VALUED (optional)  | [] if variadic else None |

  A default given in the row replaces the initial value (wrapped in a list for
  variadic options) and makes a `<...>` value optional.
- `compile_version(...)` / `compile_help(...)` → the auto-generated flags.
- `compile_program(...)` → a complete `CommandModel` with its help text rendered.

Every failure raises a `SchemaError` subclass.
"""
from __future__ import annotations

import re
from typing import Any, Sequence

from commandeer.exceptions import (
    EmptyProgramSchemaError,
    InvalidCommandSchemaError,
    InvalidFlagSchemaError,
    InvalidHelpSchemaError,
    InvalidOptionSchemaError,
    InvalidVersionSchemaError,
)
from commandeer.grammar import is_inverted_long_flag, match_flag_schema
from commandeer.help_renderer import render_help
from commandeer.models import (
    ArgumentSpec,
    CommandModel,
    HelpSpec,
    OptionSpec,
    VersionSpec,
)
from commandeer.option_kind import OptionKind
from commandeer.schema import OptionRow, ProgramSchema
from commandeer.utils import has_content

_ARGUMENT_RE = re.compile(r"^([<\[])(\S+)([>\]])$")
_REQUIRED_VALUE_RE = re.compile(r"^<.+>$")
_OPTIONAL_VALUE_RE = re.compile(r"^\[.+\]$")
_VARIADIC_SUFFIX = "..."


def camelcase(flag: str) -> str:
    """Camel-case a hyphenated name: `save-file` → `saveFile`."""
    if not flag:
        return ""
    first, *rest = flag.split("-")
    return first + "".join(word[:1].upper() + word[1:] for word in rest)


def get_option_name(long_flag: str) -> str:
    """Derive the option-value key from a long flag: `--no-switch-nc` → `switchNc`."""
    if not long_flag:
        return ""
    name = re.sub(r"^--", "", long_flag)
    name = re.sub(r"^no-", "", name, flags=re.IGNORECASE)
    return camelcase(name)


def compile_command(schema: str) -> CommandModel:
    """
    Compile a command schema string into a `CommandModel` with its arguments.

    An empty or blank schema yields the default (nameless) command.

    Raises:
        InvalidCommandSchemaError: If an argument token is not `<name>` or `[name]`,
            or a variadic argument is not the last one.
    """
    if not isinstance(schema, str):
        raise InvalidCommandSchemaError(f"Command schema must be a string, got {schema!r}")

    name, *argument_schemas = schema.split() or [""]
    command = CommandModel(name=name)
    for argument_schema in argument_schemas:
        match = _ARGUMENT_RE.match(argument_schema)
        if not match:
            raise InvalidCommandSchemaError(
                f"Invalid argument {argument_schema!r} in command schema {schema!r}"
            )
        opening, argument_name, closing = match.groups()
        if (opening, closing) == ("<", ">"):
            required = True
        elif (opening, closing) == ("[", "]"):
            required = False
        else:
            raise InvalidCommandSchemaError(
                f"Mismatched brackets in argument {argument_schema!r} "
                f"of command schema {schema!r}"
            )
        if command.arguments and command.arguments[-1].variadic:
            raise InvalidCommandSchemaError(
                f"Only the last argument can be variadic in command schema {schema!r}"
            )
        variadic = argument_name.endswith(_VARIADIC_SUFFIX)
        if variadic:
            argument_name = argument_name[: -len(_VARIADIC_SUFFIX)]
        command.arguments.append(
            ArgumentSpec(
                name=argument_name,
                required=required,
                variadic=variadic,
                source_schema=argument_schema,
            )
        )
    return command


def _compile_option(row: OptionRow, required: bool) -> OptionSpec:
    try:
        flag_schema = match_flag_schema(row.flag)
    except InvalidFlagSchemaError as error:
        raise InvalidOptionSchemaError(
            f"Invalid flag schema in option row {row.flag!r}"
        ) from error

    value_schema = ""
    variadic = False
    pairs_with_value = False
    if is_inverted_long_flag(flag_schema.long_flag):
        kind = OptionKind.SWITCH_CLOSES_TRUE
        default: Any = True
    elif not flag_schema.value_schema:
        kind = OptionKind.SWITCH_OPENS_FALSE
        default = False
    elif _REQUIRED_VALUE_RE.match(flag_schema.value_schema):
        kind = OptionKind.VALUED
        value_schema = flag_schema.value_schema
        variadic = value_schema.endswith("...>")
        pairs_with_value = True
        default = [] if variadic else None
    elif _OPTIONAL_VALUE_RE.match(flag_schema.value_schema):
        kind = OptionKind.VALUED
        value_schema = flag_schema.value_schema
        variadic = value_schema.endswith("...]")
        default = [] if variadic else None
    else:
        raise InvalidOptionSchemaError(
            f"Invalid value schema {flag_schema.value_schema!r} in option row {row.flag!r}"
        )

    if row.has_default:
        default = [row.default] if variadic else row.default
        pairs_with_value = False

    return OptionSpec(
        name=get_option_name(flag_schema.long_flag),
        long_flag=flag_schema.long_flag,
        short_flag=flag_schema.short_flag,
        kind=kind,
        description=row.description,
        value_schema=value_schema,
        variadic=variadic,
        required=required,
        pairs_immediately_with_value=pairs_with_value,
        transformer=row.transform,
        default=default,
        source_schema=row.flag,
    )


def compile_options(rows: Sequence[Any], required: bool = False) -> list[OptionSpec]:
    """
    Compile option rows into `OptionSpec`s, preserving their order.

    Args:
        rows: Option rows in positional, mapping or `OptionRow` form.
        required (bool): Whether the options must have a value once parsing ends.

    Raises:
        InvalidOptionSchemaError: If a row or its flag schema is malformed.
    """
    if not isinstance(rows, (list, tuple)):
        raise InvalidOptionSchemaError(f"Options must be a list of rows, got {rows!r}")
    return [_compile_option(OptionRow.from_row(row), required) for row in rows]


def compile_version(schema: Any) -> VersionSpec | None:
    """
    Compile a version schema.

    A string is the literal version with the default `-V, --version` flags.
    A list is `[version, flag_schema, description?]`. No schema means no
    version support.

    Raises:
        InvalidVersionSchemaError: If the schema has an unexpected shape.
    """
    if not has_content(schema):
        return None
    if isinstance(schema, str):
        return VersionSpec(value=schema)
    if not isinstance(schema, (list, tuple)) or len(schema) < 2:
        raise InvalidVersionSchemaError(f"Invalid version schema: {schema!r}")

    try:
        flag_schema = match_flag_schema(schema[1])
    except InvalidFlagSchemaError as error:
        raise InvalidVersionSchemaError(f"Invalid version schema: {schema!r}") from error

    version = VersionSpec(
        value=str(schema[0]),
        short_flag=flag_schema.short_flag,
        long_flag=flag_schema.long_flag,
    )
    if len(schema) > 2 and has_content(schema[2]):
        version.description = str(schema[2])
    return version


def compile_help(schema: Any = None) -> HelpSpec:
    """
    Compile a help option schema `[flag_schema, description?]`.

    No schema keeps the default `-h, --help` flags.

    Raises:
        InvalidHelpSchemaError: If the schema has an unexpected shape.
    """
    help_spec = HelpSpec()
    if not has_content(schema):
        return help_spec
    if not isinstance(schema, (list, tuple)):
        raise InvalidHelpSchemaError(f"Help option schema must be a list, got {schema!r}")
    if not isinstance(schema[0], str) or not schema[0].strip():
        raise InvalidHelpSchemaError(f"Invalid help option schema: {schema!r}")

    try:
        flag_schema = match_flag_schema(schema[0])
    except InvalidFlagSchemaError as error:
        raise InvalidHelpSchemaError(f"Invalid help option schema: {schema!r}") from error

    help_spec.short_flag = flag_schema.short_flag
    help_spec.long_flag = flag_schema.long_flag
    if len(schema) > 1 and isinstance(schema[1], str) and schema[1].strip():
        help_spec.description = schema[1]
    return help_spec


def compile_program(schema: ProgramSchema, program_name: str = "") -> CommandModel:
    """
    Compile a validated program schema into a registrable `CommandModel`.

    Required options are listed before the other options. The help text is
    rendered here, once.

    Raises:
        EmptyProgramSchemaError: If there is neither a command nor any option.
        SchemaError: Any of the compile-time errors of the parts.
    """
    if schema.command is None and not schema.options and not schema.required_options:
        raise EmptyProgramSchemaError("Program schema has no command and no options")

    command = compile_command(schema.command or "")
    command.description = schema.description
    command.version_spec = compile_version(schema.version)
    command.options = compile_options(schema.required_options, required=True)
    command.options += compile_options(schema.options, required=False)
    command.help_spec = compile_help(schema.help_option)
    command.help_spec.text = render_help(command, program_name)
    command.action = schema.action
    return command
