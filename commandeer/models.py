# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Compiled models produced from program schemas and consumed by the parse engine.

- `ArgumentSpec`: one positional slot declared in a command schema
  (`<name>`, `[name]`, `<name...>`).
- `OptionSpec`: one declared option (`-f, --file <path>`).
- `VersionSpec` / `HelpSpec`: the auto-generated `--version` / `--help` flags.
- `CommandModel`: a single addressable command with all of the above.

Models hold both their compiled (immutable by convention) attributes and the
runtime state written by `ParseEngine` (`specified`, `value`). `reset()` puts the
runtime state back to what the compiler produced.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Callable

from commandeer.option_kind import OptionKind

Transformer = Callable[[Any, Any], Any]


@dataclass
class ArgumentSpec:
    """
    Represents a positional argument of a command.

    Attributes:
        name (str): Argument name as written inside the brackets.
        required (bool): True for `<name>`, False for `[name]`.
        variadic (bool): True when the name ends with `...`.
        source_schema (str): The literal token, e.g. `[excludes...]`.
        specified (bool): Set when a token was bound during parse.
        value (Any): None until bound; a list when variadic.
    """

    name: str
    required: bool = False
    variadic: bool = False
    source_schema: str = ""
    specified: bool = False
    value: Any = None

    def __post_init__(self) -> None:
        if self.variadic and self.value is None:
            self.value = []

    def bind(self, token: str) -> None:
        """Bind a bare token to this slot."""
        self.specified = True
        if self.variadic:
            self.value.append(token)
        else:
            self.value = token

    def accepts_token(self) -> bool:
        """Return True while this slot can still take a bare token."""
        return self.variadic or self.value is None

    def reset(self) -> None:
        self.specified = False
        self.value = [] if self.variadic else None


@dataclass
class OptionSpec:
    """
    Represents a declared option of a command.

    Attributes:
        name (str): camelCase key used in the option-value map.
        long_flag (str): e.g. `--save-file`.
        short_flag (str | None): e.g. `-s`.
        kind (OptionKind): Switch or valued behavior.
        description (str): Help text.
        value_schema (str): e.g. `<path>` or `[name...]`; "" for switches.
        variadic (bool): Valued option accumulating into a list.
        required (bool): Must have content once parsing ends.
        pairs_immediately_with_value (bool): A following value token is mandatory.
        transformer (Callable | None): `(raw_token, previous_value) -> new_value`.
        default (Any): Initial value restored by `reset()`.
        source_schema (str): The flag schema string it was compiled from.
        specified (bool): Set when the flag was seen during parse.
        value (Any): Current value.
    """

    name: str
    long_flag: str
    short_flag: str | None = None
    kind: OptionKind = OptionKind.SWITCH_OPENS_FALSE
    description: str = ""
    value_schema: str = ""
    variadic: bool = False
    required: bool = False
    pairs_immediately_with_value: bool = False
    transformer: Transformer | None = None
    default: Any = None
    source_schema: str = ""
    specified: bool = False
    value: Any = field(default=None)

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = deepcopy(self.default)

    @property
    def flags(self) -> tuple[str, ...]:
        if self.short_flag:
            return (self.short_flag, self.long_flag)
        return (self.long_flag,)

    def reset(self) -> None:
        self.specified = False
        self.value = deepcopy(self.default)


@dataclass
class VersionSpec:
    """The auto-generated version flag of a command."""

    value: str
    short_flag: str | None = "-V"
    long_flag: str = "--version"
    description: str = "Output the version number"


@dataclass
class HelpSpec:
    """The auto-generated help flag of a command and its rendered text."""

    short_flag: str | None = "-h"
    long_flag: str = "--help"
    description: str = "Output usage information"
    text: str = ""


@dataclass
class CommandModel:
    """
    A single addressable command.

    An empty `name` marks the default command, selected when the first user
    token is not the name of any registered command.
    """

    name: str = ""
    description: str = ""
    arguments: list[ArgumentSpec] = field(default_factory=list)
    options: list[OptionSpec] = field(default_factory=list)
    version_spec: VersionSpec | None = None
    help_spec: HelpSpec = field(default_factory=HelpSpec)
    action: Callable[..., Any] | None = None

    @property
    def is_default(self) -> bool:
        return self.name == ""

    @property
    def help_text(self) -> str:
        return self.help_spec.text

    def option_values(self) -> dict[str, Any]:
        """Return the current `name -> value` map of every option."""
        return {option.name: option.value for option in self.options}

    def reset(self) -> None:
        """Restore the runtime state of all arguments and options."""
        for argument in self.arguments:
            argument.reset()
        for option in self.options:
            option.reset()

    def __str__(self) -> str:
        required = sum(argument.required for argument in self.arguments)
        return (
            f"CommandModel(name={self.name!r}, args={len(self.arguments)}, "
            f"options={len(self.options)}, required={required})"
        )
