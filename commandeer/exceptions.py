# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Commandeer.

Two families exist. Schema errors are raised while a program schema is being
compiled and registered; the registration simply fails and the registry is left
untouched. Parse errors are raised while a token list is scanned and carry the
rendered help text of the command that was being parsed.

Exception Hierarchy:
- CommandeerError
    ├── SchemaError
    │   ├── InvalidCommandSchemaError
    │   ├── InvalidOptionSchemaError
    │   ├── InvalidVersionSchemaError
    │   ├── InvalidHelpSchemaError
    │   ├── InvalidFlagSchemaError
    │   ├── DuplicateCommandError
    │   └── EmptyProgramSchemaError
    └── ParseError
        ├── InvalidInvocationError
        ├── NoMatchingCommandError
        ├── UnknownOptionError
        ├── MissingRequiredArgumentError
        ├── MissingRequiredOptionError
        ├── MissingOptionValueError
        ├── OptionTransformError
        └── UnknownOptionKindError

Help and version output are not errors; see `commandeer.signals`.
"""


class CommandeerError(Exception):
    """Base exception for Commandeer."""


class SchemaError(CommandeerError):
    """Exception raised when a program schema cannot be compiled."""


class InvalidCommandSchemaError(SchemaError):
    """Exception raised when a command schema string is malformed."""


class InvalidOptionSchemaError(SchemaError):
    """Exception raised when an option row is malformed."""


class InvalidVersionSchemaError(SchemaError):
    """Exception raised when a version schema is malformed."""


class InvalidHelpSchemaError(SchemaError):
    """Exception raised when a help option schema is malformed."""


class InvalidFlagSchemaError(SchemaError):
    """Exception raised when a flag schema string does not match '-x, --long <val>'."""


class DuplicateCommandError(SchemaError):
    """Exception raised when a command with the same name is already registered."""


class EmptyProgramSchemaError(SchemaError):
    """Exception raised when a program schema has neither a command nor options."""


class ParseError(CommandeerError):
    """
    Base class for errors raised while parsing a token list.

    Attributes:
        message (str): Short description of the failure.
        help_text (str): Rendered usage text of the matched command, if any.
    """

    def __init__(self, message: str, help_text: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.help_text = help_text

    def __str__(self) -> str:
        if self.help_text:
            return f"{self.message}\n{self.help_text}"
        return self.message


class InvalidInvocationError(ParseError):
    """Exception raised when the token list lacks the executable or script path."""


class NoMatchingCommandError(ParseError):
    """Exception raised when no registered command matches the token list."""

    def __init__(
        self, message: str, command_names: list[str], help_text: str = ""
    ) -> None:
        super().__init__(message, help_text)
        self.command_names = command_names


class UnknownOptionError(ParseError):
    """Exception raised when a flag does not belong to the matched command."""


class MissingRequiredArgumentError(ParseError):
    """Exception raised when a required positional argument is left unbound."""


class MissingRequiredOptionError(ParseError):
    """Exception raised when a required option ends the parse without a value."""


class MissingOptionValueError(ParseError):
    """Exception raised when an option that pairs with a value was given none."""


class OptionTransformError(ParseError):
    """Exception raised when an option's transformer fails on a token."""


class UnknownOptionKindError(ParseError):
    """Exception raised when an option carries a kind the engine cannot handle."""
