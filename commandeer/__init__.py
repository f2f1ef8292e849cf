"""
Commandeer CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    CommandeerError,
    DuplicateCommandError,
    EmptyProgramSchemaError,
    InvalidCommandSchemaError,
    InvalidFlagSchemaError,
    InvalidHelpSchemaError,
    InvalidInvocationError,
    InvalidOptionSchemaError,
    InvalidVersionSchemaError,
    MissingOptionValueError,
    MissingRequiredArgumentError,
    MissingRequiredOptionError,
    NoMatchingCommandError,
    OptionTransformError,
    ParseError,
    SchemaError,
    UnknownOptionError,
    UnknownOptionKindError,
)
from .logger import logger
from .models import ArgumentSpec, CommandModel, HelpSpec, OptionSpec, VersionSpec
from .option_kind import OptionKind
from .program import Program
from .schema import OptionRow, ProgramSchema
from .signals import ExitSignal, HelpSignal, UsageSignal, VersionSignal

__version__ = "0.1.0"

__all__ = [
    "Program",
    "ProgramSchema",
    "OptionRow",
    "CommandModel",
    "ArgumentSpec",
    "OptionSpec",
    "VersionSpec",
    "HelpSpec",
    "OptionKind",
    "ExitSignal",
    "HelpSignal",
    "VersionSignal",
    "UsageSignal",
    "CommandeerError",
    "SchemaError",
    "ParseError",
    "InvalidCommandSchemaError",
    "InvalidOptionSchemaError",
    "InvalidVersionSchemaError",
    "InvalidHelpSchemaError",
    "InvalidFlagSchemaError",
    "DuplicateCommandError",
    "EmptyProgramSchemaError",
    "InvalidInvocationError",
    "NoMatchingCommandError",
    "UnknownOptionError",
    "MissingRequiredArgumentError",
    "MissingRequiredOptionError",
    "MissingOptionValueError",
    "OptionTransformError",
    "UnknownOptionKindError",
    "logger",
]
