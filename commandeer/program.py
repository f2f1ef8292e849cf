# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Program`, the public entry point of Commandeer.

A `Program` owns a `CommandRegistry` and a `ParseEngine`. Commands are declared
with schemas, then a token list is parsed against them:

    program = Program()
    program.add_program(
        {
            "command": "play <consoleName> [gameTitle]",
            "options": [["-s, --save-file <path>", "Where to save"]],
            "action": play,
        }
    )
    program.run()  # parses [sys.executable, *sys.argv]

After `parse()`, `program.opt` maps every option name of the matched command to
its value:

    program.opt["saveFile"]

Each `Program` is independent, so tests build a fresh one instead of sharing
process-wide state.
"""
from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from commandeer.compiler import compile_program
from commandeer.console import console as default_console
from commandeer.console import error_console
from commandeer.engine import ParseEngine
from commandeer.exceptions import NoMatchingCommandError, ParseError, SchemaError
from commandeer.logger import logger
from commandeer.models import CommandModel
from commandeer.registry import CommandRegistry
from commandeer.schema import ProgramSchema
from commandeer.signals import EXIT_ERROR, ExitSignal, UsageSignal
from commandeer.utils import get_program_name


class Program:
    """
    A set of declared commands and the parser that dispatches to them.

    Args:
        program_name (str | None): Name shown in the usage line of the default
            command. Defaults to the basename of `sys.argv[0]`.
        console (Console | None): Where help and version text is printed.
    """

    def __init__(
        self,
        program_name: str | None = None,
        console: Console | None = None,
    ) -> None:
        self.program_name: str = program_name or get_program_name()
        self.console: Console = console or default_console
        self.registry: CommandRegistry = CommandRegistry()
        self.engine: ParseEngine = ParseEngine(self.registry, console=self.console)

    @property
    def opt(self) -> Mapping[str, Any]:
        """Read-only view of the option values set by the last `parse()`."""
        return MappingProxyType(self.registry.option_values)

    def add_program(self, schema: Mapping[str, Any] | ProgramSchema) -> CommandModel:
        """
        Compile and register one program schema.

        Args:
            schema: A mapping with `command`, `description`, `version`, `options`,
                `requiredOptions`, `action` and `helpOption` keys (all optional),
                or a `ProgramSchema`.

        Returns:
            CommandModel: The registered command.

        Raises:
            SchemaError: If the schema is invalid or the command name is taken.
        """
        program_schema = ProgramSchema.from_schema(schema)
        command = compile_program(program_schema, self.program_name)
        self.registry.add(command)
        return command

    def add_programs(
        self, schemas: Sequence[Mapping[str, Any] | ProgramSchema]
    ) -> list[CommandModel]:
        """Register several program schemas in order."""
        if not isinstance(schemas, (list, tuple)) or not schemas:
            raise SchemaError(
                f"add_programs() expects a non-empty list of schemas, got {schemas!r}"
            )
        return [self.add_program(schema) for schema in schemas]

    def clear_programs(self) -> None:
        """Remove all commands and option values."""
        self.registry.clear()

    def get_command_models(self) -> list[CommandModel]:
        """Return the registered commands, in registration order."""
        return list(self.registry)

    def parse(self, tokens: Sequence[str]) -> Any:
        """
        Parse `[executable, script_path, *user_tokens]` and run the matched action.

        Returns:
            Any: The action's return value, or None when there is no action.

        Raises:
            ParseError: On any parse failure.
            ExitSignal: When help or version text was displayed.
        """
        return self.engine.parse(tokens)

    def help(self, callback: Callable[[], Any] | None = None) -> None:
        """
        Run `callback`, show the first registered command's help and exit with
        a failure status.

        Raises:
            UsageSignal: Always, after printing the help text.
            NoMatchingCommandError: If no command is registered.
        """
        if callback is not None:
            callback()
        command = self.registry.first()
        if command is None:
            raise NoMatchingCommandError("No command is registered.", command_names=[])
        self.console.print(
            command.help_text.rstrip("\n"),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        raise UsageSignal(command.help_text)

    def run(self, tokens: Sequence[str] | None = None) -> Any:
        """
        Top-level entry point: parse and turn signals and errors into exits.

        Args:
            tokens: Defaults to `[sys.executable, *sys.argv]`.

        Returns:
            Any: The action's return value.
        """
        if tokens is None:
            tokens = [sys.executable, *sys.argv]
        try:
            return self.parse(tokens)
        except ExitSignal as signal:
            logger.debug("Exiting with status %d.", signal.exit_code)
            sys.exit(signal.exit_code)
        except ParseError as error:
            error_console.print(f"[bold red]{escape(error.message)}[/]", emoji=False)
            if error.help_text:
                error_console.print(
                    error.help_text.rstrip("\n"),
                    markup=False,
                    emoji=False,
                    highlight=False,
                )
            sys.exit(EXIT_ERROR)

    def __str__(self) -> str:
        return (
            f"Program(name={self.program_name!r}, commands={len(self.registry)}, "
            f"default={self.registry.find_default() is not None})"
        )

    def __repr__(self) -> str:
        return str(self)
