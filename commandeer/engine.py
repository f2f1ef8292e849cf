# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ParseEngine`, the stateful scanner that matches a raw
token list against the commands of a `CommandRegistry`.

Parsing runs in four steps:

1. Invocation: the first two tokens (executable and script path) are dropped.
2. Command selection: the first user token selects a named command; otherwise
   the default (nameless) command is used.
3. Token scan, left to right. An option that takes a value "reserves" the
   following token(s). Variadic options keep accumulating until a token that
   starts with `-`. Bare tokens fill positional slots in declared order; tokens
   beyond the declared capacity are dropped.
4. Validation of required arguments, required options and options that must be
   paired with a value, followed by dispatch to the command's action.

Help and version flags print their text and raise an `ExitSignal` from inside
the scan loop. Nothing after that point runs.
"""
from __future__ import annotations

from collections import deque
from typing import Any, NoReturn, Sequence

from rich.console import Console

from commandeer.console import console as default_console
from commandeer.exceptions import (
    InvalidInvocationError,
    MissingOptionValueError,
    MissingRequiredArgumentError,
    MissingRequiredOptionError,
    NoMatchingCommandError,
    OptionTransformError,
    UnknownOptionError,
    UnknownOptionKindError,
)
from commandeer.grammar import (
    is_joined_short_flags,
    is_long_flag,
    is_short_flag,
    matches_flag,
)
from commandeer.logger import logger
from commandeer.models import CommandModel, OptionSpec
from commandeer.option_kind import OptionKind
from commandeer.registry import CommandRegistry
from commandeer.signals import HelpSignal, VersionSignal
from commandeer.utils import has_content


class ParseEngine:
    """
    Scans token lists against the commands of a registry.

    The engine keeps no state between calls to `parse()`; the per-parse state
    lives on the matched `CommandModel`, which is reset before each scan.
    """

    def __init__(self, registry: CommandRegistry, console: Console | None = None) -> None:
        self.registry = registry
        self.console: Console = console or default_console

    def parse(self, tokens: Sequence[str]) -> Any:
        """
        Parse a full invocation token list and dispatch to the matched action.

        Args:
            tokens (Sequence[str]): `[executable, script_path, *user_tokens]`.

        Returns:
            Any: The action's return value, or None when the command has no action.

        Raises:
            ParseError: On any parse failure, before any action runs.
            ExitSignal: After help or version text was printed.
        """
        queue = self._start_queue(tokens)
        command = self._select_command(queue)
        command.reset()
        self._scan(command, queue)
        self._validate(command)
        self.registry.option_values = command.option_values()
        return self._dispatch(command)

    def _start_queue(self, tokens: Sequence[str]) -> deque[str]:
        if isinstance(tokens, str) or not isinstance(tokens, (list, tuple)):
            raise InvalidInvocationError(
                f"Token list must be a list of strings, got {tokens!r}"
            )
        queue = deque(tokens)
        if not queue:
            raise InvalidInvocationError(
                f"Token list is missing the executable path: {list(tokens)!r}"
            )
        queue.popleft()
        if not queue:
            raise InvalidInvocationError(
                f"Token list is missing the script path: {list(tokens)!r}"
            )
        queue.popleft()
        return queue

    def _select_command(self, queue: deque[str]) -> CommandModel:
        command = self.registry.find_default()
        if queue and queue[0]:
            named = self.registry.find_by_name(queue[0])
            if named is not None:
                command = named
                queue.popleft()

        if command is None:
            names = self.registry.names()
            raise NoMatchingCommandError(
                "Set a command.\nwhere <command> is one of:\n    " + ", ".join(names),
                command_names=names,
            )
        logger.debug("Selected command '%s'.", command.name)
        return command

    def _scan(self, command: CommandModel, queue: deque[str]) -> None:
        reserved: OptionSpec | None = None
        while queue:
            token = queue.popleft()

            if reserved is not None:
                if token.startswith("-") and not reserved.pairs_immediately_with_value:
                    logger.debug("Released option '%s' at %r.", reserved.name, token)
                    reserved = None
                elif reserved.variadic:
                    if token.startswith("-"):
                        reserved = None
                    else:
                        reserved.value.append(
                            self._transform(command, reserved, token, reserved.value)
                        )
                        continue
                else:
                    reserved.value = self._transform(command, reserved, token, reserved.value)
                    reserved = None
                    continue

            if token.startswith("-"):
                self._handle_exit_flags(command, token)
                for option in self._resolve_options(command, token):
                    if self._apply_flag(command, option):
                        logger.debug("Reserved option '%s'.", option.name)
                        reserved = option
            else:
                self._bind_argument(command, token)

    def _handle_exit_flags(self, command: CommandModel, token: str) -> None:
        help_spec = command.help_spec
        if matches_flag(token, help_spec.short_flag, help_spec.long_flag):
            self._print(help_spec.text)
            raise HelpSignal(help_spec.text)

        version = command.version_spec
        if version and matches_flag(token, version.short_flag, version.long_flag):
            self._print(version.value)
            raise VersionSignal(version.value)

    def _resolve_options(self, command: CommandModel, token: str) -> list[OptionSpec]:
        if is_short_flag(token):
            option = next((o for o in command.options if o.short_flag == token), None)
        elif is_joined_short_flags(token):
            return [
                option
                for option in command.options
                if option.short_flag and option.short_flag[1:] in token[1:]
            ]
        elif is_long_flag(token):
            option = next((o for o in command.options if o.long_flag == token), None)
        else:
            logger.debug("Ignoring unrecognized flag form %r.", token)
            return []

        if option is None:
            self._raise_unknown_option(command, token)
        return [option]

    def _raise_unknown_option(self, command: CommandModel, token: str) -> NoReturn:
        candidates = [
            flag
            for option in command.options
            for flag in option.flags
            if flag.startswith(token)
        ]
        if candidates:
            message = (
                f"Unrecognized option '{token}'. "
                f"Did you mean one of: {', '.join(candidates)}?"
            )
        else:
            message = (
                f"Unrecognized option '{token}'. "
                f"Use {command.help_spec.long_flag} to see available options."
            )
        raise UnknownOptionError(message, command.help_text)

    def _apply_flag(self, command: CommandModel, option: OptionSpec) -> bool:
        """Record a flag occurrence; return True when the option reserves the next token."""
        option.specified = True
        if option.kind == OptionKind.SWITCH_CLOSES_TRUE:
            if option.transformer:
                option.value = self._transform(command, option, None, option.value)
            else:
                option.value = False
        elif option.kind == OptionKind.SWITCH_OPENS_FALSE:
            if option.transformer:
                option.value = self._transform(command, option, None, option.value)
            else:
                option.value = True
        elif option.kind == OptionKind.VALUED:
            if (
                not option.variadic
                and not option.pairs_immediately_with_value
                and not option.value
            ):
                option.value = True
            return True
        else:
            raise UnknownOptionKindError(
                f"Unknown option kind {option.kind!r} for '{option.long_flag}'",
                command.help_text,
            )
        return False

    def _transform(
        self, command: CommandModel, option: OptionSpec, token: str | None, previous: Any
    ) -> Any:
        if option.transformer is None:
            return token
        try:
            return option.transformer(token, previous)
        except Exception as error:
            raise OptionTransformError(
                f"Invalid value {token!r} for option '{option.source_schema}': {error}",
                command.help_text,
            ) from error

    def _bind_argument(self, command: CommandModel, token: str) -> None:
        slot = next((a for a in command.arguments if a.accepts_token()), None)
        if slot is None:
            logger.debug("Dropping surplus token %r.", token)
            return
        slot.bind(token)

    def _validate(self, command: CommandModel) -> None:
        for argument in command.arguments:
            if argument.required and not has_content(argument.value):
                raise MissingRequiredArgumentError(
                    f"error: missing required argument '{argument.name}'",
                    command.help_text,
                )

        for option in command.options:
            if option.required and not has_content(option.value):
                raise MissingRequiredOptionError(
                    f"error: option '{option.source_schema}' argument missing",
                    command.help_text,
                )
            if (
                option.specified
                and option.pairs_immediately_with_value
                and option.value is None
            ):
                raise MissingOptionValueError(
                    f"error: option '{option.source_schema}' argument missing",
                    command.help_text,
                )

    def _dispatch(self, command: CommandModel) -> Any:
        if command.action is None:
            return None
        arguments = [
            argument.value if argument.specified else None
            for argument in command.arguments
        ]
        logger.debug("Dispatching command '%s'.", command.name)
        if command.options:
            return command.action(*arguments, command.option_values())
        return command.action(*arguments)

    def _print(self, text: str) -> None:
        self.console.print(
            text.rstrip("\n"),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
