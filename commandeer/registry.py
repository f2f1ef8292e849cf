# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandRegistry`, the ordered collection of compiled commands owned by
a `Program`, together with the public option-value map filled by each parse.

Command names are unique within a registry; the empty name is the default
command. `clear()` resets the commands and the option-value map together.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator

from commandeer.exceptions import DuplicateCommandError
from commandeer.logger import logger
from commandeer.models import CommandModel


class CommandRegistry:
    """Ordered, name-unique collection of `CommandModel`s."""

    def __init__(self) -> None:
        self._commands: list[CommandModel] = []
        self.option_values: dict[str, Any] = {}

    def add(self, command: CommandModel) -> None:
        """
        Register a compiled command.

        Raises:
            DuplicateCommandError: If a command with the same name exists.
        """
        if self.find_by_name(command.name) is not None:
            label = command.name or "<default>"
            raise DuplicateCommandError(f"Command '{label}' is already registered")
        self._commands.append(command)
        logger.debug(
            "Registered command '%s' with %d option(s).",
            command.name,
            len(command.options),
        )

    def add_many(self, commands: Iterable[CommandModel]) -> None:
        for command in commands:
            self.add(command)

    def clear(self) -> None:
        """Remove every command and reset the option-value map."""
        self._commands, self.option_values = [], {}
        logger.debug("Command registry cleared.")

    def find_by_name(self, name: str) -> CommandModel | None:
        return next((command for command in self._commands if command.name == name), None)

    def find_default(self) -> CommandModel | None:
        return self.find_by_name("")

    def first(self) -> CommandModel | None:
        return self._commands[0] if self._commands else None

    def names(self) -> list[str]:
        return [command.name for command in self._commands]

    def __iter__(self) -> Iterator[CommandModel]:
        return iter(list(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return f"CommandRegistry(commands={self.names()!r})"
