# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders the usage text of a compiled command.

Example output:

    Usage: unZip <zipPath> <destDir> [excludes...] [options]

    Options:
      -N, --no-makes-dir   None create a new directory (default: true)
      -P, --pwd <password> unzip password
      -h, --help           Output usage information

The version row (if any) comes first, then the declared options in declared
order, then the help row. Flag columns are aligned on the widest
`--long-flag <value>` text. The text is rendered once when the command is
registered and cached on its `HelpSpec`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from commandeer.models import CommandModel
from commandeer.utils import has_content, render_default


@dataclass(frozen=True)
class _HelpRow:
    short_flag: str | None
    long_flag: str
    description: str = ""
    value_schema: str = ""
    default: Any = None

    @property
    def flag_text(self) -> str:
        if self.value_schema:
            return f"{self.long_flag} {self.value_schema}"
        return self.long_flag


def _collect_rows(command: CommandModel) -> list[_HelpRow]:
    rows = []
    if command.version_spec:
        version = command.version_spec
        rows.append(_HelpRow(version.short_flag, version.long_flag, version.description))
    for option in command.options:
        rows.append(
            _HelpRow(
                option.short_flag,
                option.long_flag,
                option.description,
                option.value_schema,
                option.default,
            )
        )
    help_spec = command.help_spec
    rows.append(_HelpRow(help_spec.short_flag, help_spec.long_flag, help_spec.description))
    return rows


def get_usage(command: CommandModel, program_name: str = "") -> str:
    """Return the `Usage: ...` line of a command."""
    usage = f"Usage: {command.name or program_name}"
    for argument in command.arguments:
        usage += f" {argument.source_schema}"
    return f"{usage} [options]"


def render_help(command: CommandModel, program_name: str = "") -> str:
    """
    Render the full usage text of a command.

    Args:
        command (CommandModel): The compiled command.
        program_name (str): Shown instead of the command name for the default command.

    Returns:
        str: The usage text, one line per option, each ending with a newline.
    """
    text = f"{get_usage(command, program_name)}\n\n"
    if has_content(command.description):
        text += f"{command.description}\n\n"

    rows = _collect_rows(command)
    text += "Options:\n"
    width = max(len(row.flag_text) for row in rows)
    for row in rows:
        line = f"  {row.short_flag}," if row.short_flag else "    ,"
        line += f" {row.flag_text.ljust(width)}"
        if row.description:
            line += f" {row.description}"
        if has_content(row.default):
            line += f" (default: {render_default(row.default)})"
        text += f"{line}\n"
    return text
