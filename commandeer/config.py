# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads program schemas for a `Program` from YAML or TOML files.

Example (YAML):

    program_name: backup
    programs:
      - command: "createZip <srcDir> <destDir> [excludes...]"
        description: "Create a zip archive"
        version: "1.0.0"
        action: "mytools.archive.create_zip"
        options:
          - ["-l, --level <n>", "Compression level", 6]
          - flag: "-s, --size-limit <bytes>"
            transform: "mytools.archive.parse_size"

`action` and mapping-form `transform` values are dotted import paths.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field

from commandeer.logger import logger
from commandeer.program import Program


def import_action(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ValueError(f"Invalid import path: {dotted_path!r}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ValueError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ValueError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(action):
        raise ValueError(f"'{dotted_path}' is not callable")
    return action


def _resolve_row(row: Any) -> Any:
    if isinstance(row, dict) and isinstance(row.get("transform"), str):
        return {**row, "transform": import_action(row["transform"])}
    return row


def convert_programs(raw_programs: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Resolve dotted paths in raw program schemas."""
    programs = []
    for entry in raw_programs:
        if not isinstance(entry, dict):
            raise TypeError(f"Each program must be a mapping, got {entry!r}")
        program = dict(entry)
        if isinstance(program.get("action"), str):
            program["action"] = import_action(program["action"])
        for key in ("options", "requiredOptions", "required_options"):
            if isinstance(program.get(key), list):
                program[key] = [_resolve_row(row) for row in program[key]]
        programs.append(program)
    return programs


class ProgramConfig(BaseModel):
    """Commandeer configuration file model."""

    program_name: str | None = None
    programs: list[dict[str, Any]] = Field(default_factory=list)

    def to_program(self) -> Program:
        program = Program(program_name=self.program_name)
        if self.programs:
            program.add_programs(convert_programs(self.programs))
        return program


def loader(file_path: Path | str) -> Program:
    """
    Load program schemas from a YAML or TOML file into a new `Program`.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        Program: A program with every configured command registered.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the document is not a mapping.
        SchemaError: If a program schema is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of programs.\n"
            "Example:\n"
            "programs:\n"
            "  - command: 'play <consoleName>'\n"
            "    action: 'my_module.play'"
        )

    logger.debug("Loaded %d program(s) from '%s'.", len(raw_config.get("programs", [])), path)
    return ProgramConfig(**raw_config).to_program()
