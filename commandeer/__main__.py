"""
Commandeer CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Runs the programs declared in a config file against the given tokens:

    python -m commandeer programs.yaml play PC-Engine --save-file out.sav
"""

import sys
from pathlib import Path
from typing import Any

from commandeer.config import loader
from commandeer.console import console, error_console
from commandeer.exceptions import SchemaError
from commandeer.signals import EXIT_ERROR
from commandeer.utils import setup_logging


def main() -> Any:
    setup_logging()
    if len(sys.argv) < 2:
        error_console.print("usage: commandeer <config-file> [tokens ...]")
        sys.exit(EXIT_ERROR)

    config_path = Path(sys.argv[1])
    try:
        program = loader(config_path)
    except (OSError, TypeError, ValueError, SchemaError) as error:
        error_console.print(f"[bold red]Could not load '{config_path}':[/] {error}")
        sys.exit(EXIT_ERROR)

    result = program.run([sys.executable, *sys.argv[1:]])
    if result is not None:
        console.print(result, markup=False, emoji=False, highlight=False)
    return result


if __name__ == "__main__":
    main()
