# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any

import pythonjsonlogger.json
from rich.logging import RichHandler

from commandeer.logger import logger


def get_program_name() -> str:
    """Return the basename of the running script, used in usage lines."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    return os.path.basename(script)


def has_content(value: Any) -> bool:
    """
    Return True when a value counts as present.

    None, empty strings and empty collections have no content.
    False and 0 do.
    """
    if value is None:
        return False
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) > 0
    return True


def render_default(value: Any) -> str:
    """Render a default value for help output, e.g. `"Def Val"`, `false`, `128`."""
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format=f"[{LOG_DATE_FORMAT}]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                datefmt=LOG_DATE_FORMAT,
            )
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure the root logger for an application built on Commandeer.

    The library itself never installs handlers; its modules only log debug
    events (command registration, command selection, option reservation,
    dropped tokens, dispatch) to the "commandeer" logger. This helper is for
    scripts and `python -m commandeer`.

    Rich tracebacks are on, but Rich markup in log messages is off, since parse
    tokens and option descriptions are logged verbatim and may contain
    square brackets. No log file is written unless `log_filename` is given.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for JSON lines.
            Falls back to `COMMANDEER_LOG_MODE`, then "cli".
        log_filename (str | None): Append logs to this file as well.
        json_log_to_file (bool): Write the file log as JSON instead of plain text.
        file_log_level (int): Level of the file handler.
        console_log_level (int): Level of the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv("COMMANDEER_LOG_MODE") or "cli"
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("commandeer").propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
