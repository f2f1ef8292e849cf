# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionKind`, the enum describing how a declared option consumes tokens.

The kind is derived from the option's flag schema at compile time:

    "-O, --switch-no"          → OptionKind.SWITCH_OPENS_FALSE
    "-C, --no-switch-nc"       → OptionKind.SWITCH_CLOSES_TRUE
    "-f, --file <path>"        → OptionKind.VALUED
    "-n, --name [name]"        → OptionKind.VALUED
"""
from __future__ import annotations

from enum import Enum


class OptionKind(Enum):
    """
    How an option behaves when its flag is encountered.

    Members:
        SWITCH_OPENS_FALSE: No value. Defaults to False, set to True when present.
        SWITCH_CLOSES_TRUE: No value, declared with `--no-`. Defaults to True,
            set to False when present.
        VALUED: Takes a value from the following token(s).
    """

    SWITCH_OPENS_FALSE = "switch_opens_false"
    SWITCH_CLOSES_TRUE = "switch_closes_true"
    VALUED = "valued"

    def __str__(self) -> str:
        return self.value
