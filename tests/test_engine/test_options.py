import io
import math
import re

import pytest
from rich.console import Console

from commandeer import (
    MissingOptionValueError,
    MissingRequiredOptionError,
    OptionTransformError,
    Program,
    UnknownOptionError,
)

HEAD = ["python", "script.py"]


@pytest.fixture
def program():
    return Program(program_name="script.py", console=Console(file=io.StringIO()))


SWITCHES = {
    "options": [
        ["-O, --switch-no", "Normaly opened switch"],
        ["-C, --no-switch-nc", "Normaly closed switch"],
    ]
}


@pytest.mark.parametrize(
    "tokens,switch_no,switch_nc",
    [
        ([], False, True),
        (["-O", "-C"], True, False),
        (["--switch-no", "--no-switch-nc"], True, False),
        (["--switch-no"], True, True),
        (["--no-switch-nc"], False, False),
        (["-OC"], True, False),
        (["-CO"], True, False),
        (["-OOx"], True, True),
    ],
)
def test_switches(program, tokens, switch_no, switch_nc):
    program.add_program(SWITCHES)
    program.parse(HEAD + tokens)
    assert program.opt["switchNo"] is switch_no
    assert program.opt["switchNc"] is switch_nc


def test_switch_transformer_gets_none_token(program):
    calls = []

    def count(token, previous):
        calls.append((token, previous))
        return len(calls)

    program.add_program({"options": [["-c, --count", "Count", count]]})
    program.parse(HEAD + ["-c", "-c", "--count"])
    assert calls == [(None, False), (None, 1), (None, 2)]
    assert program.opt["count"] == 3


@pytest.mark.parametrize(
    "tokens,expected",
    [([], None), (["-f"], True), (["--flag"], True), (["--flag", "Flag Name"], "Flag Name")],
)
def test_optional_value(program, tokens, expected):
    program.add_program({"options": [["-f, --flag [name]", "Flag name"]]})
    program.parse(HEAD + tokens)
    assert program.opt["flag"] == expected


@pytest.mark.parametrize(
    "tokens,expected",
    [([], None), (["-v", "My Val"], "My Val"), (["--value", "My 2nd Val"], "My 2nd Val")],
)
def test_required_value(program, tokens, expected):
    program.add_program({"options": [["-v, --value <val>", "Specify your value"]]})
    program.parse(HEAD + tokens)
    assert program.opt["value"] == expected


def test_required_value_missing(program):
    program.add_program({"options": [["-v, --value <val>", "Specify your value"]]})
    with pytest.raises(MissingOptionValueError) as error:
        program.parse(HEAD + ["-v"])
    assert error.value.message == "error: option '-v, --value <val>' argument missing"
    assert "Usage: script.py [options]" in error.value.help_text


def test_required_value_pairs_with_flag_like_token(program):
    program.add_program(
        {"options": [["-v, --value <val>"], ["-q, --quiet"]]}
    )
    program.parse(HEAD + ["-v", "-q"])
    assert program.opt["value"] == "-q"
    assert program.opt["quiet"] is False


@pytest.mark.parametrize(
    "tokens,flag,value",
    [
        ([], "Def Name", "Def Val"),
        (["-f", "-v"], "Def Name", "Def Val"),
        (["-f", "My Flag", "-v", "My Val"], "My Flag", "My Val"),
        (["--flag", "My Flag2", "--value", "My Val2"], "My Flag2", "My Val2"),
    ],
)
def test_defaults(program, tokens, flag, value):
    program.add_program(
        {
            "options": [
                ["-f, --flag [name]", "Flag name", "Def Name"],
                ["-v, --value <val>", "Specify your value", "Def Val"],
            ]
        }
    )
    program.parse(HEAD + tokens)
    assert program.opt["flag"] == flag
    assert program.opt["value"] == value


ARRAYS = {
    "options": [
        ["-f, --flags [name...]", "Flag name"],
        ["-d, --flags-def [name...]", "Flag name", "Name 0"],
        ["-v, --values <val...>", "Specify your value", "Val 0"],
    ]
}


@pytest.mark.parametrize(
    "tokens,flags,flags_def,values",
    [
        ([], [], ["Name 0"], ["Val 0"]),
        (["-f", "-d", "-v"], [], ["Name 0"], ["Val 0"]),
        (
            ["-f", "Flag 0", "-d", "Name 1", "-v", "Val 1"],
            ["Flag 0"],
            ["Name 0", "Name 1"],
            ["Val 0", "Val 1"],
        ),
        (
            ["-f", "Flag 0", "Flag 1", "-d", "Name 1", "Name 2", "-v", "Val 1", "Val 2"],
            ["Flag 0", "Flag 1"],
            ["Name 0", "Name 1", "Name 2"],
            ["Val 0", "Val 1", "Val 2"],
        ),
    ],
)
def test_variadic_values(program, tokens, flags, flags_def, values):
    program.add_program(ARRAYS)
    program.parse(HEAD + tokens)
    assert program.opt["flags"] == flags
    assert program.opt["flagsDef"] == flags_def
    assert program.opt["values"] == values


def test_variadic_option_consumes_tokens_before_arguments(program):
    received = []
    program.add_program(
        {
            "command": "pack <dest> [extra]",
            "options": [["-i, --include [path...]", "Paths"]],
            "action": lambda dest, extra, options: received.append((dest, extra)),
        }
    )
    program.parse(HEAD + ["pack", "-i", "a", "b", "--", "out"])
    assert received == [("out", None)]
    assert program.opt["include"] == ["a", "b"]


def test_variadic_defaults_do_not_leak_between_parses(program):
    program.add_program(ARRAYS)
    program.parse(HEAD + ["-d", "Name 1"])
    program.parse(HEAD)
    assert program.opt["flagsDef"] == ["Name 0"]


REQUIRED = {
    "requiredOptions": [
        ["-f, --req-flag [name]", "Flag name"],
        ["-r, --requiring <name>", "Must specify"],
        ["-R, --required <val>", "Unspecified is allow", "Def Val"],
    ]
}


@pytest.mark.parametrize("tokens", [[], ["-f"], ["-f", "-r"]])
def test_required_options_missing(program, tokens):
    program.add_program(REQUIRED)
    with pytest.raises(MissingRequiredOptionError):
        program.parse(HEAD + tokens)


def test_required_options_message(program):
    program.add_program(REQUIRED)
    with pytest.raises(MissingRequiredOptionError) as error:
        program.parse(HEAD + ["-r", "Req Name"])
    assert error.value.message == "error: option '-f, --req-flag [name]' argument missing"


def test_required_options(program):
    program.add_program(REQUIRED)
    program.parse(HEAD + ["-f", "-r", "Req Name"])
    assert program.opt["reqFlag"] is True
    assert program.opt["requiring"] == "Req Name"
    assert program.opt["required"] == "Def Val"

    program.parse(HEAD + ["-f", "Flag Name", "-r", "Req Name", "-R", "Req Val"])
    assert program.opt["reqFlag"] == "Flag Name"
    assert program.opt["requiring"] == "Req Name"
    assert program.opt["required"] == "Req Val"


def test_required_switch_counts_false_as_present(program):
    program.add_program({"requiredOptions": [["-q, --quiet"]]})
    program.parse(HEAD)
    assert program.opt["quiet"] is False


def parse_int(token, previous):
    match = re.match(r"\s*[-+]?\d+", token)
    return int(match.group()) if match else math.nan


PROCESSING = {
    "options": [
        ["-p, --pre-func <Number>", "Function processing 1", parse_int],
        [
            "-i, --increment <Number>",
            "Function processing 2",
            lambda token, previous: str(previous) + token,
            1,
        ],
    ]
}


def test_transformers_without_tokens(program):
    program.add_program(PROCESSING)
    program.parse(HEAD)
    assert program.opt["preFunc"] is None
    assert program.opt["increment"] == 1


def test_transformer_takes_flag_like_token(program):
    program.add_program(PROCESSING)
    program.parse(HEAD + ["-p", "-i"])
    assert math.isnan(program.opt["preFunc"])
    assert program.opt["increment"] == 1


@pytest.mark.parametrize(
    "tokens,pre_func,increment",
    [
        (["-p", "007", "-i", "2"], 7, "12"),
        (["-p", "3.14", "-i", "2", "3"], 3, "12"),
        (["-p", "42", "-i", "2", "-i", "3"], 42, "123"),
    ],
)
def test_transformers(program, tokens, pre_func, increment):
    program.add_program(PROCESSING)
    program.parse(HEAD + tokens)
    assert program.opt["preFunc"] == pre_func
    assert program.opt["increment"] == increment


def test_transformer_error(program):
    def strict_int(token, previous):
        return int(token)

    program.add_program({"options": [["-n, --number <n>", "A number", strict_int]]})
    with pytest.raises(OptionTransformError) as error:
        program.parse(HEAD + ["-n", "abc"])
    assert isinstance(error.value.__cause__, ValueError)


def test_unknown_short_option(program):
    program.add_program(SWITCHES)
    with pytest.raises(UnknownOptionError) as error:
        program.parse(HEAD + ["-x"])
    assert error.value.message == "Unrecognized option '-x'. Use --help to see available options."


def test_unknown_long_option_suggests(program):
    program.add_program(SWITCHES)
    with pytest.raises(UnknownOptionError) as error:
        program.parse(HEAD + ["--switch"])
    assert "Did you mean one of: --switch-no?" in error.value.message


def test_unrecognized_flag_forms_are_ignored(program):
    program.add_program({"command": "copy [src]", "options": [["-q, --quiet"]]})
    program.parse(HEAD + ["copy", "-", "--weird-"])
    assert program.opt["quiet"] is False


def test_opt_only_holds_matched_command_options(program):
    program.add_programs(
        [
            {"command": "a", "options": [["-x, --ex"]]},
            {"command": "b", "options": [["-y, --why"]]},
        ]
    )
    program.parse(HEAD + ["b", "-y"])
    assert dict(program.opt) == {"why": True}


def test_unknown_option_kind(program):
    from commandeer import UnknownOptionKindError

    command = program.add_program({"options": [["-q, --quiet"]]})
    command.options[0].kind = "bogus"
    with pytest.raises(UnknownOptionKindError):
        program.parse(HEAD + ["-q"])


def test_variadic_option_across_occurrences(program):
    program.add_program({"options": [["-v, --values <val...>", "Values"]]})
    program.parse(HEAD + ["-v", "a", "b", "-v", "c"])
    assert program.opt["values"] == ["a", "b", "c"]


@pytest.mark.parametrize("default", [False, "", 0])
def test_optional_value_marks_presence_over_falsy_default(program, default):
    program.add_program({"options": [["-c, --color [when]", "Colorize", default]]})
    program.parse(HEAD)
    assert program.opt["color"] == default
    program.parse(HEAD + ["-c"])
    assert program.opt["color"] is True
