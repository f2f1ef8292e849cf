import io

import pytest
from rich.console import Console

from commandeer import HelpSignal, Program, UnknownOptionError, VersionSignal

HEAD = ["python", "script.py"]


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def program(output):
    return Program(program_name="script.py", console=Console(file=output, width=200))


def test_version_flag(program, output):
    called = []
    program.add_program(
        {
            "command": "unRar <filepath> [destDir]",
            "version": "0.5.1",
            "action": lambda filepath, dest_dir: called.append(filepath),
        }
    )
    with pytest.raises(VersionSignal) as signal:
        program.parse(HEAD + ["unRar", "--version"])
    assert signal.value.output == "0.5.1"
    assert signal.value.exit_code == 0
    assert output.getvalue() == "0.5.1\n"
    assert called == []


def test_short_version_flag(program):
    program.add_program({"version": "0.5.1", "options": [["-q, --quiet"]]})
    with pytest.raises(VersionSignal):
        program.parse(HEAD + ["-V"])


def test_custom_version_flag(program):
    program.add_program({"version": ["2.0.0", "-v, --ver", "Show version"]})
    with pytest.raises(VersionSignal) as signal:
        program.parse(HEAD + ["--ver"])
    assert signal.value.output == "2.0.0"


def test_version_flag_without_version_is_unknown(program):
    program.add_program({"options": [["-q, --quiet"]]})
    with pytest.raises(UnknownOptionError):
        program.parse(HEAD + ["--version"])


def test_help_skips_validation(program):
    program.add_program({"command": "play <consoleName>", "action": lambda name: name})
    with pytest.raises(HelpSignal):
        program.parse(HEAD + ["play", "-h"])


def test_help_wins_over_version_in_joined_flags(program):
    program.add_program({"version": "1.0.0", "options": [["-q, --quiet"]]})
    with pytest.raises(HelpSignal):
        program.parse(HEAD + ["-qVh"])


def test_joined_flags_show_version(program):
    program.add_program({"version": "1.0.0", "options": [["-q, --quiet"]]})
    with pytest.raises(VersionSignal):
        program.parse(HEAD + ["-qV"])


def test_tokens_after_help_are_not_scanned(program):
    program.add_program({"options": [["-q, --quiet"]]})
    with pytest.raises(HelpSignal):
        program.parse(HEAD + ["--help", "--unknown-flag"])


def test_custom_help_option_frees_short_h(program):
    program.add_program(
        {
            "command": "conv2imgsize <file>",
            "options": [["-h, --height <pixel>"], ["-w, --width <pixel>", "", 128]],
            "helpOption": ["-S, --show-usage", "Show the usage"],
        }
    )
    program.parse(HEAD + ["conv2imgsize", "a.png", "-h", "64"])
    assert dict(program.opt) == {"height": "64", "width": 128}

    with pytest.raises(HelpSignal):
        program.parse(HEAD + ["conv2imgsize", "--show-usage"])


def test_help_signal_is_not_an_exception(program):
    program.add_program({"options": [["-q, --quiet"]]})
    with pytest.raises(HelpSignal) as signal:
        program.parse(HEAD + ["-h"])
    assert not isinstance(signal.value, Exception)


def test_version_is_printed_verbatim(program, output):
    program.add_program({"version": "1.0 :rocket: [beta]"})
    with pytest.raises(VersionSignal):
        program.parse(HEAD + ["--version"])
    assert output.getvalue() == "1.0 :rocket: [beta]\n"
