# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Commandeer parse engine.

Displaying help or version text terminates the program from inside the scan
loop. Instead of calling `sys.exit()` deep in the engine, the engine prints the
text and raises an `ExitSignal`. Only the top-level entry point
(`Program.run()` or `python -m commandeer`) turns it into a process exit.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- ExitSignal: Terminate the program with an exit status.
- HelpSignal: Help text was shown (success status).
- VersionSignal: Version text was shown (success status).
- UsageSignal: Usage was shown by `Program.help()` (failure status).
"""

EXIT_OK = 0
EXIT_ERROR = 1


class FlowSignal(BaseException):
    """Base class for all flow control signals in Commandeer.

    These are not errors. They are used to leave the parse engine without
    running any code that follows the point where they were raised.
    """


class ExitSignal(FlowSignal):
    """Raised to request termination of the program.

    Attributes:
        exit_code (int): The process exit status to use.
        output (str): The text that was printed before exiting.
    """

    def __init__(
        self,
        exit_code: int = EXIT_OK,
        output: str = "",
        message: str = "Exit signal received.",
    ):
        super().__init__(message)
        self.exit_code = exit_code
        self.output = output


class HelpSignal(ExitSignal):
    """Raised after the help text of a command was displayed."""

    def __init__(self, output: str = "", message: str = "Help signal received."):
        super().__init__(EXIT_OK, output, message)


class VersionSignal(ExitSignal):
    """Raised after the version of a command was displayed."""

    def __init__(self, output: str = "", message: str = "Version signal received."):
        super().__init__(EXIT_OK, output, message)


class UsageSignal(ExitSignal):
    """Raised after usage was displayed on request; exits with a failure status."""

    def __init__(self, output: str = "", message: str = "Usage signal received."):
        super().__init__(EXIT_ERROR, output, message)
