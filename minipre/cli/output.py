import sys
from typing import Literal, NoReturn, TypeAlias

MESSAGE_LEVEL: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


class CLIColor:
    RESET = "\033[0m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


LEVEL_TO_COLOR: dict[MESSAGE_LEVEL, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(level: MESSAGE_LEVEL, text: str, *, verbose: bool = True) -> None:
    """Emit an message into stderr, INFO ones are shown only in verbose mode.

    stdout is reserved for preprocessed output so messages never go there.
    """
    if level == "INFO" and not verbose:
        return

    if sys.stderr.isatty():
        color = LEVEL_TO_COLOR[level]
        print(f"{color}[{level}]{CLIColor.RESET} {text}", file=sys.stderr)
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error message and exit with failure exit code."""
    cli_message("ERROR", text)
    sys.exit(1)
