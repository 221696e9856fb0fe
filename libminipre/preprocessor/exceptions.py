from typing import ClassVar

from libminipre.exceptions import MinipreError


class PreprocessorSyntaxError(MinipreError):
    """Malformed preprocessor input, located by 1-based line number.

    Every concrete error carries fixed `message` text so callers may rely on it.
    """

    message: ClassVar[str] = "malformed preprocessor syntax"

    def __init__(self, line: int) -> None:
        super().__init__(line)
        self.line = line

    def __str__(self) -> str:
        return f"{self.message} on line {self.line}"

    def __repr__(self) -> str:
        return f"""{self.message.capitalize()} on line {self.line}!

{self.generic_error_name}"""
