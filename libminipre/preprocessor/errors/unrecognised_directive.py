from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class UnrecognisedDirectiveError(PreprocessorSyntaxError):
    message = "unrecognised preprocessor directive"

    def __init__(self, line: int, directive: str) -> None:
        super().__init__(line)
        self.directive = directive

    def __repr__(self) -> str:
        return f"""Unrecognised preprocessor directive `{self.directive}` on line {self.line}!

Supported directives: `#if`, `#elif`, `#else`, `#endif`.
Any line starting with `#` (after macro expansion) is treated as an directive.

{self.generic_error_name}"""
