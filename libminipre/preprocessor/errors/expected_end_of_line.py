from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class ExpectedEndOfLineError(PreprocessorSyntaxError):
    message = "expected end-of-line"

    def __repr__(self) -> str:
        return f"""Expected end-of-line after expression on line {self.line}!

Expression has trailing text which cannot be parsed.
Only `!` and `==` operators are supported.

{self.generic_error_name}"""
