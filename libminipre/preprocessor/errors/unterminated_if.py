from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class UnterminatedIfError(PreprocessorSyntaxError):
    message = "unterminated `#if` block"

    def __repr__(self) -> str:
        return f"""Unterminated `#if` block opened on line {self.line}!
Expected there will be `#endif` before end of input.

Did you forgot to close conditional block?

{self.generic_error_name}"""
