from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class UnmatchedEndifError(PreprocessorSyntaxError):
    message = "unexpected `#endif` with no matching `#if`"

    def __repr__(self) -> str:
        return f"""Unexpected `#endif` on line {self.line} with no matching `#if`!

Every `#endif` must close an opened conditional block.
Do you have extra `#endif`?

{self.generic_error_name}"""
