from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class UnexpectedDirectiveExpressionError(PreprocessorSyntaxError):
    # Same text is emitted for both `#else` and `#endif`
    message = "unexpected expression after `#else`"

    def __repr__(self) -> str:
        return f"""Unexpected expression after directive on line {self.line}!

`#else` and `#endif` does not accept any condition.
Did you mean `#elif`?

{self.generic_error_name}"""
