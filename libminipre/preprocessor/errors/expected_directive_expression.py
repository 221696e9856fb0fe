from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class ExpectedIfExpressionError(PreprocessorSyntaxError):
    message = "expected expression after `#if`"

    def __repr__(self) -> str:
        return f"""Expected expression after `#if` on line {self.line}!

Conditional block requires an condition, e.g `#if NAME`.

{self.generic_error_name}"""


class ExpectedElifExpressionError(PreprocessorSyntaxError):
    message = "expected expression after `#elif`"

    def __repr__(self) -> str:
        return f"""Expected expression after `#elif` on line {self.line}!

Alternate branch requires an condition, e.g `#elif NAME`.
Did you mean `#else`?

{self.generic_error_name}"""
