from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class ExpectedTermError(PreprocessorSyntaxError):
    message = "expected term, found nothing"

    def __repr__(self) -> str:
        return f"""Expected term in expression on line {self.line}, found nothing!

Terms are either `0`, `1` or macro name.
Do you have dangling `!` or `==` operator?

{self.generic_error_name}"""
