from libminipre.preprocessor.exceptions import PreprocessorSyntaxError


class UndefinedIdentifierError(PreprocessorSyntaxError):
    message = "undefined identifier"

    def __repr__(self) -> str:
        return f"""Undefined identifier in expression on line {self.line}!

Only defined macros and literals `0` / `1` can be used in conditions.
Did you forgot to define macro (e.g `-D NAME=1`)?

{self.generic_error_name}"""
