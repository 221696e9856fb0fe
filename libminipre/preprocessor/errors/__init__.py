"""Errors collections that preprocessor may raise (user-facing ones)."""

from .expected_directive_expression import (
    ExpectedElifExpressionError,
    ExpectedIfExpressionError,
)
from .expected_end_of_line import ExpectedEndOfLineError
from .expected_term import ExpectedTermError
from .undefined_identifier import UndefinedIdentifierError
from .unexpected_directive_expression import UnexpectedDirectiveExpressionError
from .unmatched_endif import UnmatchedEndifError
from .unrecognised_directive import UnrecognisedDirectiveError
from .unterminated_if import UnterminatedIfError

__all__ = [
    "ExpectedElifExpressionError",
    "ExpectedEndOfLineError",
    "ExpectedIfExpressionError",
    "ExpectedTermError",
    "UndefinedIdentifierError",
    "UnexpectedDirectiveExpressionError",
    "UnmatchedEndifError",
    "UnrecognisedDirectiveError",
    "UnterminatedIfError",
]
