"""Evaluator for conditions of `#if` / `#elif` directives.

Grammar (whitespace is allowed before each part):
    expr     := equality
    equality := unary ( "==" unary )*
    unary    := "!"* term
    term     := "0" | "1" | identifier

Identifier is true only when macro is defined as exactly `1`.
Chained equality is folded from left to right, so `A == B == C` is `(A == B) == C`.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_letters, digits
from typing import TYPE_CHECKING

from .errors import (
    ExpectedEndOfLineError,
    ExpectedTermError,
    UndefinedIdentifierError,
)

if TYPE_CHECKING:
    from .macros import MacrosRegistry

IDENTIFIER_SYMBOLS = frozenset(ascii_letters + digits + "_")

OPERATOR_NEGATE = "!"
OPERATOR_EQUALS = "=="

LITERAL_TRUE = "1"
LITERAL_FALSE = "0"


@dataclass(frozen=False)
class ExpressionState:
    """Cursor over expression text which only required for internal usages."""

    text: str
    line: int
    macros: MacrosRegistry

    col: int = 0

    def skip_whitespace(self) -> None:
        while self.col < len(self.text) and self.text[self.col].isspace():
            self.col += 1

    def consume(self, operator: str) -> bool:
        """Advance over given operator if it is next in text."""
        if self.text.startswith(operator, self.col):
            self.col += len(operator)
            return True
        return False

    @property
    def is_exhausted(self) -> bool:
        return self.col >= len(self.text)


def evaluate_expression(expression: str, macros: MacrosRegistry, line: int) -> bool:
    """Evaluate given condition against macros, raising syntax errors located at given line."""
    state = ExpressionState(text=expression, line=line, macros=macros)
    result = _evaluate_equality(state)

    state.skip_whitespace()
    if not state.is_exhausted:
        raise ExpectedEndOfLineError(line=line)
    return result


def _evaluate_equality(state: ExpressionState) -> bool:
    result = _evaluate_unary(state)
    state.skip_whitespace()
    while state.consume(OPERATOR_EQUALS):
        result = result == _evaluate_unary(state)
        state.skip_whitespace()
    return result


def _evaluate_unary(state: ExpressionState) -> bool:
    negate = False
    state.skip_whitespace()
    while state.consume(OPERATOR_NEGATE):
        negate = not negate
        state.skip_whitespace()
    return negate != _evaluate_term(state)


def _evaluate_term(state: ExpressionState) -> bool:
    state.skip_whitespace()

    start = state.col
    while not state.is_exhausted and state.text[state.col] in IDENTIFIER_SYMBOLS:
        state.col += 1
    term = state.text[start : state.col]

    if not term:
        raise ExpectedTermError(line=state.line)

    if term[0] in digits:
        if term not in (LITERAL_TRUE, LITERAL_FALSE):
            # Only `0` and `1` are valid literals, there is no numbers
            raise UndefinedIdentifierError(line=state.line)
        return term == LITERAL_TRUE

    value = state.macros.lookup(term)
    if value is None:
        raise UndefinedIdentifierError(line=state.line)
    return value == LITERAL_TRUE
