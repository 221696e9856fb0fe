from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from ._state import ConditionalState, PreprocessorState
from .errors import (
    ExpectedElifExpressionError,
    ExpectedIfExpressionError,
    UnexpectedDirectiveExpressionError,
    UnrecognisedDirectiveError,
)
from .expression import evaluate_expression
from .keywords import PreprocessorKeyword

if TYPE_CHECKING:
    from .directives import Directive


def resolve_conditional_directive(directive: Directive, state: PreprocessorState) -> None:
    """Apply given directive onto conditional blocks state.

    Expressions are evaluated only when that branch may be taken,
    so errors inside dead branches are never reported.
    """
    keyword = directive.keyword
    if keyword is None:
        raise UnrecognisedDirectiveError(
            line=state.line_number,
            directive=directive.word,
        )

    match keyword:
        case PreprocessorKeyword.IF:
            return _resolve_if(directive, state)
        case PreprocessorKeyword.ELSE_IF:
            return _resolve_else_if(directive, state)
        case PreprocessorKeyword.ELSE:
            return _resolve_else(directive, state)
        case PreprocessorKeyword.END_IF:
            return _resolve_end_if(directive, state)
        case _:
            assert_never(keyword)


def _resolve_if(directive: Directive, state: PreprocessorState) -> None:
    if directive.expression is None:
        raise ExpectedIfExpressionError(line=state.line_number)

    if not state.is_active:
        # Parent is not taken so whole nested block is dead
        return state.push_block(ConditionalState.SKIP)

    is_taken = evaluate_expression(
        directive.expression,
        state.macros,
        line=state.line_number,
    )
    return state.push_block(
        ConditionalState.ACTIVE if is_taken else ConditionalState.INACTIVE,
    )


def _resolve_else_if(directive: Directive, state: PreprocessorState) -> None:
    if directive.expression is None:
        raise ExpectedElifExpressionError(line=state.line_number)

    if state.current != ConditionalState.INACTIVE:
        # First matched branch wins, any next one is skipped
        state.current = ConditionalState.SKIP
        return

    if evaluate_expression(directive.expression, state.macros, line=state.line_number):
        state.current = ConditionalState.ACTIVE


def _resolve_else(directive: Directive, state: PreprocessorState) -> None:
    if directive.expression is not None:
        raise UnexpectedDirectiveExpressionError(line=state.line_number)

    state.current = (
        ConditionalState.ACTIVE
        if state.current == ConditionalState.INACTIVE
        else ConditionalState.SKIP
    )


def _resolve_end_if(directive: Directive, state: PreprocessorState) -> None:
    if directive.expression is not None:
        raise UnexpectedDirectiveExpressionError(line=state.line_number)

    state.pop_block()
