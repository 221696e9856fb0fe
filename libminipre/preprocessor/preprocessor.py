from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ._state import PreprocessorState
from .conditions import resolve_conditional_directive
from .directives import classify_directive_line
from .errors import UnterminatedIfError
from .macros import build_macro_substituter

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable

    from .macros import MacrosRegistry

LINE_TERMINATOR = "\n"


class TextSink(Protocol):
    """Anything that accepts text (e.g opened file or `sys.stdout`)."""

    def write(self, s: str, /) -> object: ...


def preprocess_lines(
    lines: Iterable[str],
    macros: MacrosRegistry,
) -> Generator[str]:
    """Preprocess given line stream by expanding macros and resolving conditional blocks.

    Simply, wraps an line iterable into another one and preprocess on the fly.
    Lines are expected to keep their terminators, emitted lines are passed as-is (after expansion).

    Run works with snapshot of given macros, so registry may be modified after start without effect.
    Any error from underlying iterable is propagated unchanged.
    """
    snapshot = macros.copy()
    state = PreprocessorState(
        macros=snapshot,
        substitute=build_macro_substituter(snapshot),
    )

    for line in lines:
        state.line_number += 1
        expanded = state.substitute(line)

        if directive := classify_directive_line(expanded):
            resolve_conditional_directive(directive, state)
            continue

        if state.is_active:
            yield expanded

    if state.blocks:
        # Report innermost one, as it is closest to the end of input
        raise UnterminatedIfError(line=state.blocks[-1].opened_at_line)


def preprocess_stream(
    source: Iterable[str],
    sink: TextSink,
    macros: MacrosRegistry,
) -> None:
    """Preprocess line stream from source and write emitted lines into sink in order."""
    for line in preprocess_lines(source, macros):
        sink.write(line)


def preprocess_text(text: str, macros: MacrosRegistry) -> str:
    """Preprocess whole text at once (e.g `"#if FOO\\nfoo\\n#endif\\n"` into `"foo\\n"` with `FOO=1`)."""
    return "".join(preprocess_lines(split_lines_keep_terminators(text), macros))


def split_lines_keep_terminators(text: str) -> list[str]:
    """Split text by `\\n` only, keeping terminators (last line may have none)."""
    *lines, last = text.split(LINE_TERMINATOR)
    lines = [line + LINE_TERMINATOR for line in lines]
    if last:
        lines.append(last)
    return lines
