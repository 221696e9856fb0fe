from __future__ import annotations

from dataclasses import dataclass

from .keywords import WORD_TO_PREPROCESSOR_KEYWORD, PreprocessorKeyword

DIRECTIVE_MARK = "#"
SINGLE_LINE_COMMENT = "//"


@dataclass(frozen=True, slots=True)
class Directive:
    """Directive line split into an word (e.g `#if`) and its optional expression."""

    word: str
    expression: str | None = None

    @property
    def keyword(self) -> PreprocessorKeyword | None:
        """Known keyword for that directive or None if directive is not recognised."""
        return WORD_TO_PREPROCESSOR_KEYWORD.get(self.word)


def classify_directive_line(line: str) -> Directive | None:
    """Parse (already macro-expanded) line as an directive, or None if that is plain text line.

    Single-line comment is stripped from directive lines only.
    """
    text = line.strip()
    if not text.startswith(DIRECTIVE_MARK):
        return None

    text = text.split(SINGLE_LINE_COMMENT, maxsplit=1)[0]

    # Splits on first run of whitespace, `#` itself guarantees at least one part
    word, *rest = text.split(maxsplit=1)
    expression = rest[0].strip() if rest else ""
    return Directive(word=word, expression=expression or None)
