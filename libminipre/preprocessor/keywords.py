from enum import Enum, auto


class PreprocessorKeyword(Enum):
    """Directives that are resolved by conditional blocks state machine."""

    IF = auto()
    ELSE_IF = auto()
    ELSE = auto()
    END_IF = auto()


WORD_TO_PREPROCESSOR_KEYWORD = {
    "#if": PreprocessorKeyword.IF,
    "#elif": PreprocessorKeyword.ELSE_IF,
    "#else": PreprocessorKeyword.ELSE,
    "#endif": PreprocessorKeyword.END_IF,
}
