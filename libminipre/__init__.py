"""Minimal C-like text preprocessor.

Supports whole-word macro substitution and `#if`, `#elif`, `#else`, `#endif` blocks.
"""

from .exceptions import MinipreError
from .preprocessor import (
    MacrosRegistry,
    PreprocessorSyntaxError,
    preprocess_lines,
    preprocess_stream,
    preprocess_text,
    registry_from_raw_definitions,
)

__all__ = [
    "MacrosRegistry",
    "MinipreError",
    "PreprocessorSyntaxError",
    "preprocess_lines",
    "preprocess_stream",
    "preprocess_text",
    "registry_from_raw_definitions",
]
