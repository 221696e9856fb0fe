"""Line-oriented preprocessor with macro substitution and conditional blocks."""

from .exceptions import PreprocessorSyntaxError
from .macros import MacrosRegistry, registry_from_raw_definitions
from .preprocessor import preprocess_lines, preprocess_stream, preprocess_text

__all__ = [
    "MacrosRegistry",
    "PreprocessorSyntaxError",
    "preprocess_lines",
    "preprocess_stream",
    "preprocess_text",
    "registry_from_raw_definitions",
]
