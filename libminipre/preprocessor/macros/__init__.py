"""Preprocessor macros registry and substitution."""

from .registry import MacrosRegistry, registry_from_raw_definitions
from .substitution import MacroSubstituter, build_macro_substituter

__all__ = (
    "MacroSubstituter",
    "MacrosRegistry",
    "build_macro_substituter",
    "registry_from_raw_definitions",
)
