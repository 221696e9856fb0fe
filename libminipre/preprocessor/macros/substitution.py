from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .registry import MacrosRegistry

# Word characters are ASCII only, so `\b` (which is unicode-aware) is not used
WORD_BOUNDARY_BEFORE = r"(?<![A-Za-z0-9_])"
WORD_BOUNDARY_AFTER = r"(?![A-Za-z0-9_])"


@dataclass(frozen=True, slots=True)
class MacroSubstituter:
    """Whole-word replacer of macro names, bound to snapshot of an registry.

    Constructed once per preprocessing run (not per line).
    Replacement text is never re-scanned, so expansion is single pass.
    """

    definitions: Mapping[str, str]
    pattern: re.Pattern[str] | None

    def __call__(self, line: str) -> str:
        if self.pattern is None:
            # No macros - nothing to substitute
            return line
        return self.pattern.sub(self._replace_match, line)

    def _replace_match(self, match: re.Match[str]) -> str:
        return self.definitions[match.group(0)]


def build_macro_substituter(macros: MacrosRegistry) -> MacroSubstituter:
    """Snapshot given registry into substituter with single alternation pattern over all names."""
    definitions = MappingProxyType(dict(macros))

    # Empty name would match at every boundary, it can never be an whole word
    names = sorted(name for name in definitions if name)
    if not names:
        return MacroSubstituter(definitions=definitions, pattern=None)

    # Sorting only makes pattern deterministic, boundaries guarantee that only whole names match
    alternation = "|".join(re.escape(name) for name in names)
    pattern = re.compile(
        f"{WORD_BOUNDARY_BEFORE}(?:{alternation}){WORD_BOUNDARY_AFTER}",
    )
    return MacroSubstituter(definitions=definitions, pattern=pattern)
