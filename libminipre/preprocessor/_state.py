from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from .errors import UnmatchedEndifError

if TYPE_CHECKING:
    from .macros import MacroSubstituter, MacrosRegistry


class ConditionalState(Enum):
    """Live state of an conditional block that is currently processed."""

    # Condition currently matches, pass through input
    ACTIVE = auto()

    # Condition has not yet matched, evaluate remaining clauses
    INACTIVE = auto()

    # Condition already matched (or parent block is not active), skip remaining clauses
    SKIP = auto()


@dataclass(frozen=True, slots=True)
class ConditionalBlock:
    """Saved parent state for an opened `#if` block."""

    parent_state: ConditionalState

    # Where `#if` of that block is, for reporting unterminated blocks
    opened_at_line: int


@dataclass(frozen=False)
class PreprocessorState:
    """State for preprocessing run which only required for internal usages."""

    macros: MacrosRegistry
    substitute: MacroSubstituter

    current: ConditionalState = ConditionalState.ACTIVE
    blocks: list[ConditionalBlock] = field(default_factory=list[ConditionalBlock])

    # 1-based, zero until first line is read
    line_number: int = 0

    @property
    def is_active(self) -> bool:
        return self.current == ConditionalState.ACTIVE

    def push_block(self, state: ConditionalState) -> None:
        """Open new block, saving current state as its parent, and enter it with given state."""
        self.blocks.append(
            ConditionalBlock(parent_state=self.current, opened_at_line=self.line_number),
        )
        self.current = state

    def pop_block(self) -> None:
        """Close innermost block, restoring its parent state."""
        if not self.blocks:
            raise UnmatchedEndifError(line=self.line_number)
        self.current = self.blocks.pop().parent_state
