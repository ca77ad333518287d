from __future__ import annotations

from dataclasses import dataclass

from .tokens import TokenLocation


@dataclass(frozen=False)
class LexerState:
    """State for lexical analysis which only required for internal usages."""

    source: str
    col: int = 0

    def current_location(self) -> TokenLocation:
        return TokenLocation(col_number=self.col)

    @property
    def is_exhausted(self) -> bool:
        return self.col >= len(self.source)

    @property
    def symbol(self) -> str:
        return self.source[self.col]
