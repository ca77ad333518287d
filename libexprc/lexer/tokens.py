from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


@dataclass(frozen=True)
class TokenLocation:
    """Location of any token within input expression."""

    # Offset (in characters) from the beginning of an input
    col_number: int

    def __repr__(self) -> str:
        return f"'(command-line-interface):{self.col_number + 1}'"


class TokenType(IntEnum):
    """Type of the lexical token.

    https://en.wikipedia.org/wiki/Lexical_analysis
    """

    # Any of single symbol operators including parentheses
    OPERATOR = auto()

    # Numerical
    INTEGER = auto()

    # Content
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """Lexical token obtained by lexer."""

    type: TokenType

    # Real text of an token within input
    text: str

    # `pre-parsed` value (e.g numbers are numbers, operators are single symbol)
    value: int | str

    # Location within input
    location: TokenLocation

    def is_operator(self, symbol: str) -> bool:
        return self.type == TokenType.OPERATOR and self.value == symbol
