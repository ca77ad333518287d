from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libexprc.lexer.tokens import TokenType
from libexprc.parser.errors import (
    ExpectedNumberError,
    ExpectedSymbolError,
    ExpressionNestedTooDeeplyError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from libexprc.lexer.tokens import Token

# Each level of parentheses costs several Python frames in recursive descent,
# so nesting is bounded well below interpreter recursion limit
MAX_PARENTHESES_NESTING_DEPTH = 100


@dataclass
class ParserContext:
    """Context for parsing which only required from internal usages.

    Cursor only moves forward, so grammar must be parsed with single token lookahead.
    """

    tokens: Sequence[Token] = field()
    cursor: int = field(default=0)

    # Count of currently open parentheses
    nesting_depth: int = field(default=0)

    def __post_init__(self) -> None:
        assert self.tokens and self.tokens[-1].type == TokenType.EOF, (
            "Parser expects token sequence terminated with EOF token"
        )

    def peek_token(self) -> Token:
        return self.tokens[self.cursor]

    def next_token(self) -> Token:
        token = self.peek_token()
        if token.type != TokenType.EOF:
            # EOF is sticky, parser may peek it any number of times
            self.cursor += 1
        return token

    def consume(self, symbol: str) -> bool:
        """Advance if next token is given operator symbol, returns whether it was consumed."""
        if not self.peek_token().is_operator(symbol):
            return False
        self.next_token()
        return True

    def expect(self, symbol: str) -> None:
        """Advance over given operator symbol or raise an error."""
        token = self.peek_token()
        if not token.is_operator(symbol):
            raise ExpectedSymbolError(expected=symbol, got=token)
        self.next_token()

    def expect_number(self) -> int:
        """Advance over an integer and return its value or raise an error."""
        token = self.peek_token()
        if token.type != TokenType.INTEGER:
            raise ExpectedNumberError(got=token)
        assert isinstance(token.value, int)
        self.next_token()
        return token.value

    def at_eof(self) -> bool:
        return self.peek_token().type == TokenType.EOF

    def enter_parentheses(self, opened_at: Token) -> None:
        if self.nesting_depth >= MAX_PARENTHESES_NESTING_DEPTH:
            raise ExpressionNestedTooDeeplyError(
                at=opened_at,
                max_depth=MAX_PARENTHESES_NESTING_DEPTH,
            )
        self.nesting_depth += 1

    def leave_parentheses(self) -> None:
        assert self.nesting_depth > 0, "Unbalanced parentheses nesting"
        self.nesting_depth -= 1
