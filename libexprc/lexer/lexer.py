from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from libexprc.lexer._state import LexerState
from libexprc.lexer.errors import (
    IntegerLiteralOverflowError,
    UnrecognizedCharacterError,
)
from libexprc.lexer.helpers import find_digits_end, find_word_start, is_decimal_digit
from libexprc.lexer.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Iterable


OPERATOR_SYMBOLS = "+-*/()"

# Literals are pushed as signed 64 bit machine words
INTEGER_LITERAL_MAX_VALUE = 2**63 - 1


def tokenize(source: str) -> list[Token]:
    """Perform lexical analysis of an whole input.

    :returns tokens: Tokens in order of an input, always terminated with single EOF token
    """
    state = LexerState(source=source)
    tokens: list[Token] = []

    state.col = find_word_start(source, 0)
    while not state.is_exhausted:
        tokens.append(_tokenize_next_token(state))
        state.col = find_word_start(source, state.col)

    tokens.append(
        Token(
            type=TokenType.EOF,
            text="",
            value=0,
            location=state.current_location(),
        ),
    )
    return tokens


def _tokenize_next_token(state: LexerState) -> Token:
    """Acquire token at cursor and advance cursor right after it."""
    symbol = state.symbol
    location = state.current_location()

    if symbol in OPERATOR_SYMBOLS:
        state.col += 1
        return Token(
            type=TokenType.OPERATOR,
            text=symbol,
            value=symbol,
            location=location,
        )

    if is_decimal_digit(symbol):
        return _tokenize_integer_literal(state)

    raise UnrecognizedCharacterError(at=location, character=symbol)


def _tokenize_integer_literal(state: LexerState) -> Token:
    """Consume maximal run of decimal digits into integer token."""
    location = state.current_location()
    ends_at = find_digits_end(state.source, state.col)
    word = state.source[state.col : ends_at]

    # Length is checked first, as `int()` refuses to convert very long digit strings
    # Leading zeros are dropped so they neither count nor reach `int()`
    significant_digits = word.lstrip("0") or "0"
    if len(significant_digits) > len(str(INTEGER_LITERAL_MAX_VALUE)) or (
        int(significant_digits, 10) > INTEGER_LITERAL_MAX_VALUE
    ):
        raise IntegerLiteralOverflowError(
            at=location,
            number_raw=word,
            max_value=INTEGER_LITERAL_MAX_VALUE,
        )

    value = int(significant_digits, 10)
    state.col = ends_at
    return Token(
        type=TokenType.INTEGER,
        text=word,
        value=value,
        location=location,
    )


def debug_lexer_wrapper(tokens: Iterable[Token]) -> list[Token]:
    """Emit each lexeme into stderr while passing tokens through as-is."""
    emitted: list[Token] = []
    for token in tokens:
        print(token.type.name, repr(token.value), token.location, file=sys.stderr)
        emitted.append(token)
    return emitted
