"""Errors collections that lexer may raise (user-facing ones)."""

from .integer_literal_overflow import IntegerLiteralOverflowError
from .unrecognized_character import UnrecognizedCharacterError

__all__ = [
    "IntegerLiteralOverflowError",
    "UnrecognizedCharacterError",
]
