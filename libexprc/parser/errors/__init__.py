"""Errors collections that parser may raise (user-facing ones)."""

from .expected_number import ExpectedNumberError
from .expression_nested_too_deeply import ExpressionNestedTooDeeplyError
from .expected_symbol import ExpectedSymbolError
from .unexpected_trailing_token import UnexpectedTrailingTokenError

__all__ = [
    "ExpectedNumberError",
    "ExpectedSymbolError",
    "ExpressionNestedTooDeeplyError",
    "UnexpectedTrailingTokenError",
]
