from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


DECIMAL_DIGITS = "0123456789"


def is_decimal_digit(symbol: str) -> bool:
    # `str.isdigit` accepts unicode digits (e.g superscripts) which `int()` rejects
    return symbol in DECIMAL_DIGITS


def find_word_start(text: str, start: int) -> int:
    """Find start column index of an word (skip whitespaces)."""
    return _find_column(text, start, lambda s: not s.isspace())


def find_digits_end(text: str, start: int) -> int:
    """Find end column index of an maximal run of decimal digits."""
    return _find_column(text, start, lambda s: not is_decimal_digit(s))


def _find_column(text: str, start: int, predicate: Callable[[str], bool]) -> int:
    """Find index of an column by predicate. E.g `.index()` but with predicate."""
    end = len(text)
    while start < end and not predicate(text[start]):
        start += 1
    return start
