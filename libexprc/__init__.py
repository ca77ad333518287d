"""exprc compiler library.

Translates single arithmetic expression into x86-64 assembly.
"""

from .exprc import compile_expression

__all__ = [
    "compile_expression",
]
