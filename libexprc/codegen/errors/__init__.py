"""Errors collections that codegen may raise (internal ones)."""

from .unsupported_target import UnsupportedTargetError

__all__ = [
    "UnsupportedTargetError",
]
