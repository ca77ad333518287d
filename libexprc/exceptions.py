from __future__ import annotations

import re
from abc import abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from libexprc.diagnostics import Diagnostic


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class ExprcError(Exception):
    """Parent for all exprc errors (exceptions)."""

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"

    @property
    def generic_error_name(self) -> str:
        return f"[{camel_to_kebab(self.__class__.__name__)}]"

    @property
    def diagnostic(self) -> Diagnostic | None:
        """User-facing diagnostic for that error, or None if error is an internal one."""
        return None
