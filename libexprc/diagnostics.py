"""Position-aware diagnostics for lexer and parser errors.

Errors never terminate the process by themselves, they carry an diagnostic
which is rendered against the original input by the CLI error handler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

CARET = "^"


class DiagnosticKind(Enum):
    """Category of an diagnostic."""

    # Wrong invocation (e.g argument count), has no position in input
    USAGE = auto()

    # Character which cannot start any token
    LEX = auto()

    # Grammar violation at some token
    SYNTAX = auto()


@dataclass(frozen=True)
class Diagnostic:
    """Structured, human-readable error emitted by some stage of the pipeline."""

    kind: DiagnosticKind
    message: str

    # Offset into the original input, None for positionless diagnostics
    offset: int | None = None

    def render(self, source: str) -> str:
        if self.offset is None:
            return render_error(self.message)
        return render_error_at(source, self.offset, self.message)


def render_error(message: str) -> str:
    """Render diagnostic which has no location within input."""
    return f"{message}\n"


def render_error_at(source: str, offset: int, message: str) -> str:
    """Render diagnostic with caret pointing at `offset` under the input line.

    Caret is aligned by emitting exactly `offset` spaces before it.
    """
    assert offset >= 0, "Diagnostic offset must be non-negative"
    return f"{source}\n{' ' * offset}{CARET} {message}\n"
