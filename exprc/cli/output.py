"""CLI output helpers, everything goes into stderr as stdout is reserved for compiler output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Literal, NoReturn

if TYPE_CHECKING:
    from libexprc.diagnostics import Diagnostic

type MessageLevel = Literal["INFO", "WARNING", "ERROR"]


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit message from toolchain into stderr, INFO messages is only emitted when verbose."""
    if level == "INFO" and not verbose:
        return
    print(f"[{level}] {text}", file=sys.stderr)


def cli_fatal_diagnostic(diagnostic: Diagnostic, source: str) -> NoReturn:
    """Emit diagnostic rendered against input as-is (no prefix, as caret is aligned) and exit abnormally."""
    sys.stderr.write(diagnostic.render(source))
    sys.stderr.flush()
    sys.exit(1)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and exit abnormally."""
    cli_message("ERROR", text)
    sys.exit(1)
