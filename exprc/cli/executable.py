from __future__ import annotations

import sys
from pathlib import Path

# Displayed program name when invoked as module (`sys.argv[0]` is path to `__main__.py`)
MODULE_INVOCATION_PROG = "python -m exprc"


def cli_get_executable_program(*, override: str | None = None) -> str:
    """Program name displayed in usage and diagnostics."""
    if override:
        return override

    executable = Path(sys.argv[0]).name
    if executable == "__main__.py":
        return MODULE_INVOCATION_PROG
    return executable
