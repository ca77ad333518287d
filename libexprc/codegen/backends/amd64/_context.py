from dataclasses import dataclass
from typing import IO

from libexprc.codegen.config import CodegenConfig


@dataclass(frozen=True)
class AMD64CodegenContext:
    """General context for emitting code from expression tree."""

    fd: IO[str]
    config: CodegenConfig

    def write(self, *lines: str) -> int:
        """Write instructions, each one on its own indented line."""
        indent = self.config.indentation
        return self.fd.write(indent + f"\n{indent}".join(lines) + "\n")

    def directive(self, line: str) -> int:
        """Write directive or label as-is (non-indented)."""
        return self.fd.write(f"{line}\n")
