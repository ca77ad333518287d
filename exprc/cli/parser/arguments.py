from dataclasses import dataclass

from libexprc.codegen.config import CodegenConfig
from libexprc.targets.target import Target


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole exprc toolchain process."""

    # Input expression, empty for goals that does not require it
    expression: str

    version: bool
    tokens: bool
    ast: bool

    verbose: bool

    target: Target
    codegen_config: CodegenConfig

    lexer_debug_emit_lexemes: bool
    cli_debug_user_friendly_errors: bool
