from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING, NoReturn

from exprc.cli.output import cli_message
from libexprc.exprc import compile_expression

if TYPE_CHECKING:
    from exprc.cli.parser.arguments import CLIArguments


def cli_perform_compile_goal(args: CLIArguments) -> NoReturn:
    """Perform compilation of an expression into assembly which is emitted into stdout."""
    cli_message(
        "INFO",
        f"Compiling expression for target '{args.target.triplet}'...",
        verbose=args.verbose,
    )

    # Buffered so no partial assembly is emitted when compilation fails halfway
    buffer = io.StringIO()
    compile_expression(
        args.expression,
        buffer,
        target=args.target,
        config=args.codegen_config,
        debug_emit_lexemes=args.lexer_debug_emit_lexemes,
    )
    sys.stdout.write(buffer.getvalue())
    sys.stdout.flush()
    return sys.exit(0)
