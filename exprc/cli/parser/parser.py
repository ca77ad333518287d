from __future__ import annotations

from typing import TYPE_CHECKING, cast

from exprc.cli.output import cli_fatal_abort, cli_fatal_diagnostic
from exprc.cli.parser.arguments import CLIArguments
from libexprc.codegen.config import CodegenConfig
from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.targets import DEFAULT_TARGET_TRIPLET, Target

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace, prog: str) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    expression = _process_expression(args, prog)

    return CLIArguments(
        expression=expression,
        # Goals.
        version=bool(args.version),
        tokens=bool(args.tokens),
        ast=bool(args.ast),
        verbose=bool(args.verbose),
        target=Target.from_triplet(DEFAULT_TARGET_TRIPLET),
        codegen_config=CodegenConfig(),
        lexer_debug_emit_lexemes=bool(args.lexer_debug_emit_lexemes),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    if sum([args.version, args.tokens, args.ast]) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _process_expression(args: Namespace, prog: str) -> str:
    """Process input expression, exactly one is expected unless goal does not require it."""
    expressions = cast("list[str]", args.expression)
    if args.version and not expressions:
        return ""

    if len(expressions) != 1:
        usage = Diagnostic(
            kind=DiagnosticKind.USAGE,
            message=f"{prog}: invalid number of arguments",
        )
        return cli_fatal_diagnostic(usage, source="")

    return expressions[0]
