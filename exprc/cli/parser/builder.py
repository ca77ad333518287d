from __future__ import annotations

import argparse
from argparse import ArgumentParser, Namespace
from typing import TYPE_CHECKING, NoReturn

from exprc.cli.output import cli_fatal_diagnostic
from libexprc.diagnostics import Diagnostic, DiagnosticKind

if TYPE_CHECKING:
    from collections.abc import Sequence


class CLIArgumentParser(ArgumentParser):
    """Argument parser which treats option-like expressions (e.g `-1+2`) as positional ones.

    Every argparse failure is reported as usage diagnostic (exit code 1).
    """

    def parse_args(  # type: ignore[override]
        self,
        args: Sequence[str] | None = None,
        namespace: Namespace | None = None,
    ) -> Namespace:
        parsed, unknown = self.parse_known_args(args, namespace)
        # Unknown strings are left for expression arguments count validation
        parsed.expression = [*parsed.expression, *unknown]
        return parsed

    def error(self, message: str) -> NoReturn:
        usage = Diagnostic(
            kind=DiagnosticKind.USAGE,
            message=f"{self.prog}: {message}",
        )
        cli_fatal_diagnostic(usage, source="")


def build_cli_parser(prog: str) -> CLIArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = CLIArgumentParser(
        description="exprc - compile single arithmetic expression into x86-64 assembly",
        usage=f"{prog} expression [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "expression",
        help="Arithmetic expression to compile, e.g '(2+3)*4' (quote it for shell)",
        nargs="*",
        default=[],
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    _add_debug_group(parser)
    _add_toolchain_debug_group(parser)
    return parser


def _add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging and intermediate stages inspection")

    group.add_argument(
        "--tokens",
        required=False,
        action="store_true",
        help="If passed will just emit tokens of provided expression into stdout.",
    )

    group.add_argument(
        "--ast",
        required=False,
        action="store_true",
        help="If passed will just emit expression tree (AST) of provided expression into stdout.",
    )

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from compiler.",
    )


def _add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Hidden flags for debugging toolchain itself."""
    parser.add_argument(
        "--debug-emit-lexemes",
        dest="lexer_debug_emit_lexemes",
        action="store_true",
        help=argparse.SUPPRESS,
    )

    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
