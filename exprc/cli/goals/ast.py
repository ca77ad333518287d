from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libexprc.lexer.lexer import debug_lexer_wrapper, tokenize
from libexprc.parser.nodes import format_ast
from libexprc.parser.parser import parse_expression

if TYPE_CHECKING:
    from exprc.cli.parser.arguments import CLIArguments


def cli_perform_ast_goal(args: CLIArguments) -> NoReturn:
    """Perform AST display only goal that emits expression tree into stdout."""
    assert args.ast, "Cannot perform AST goal with no AST flag set!"

    tokens = tokenize(args.expression)
    if args.lexer_debug_emit_lexemes:
        tokens = debug_lexer_wrapper(tokens)

    print(format_ast(parse_expression(tokens)))
    return sys.exit(0)
