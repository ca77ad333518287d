from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from libexprc.lexer.lexer import debug_lexer_wrapper, tokenize

if TYPE_CHECKING:
    from exprc.cli.parser.arguments import CLIArguments


def cli_perform_tokens_goal(args: CLIArguments) -> NoReturn:
    """Perform lexer only goal that emits tokens into stdout, one per line."""
    assert args.tokens, "Cannot perform tokens goal with no tokens flag set!"

    tokens = tokenize(args.expression)
    if args.lexer_debug_emit_lexemes:
        tokens = debug_lexer_wrapper(tokens)

    for token in tokens:
        print(f"{token.location.col_number}\t{token.type.name}\t{token.value!r}")
    return sys.exit(0)
