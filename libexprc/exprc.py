"""Whole compilation pipeline: input -> tokens -> expression tree -> assembly."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

from libexprc.codegen.generator import generate_code_for_expression
from libexprc.lexer.lexer import debug_lexer_wrapper, tokenize
from libexprc.parser.parser import parse_expression

if TYPE_CHECKING:
    from libexprc.codegen.config import CodegenConfig
    from libexprc.targets.target import Target


def compile_expression(
    source: str,
    fd: IO[str],
    *,
    target: Target | None = None,
    config: CodegenConfig | None = None,
    debug_emit_lexemes: bool = False,
) -> None:
    """Compile given expression into assembly written into `fd`.

    Raises an ExprcError (with diagnostic) on malformed input, nothing is written in that case.
    """
    tokens = tokenize(source)
    if debug_emit_lexemes:
        tokens = debug_lexer_wrapper(tokens)

    root = parse_expression(tokens)
    generate_code_for_expression(root, fd, target=target, config=config)
