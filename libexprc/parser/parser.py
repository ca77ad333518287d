"""Recursive descent parser for arithmetic expressions.

Grammar (from lowest to highest precedence):
    expr    := mul ( ("+" | "-") mul )*
    mul     := primary ( ("*" | "/") primary )*
    primary := "(" expr ")" | number
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from libexprc.parser._context import ParserContext
from libexprc.parser.errors import UnexpectedTrailingTokenError
from libexprc.parser.nodes import (
    OPERATOR_TO_NODE_KIND,
    BinaryNode,
    ExpressionNode,
    NumberLiteral,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from libexprc.lexer.tokens import Token

    type ParseFunction = Callable[[ParserContext], ExpressionNode]


def parse_expression(tokens: Sequence[Token]) -> ExpressionNode:
    """Parse whole token sequence into single expression tree.

    Whole input must be consumed, trailing tokens are an error.
    """
    context = ParserContext(tokens=tokens)
    root = _parse_expr(context)

    if not context.at_eof():
        raise UnexpectedTrailingTokenError(got=context.peek_token())
    return root


def _parse_expr(context: ParserContext) -> ExpressionNode:
    return _parse_left_associative(context, "+-", _parse_mul)


def _parse_mul(context: ParserContext) -> ExpressionNode:
    return _parse_left_associative(context, "*/", _parse_primary)


def _parse_primary(context: ParserContext) -> ExpressionNode:
    opening = context.peek_token()
    if context.consume("("):
        context.enter_parentheses(opening)
        node = _parse_expr(context)
        context.expect(")")
        context.leave_parentheses()
        return node

    return NumberLiteral(value=context.expect_number())


def _parse_left_associative(
    context: ParserContext,
    symbols: str,
    parse_operand: ParseFunction,
) -> ExpressionNode:
    """Parse `operand (op operand)*` folding into left-growing tree."""
    node = parse_operand(context)

    while True:
        for symbol in symbols:
            if context.consume(symbol):
                node = BinaryNode(
                    kind=OPERATOR_TO_NODE_KIND[symbol],
                    left=node,
                    right=parse_operand(context),
                )
                break
        else:
            return node


