"""Core AMD64 codegen."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, assert_never

from libexprc.parser.nodes import BinaryNode, NumberLiteral

from ._context import AMD64CodegenContext
from .assembly import (
    perform_operation_onto_stack,
    program_epilogue,
    program_prologue,
    push_integer_onto_stack,
)

if TYPE_CHECKING:
    from libexprc.codegen.config import CodegenConfig
    from libexprc.parser.nodes import ExpressionNode
    from libexprc.targets.target import Target


class AMD64CodegenBackend:
    target: Target
    root: ExpressionNode

    def __init__(
        self,
        target: Target,
        root: ExpressionNode,
        fd: IO[str],
        config: CodegenConfig,
    ) -> None:
        assert target.architecture == "AMD64"

        self.target = target
        self.root = root
        self.context = AMD64CodegenContext(fd=fd, config=config)

    def emit(self) -> None:
        """AMD64 code generation backend."""
        program_prologue(self.context)
        amd64_expression_instructions(self.context, self.root)
        program_epilogue(self.context)


def amd64_expression_instructions(
    context: AMD64CodegenContext,
    node: ExpressionNode,
) -> None:
    """Write instructions that leave value of given node on top of the stack.

    Operands are emitted in post-order, left one first.
    Tree is walked with an explicit stack as `+` chains grow as deep as they are long.
    """
    # Node and whether its operands are already emitted
    pending: list[tuple[ExpressionNode, bool]] = [(node, False)]
    while pending:
        current, operands_emitted = pending.pop()
        match current:
            case NumberLiteral():
                push_integer_onto_stack(context, current.value)
            case BinaryNode() if operands_emitted:
                perform_operation_onto_stack(context, operation=current.kind)
            case BinaryNode():
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))
            case _:
                assert_never(current)
