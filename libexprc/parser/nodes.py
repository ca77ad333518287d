"""Expression tree (AST) produced by parser and consumed by codegen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class NodeKind(Enum):
    """Kind of an expression node."""

    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()

    NUMBER_LITERAL = auto()


OPERATOR_TO_NODE_KIND = {
    "+": NodeKind.ADD,
    "-": NodeKind.SUBTRACT,
    "*": NodeKind.MULTIPLY,
    "/": NodeKind.DIVIDE,
}
NODE_KIND_TO_OPERATOR = {v: k for k, v in OPERATOR_TO_NODE_KIND.items()}


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    value: int

    @property
    def kind(self) -> NodeKind:
        return NodeKind.NUMBER_LITERAL


@dataclass(frozen=True, slots=True)
class BinaryNode:
    """Binary arithmetic operation which owns both of its operands."""

    kind: NodeKind
    left: ExpressionNode
    right: ExpressionNode

    def __post_init__(self) -> None:
        assert self.kind != NodeKind.NUMBER_LITERAL, (
            "Binary node cannot be of number literal kind"
        )


type ExpressionNode = BinaryNode | NumberLiteral


def format_ast(node: ExpressionNode) -> str:
    """Render tree as indented dump, one node per line (used for displaying AST)."""
    lines: list[str] = []

    # Pre-order walk, right operand is pushed first so left one is rendered first
    pending: list[tuple[ExpressionNode, int]] = [(node, 0)]
    while pending:
        current, depth = pending.pop()
        indent = "  " * depth
        match current:
            case NumberLiteral(value=value):
                lines.append(f"{indent}{current.kind.name} {value}")
            case BinaryNode(kind=kind, left=left, right=right):
                lines.append(f"{indent}{kind.name} ({NODE_KIND_TO_OPERATOR[kind]})")
                pending.append((right, depth + 1))
                pending.append((left, depth + 1))
    return "\n".join(lines)
