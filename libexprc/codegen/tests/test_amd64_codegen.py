import io

import pytest

from libexprc.codegen.config import CodegenConfig
from libexprc.codegen.generator import generate_code_for_expression
from libexprc.parser.nodes import BinaryNode, ExpressionNode, NodeKind, NumberLiteral

PROLOGUE = ".intel_syntax noprefix\n.global main\nmain:\n"
EPILOGUE = "  pop rax\n  ret\n"


def _generate(root: ExpressionNode, config: CodegenConfig | None = None) -> str:
    fd = io.StringIO()
    generate_code_for_expression(root, fd, config=config)
    return fd.getvalue()


def test_codegen_number_literal() -> None:
    assert _generate(NumberLiteral(value=42)) == PROLOGUE + "  push 42\n" + EPILOGUE


@pytest.mark.parametrize(
    ("kind", "instructions"),
    [
        (NodeKind.ADD, ["add rax, rdi"]),
        (NodeKind.SUBTRACT, ["sub rax, rdi"]),
        (NodeKind.MULTIPLY, ["imul rax, rdi"]),
        (NodeKind.DIVIDE, ["cqo", "idiv rdi"]),
    ],
)
def test_codegen_binary_node(kind: NodeKind, instructions: list[str]) -> None:
    root = BinaryNode(kind=kind, left=NumberLiteral(value=7), right=NumberLiteral(value=2))
    expected = [
        "  push 7",
        "  push 2",
        "  pop rdi",
        "  pop rax",
        *(f"  {i}" for i in instructions),
        "  push rax",
    ]
    assert _generate(root) == PROLOGUE + "\n".join(expected) + "\n" + EPILOGUE


def test_codegen_emits_left_operand_first() -> None:
    root = BinaryNode(
        kind=NodeKind.SUBTRACT,
        left=BinaryNode(kind=NodeKind.SUBTRACT, left=NumberLiteral(value=10), right=NumberLiteral(value=2)),
        right=NumberLiteral(value=3),
    )
    pushes = [line for line in _generate(root).splitlines() if line.startswith("  push") and line != "  push rax"]
    assert pushes == ["  push 10", "  push 2", "  push 3"]


def test_codegen_large_literal_goes_through_register() -> None:
    value = 2**31
    assert _generate(NumberLiteral(value=value)) == (
        PROLOGUE + f"  mov rax, {value}\n  push rax\n" + EPILOGUE
    )


def test_codegen_imm32_boundary_is_pushed_directly() -> None:
    value = 2**31 - 1
    assert f"  push {value}\n" in _generate(NumberLiteral(value=value))


def test_codegen_framing_is_identical_across_inputs() -> None:
    small = _generate(NumberLiteral(value=1))
    large = _generate(
        BinaryNode(kind=NodeKind.MULTIPLY, left=NumberLiteral(value=3), right=NumberLiteral(value=4)),
    )
    for output in (small, large):
        assert output.startswith(PROLOGUE)
        assert output.endswith(EPILOGUE)


def test_codegen_config_entry_point_and_indentation() -> None:
    config = CodegenConfig(entry_point_name="_start_expr", indentation="\t")
    assert _generate(NumberLiteral(value=1), config) == (
        ".intel_syntax noprefix\n.global _start_expr\n_start_expr:\n\tpush 1\n\tpop rax\n\tret\n"
    )


def test_codegen_evaluates_nested_tree(evaluate_assembly) -> None:
    # (8 - 2) * (3 + 1) / 5
    root = BinaryNode(
        kind=NodeKind.DIVIDE,
        left=BinaryNode(
            kind=NodeKind.MULTIPLY,
            left=BinaryNode(kind=NodeKind.SUBTRACT, left=NumberLiteral(value=8), right=NumberLiteral(value=2)),
            right=BinaryNode(kind=NodeKind.ADD, left=NumberLiteral(value=3), right=NumberLiteral(value=1)),
        ),
        right=NumberLiteral(value=5),
    )
    assert evaluate_assembly(_generate(root)) == 4
