"""Assembly abstraction layer that hides declarative assembly OPs into functions that generates that for you.

Emits Intel syntax (`.intel_syntax noprefix`), destination operand first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from libexprc.parser.nodes import NodeKind

from .registers import (
    AMD64_PRIMARY_REGISTER,
    AMD64_PUSH_IMMEDIATE_MAX,
    AMD64_PUSH_IMMEDIATE_MIN,
    AMD64_SECONDARY_REGISTER,
)

if TYPE_CHECKING:
    from ._context import AMD64CodegenContext
    from .registers import AMD64_GP_REGISTERS


def program_prologue(context: AMD64CodegenContext) -> None:
    """Emit fixed header with syntax selection and global entry point label."""
    entry_point = context.config.entry_point_name
    context.directive(".intel_syntax noprefix")
    context.directive(f".global {entry_point}")
    context.directive(f"{entry_point}:")


def program_epilogue(context: AMD64CodegenContext) -> None:
    """Return evaluated value (top of stack) from entry point as exit code."""
    pop_cells_from_stack_into_registers(context, AMD64_PRIMARY_REGISTER)
    context.write("ret")


def pop_cells_from_stack_into_registers(
    context: AMD64CodegenContext,
    *registers: AMD64_GP_REGISTERS,
) -> None:
    """Pop cells from stack and store into given registers (in order)."""
    assert registers, "Expected registers to store popped result into!"

    for register in registers:
        context.write(f"pop {register}")


def push_register_onto_stack(
    context: AMD64CodegenContext,
    register: AMD64_GP_REGISTERS,
) -> None:
    """Store given register onto stack under current stack pointer."""
    context.write(f"push {register}")


def push_integer_onto_stack(
    context: AMD64CodegenContext,
    value: int,
) -> None:
    """Push given integer onto stack.

    Values outside of sign-extended imm32 range are materialized via register.
    """
    assert value.bit_length() < 8 * 8, (
        "Can push only integers within signed 64 bits range (8 bytes, x64)"
    )
    if AMD64_PUSH_IMMEDIATE_MIN <= value <= AMD64_PUSH_IMMEDIATE_MAX:
        context.write(f"push {value}")
        return

    context.write(f"mov {AMD64_PRIMARY_REGISTER}, {value}")
    push_register_onto_stack(context, AMD64_PRIMARY_REGISTER)


def perform_operation_onto_stack(
    context: AMD64CodegenContext,
    operation: NodeKind,
) -> None:
    """Perform *math* operation onto stack (pop arguments and push back result).

    Right operand is on top of the stack, left one is below it.
    """
    lhs, rhs = AMD64_PRIMARY_REGISTER, AMD64_SECONDARY_REGISTER
    pop_cells_from_stack_into_registers(context, rhs, lhs)

    match operation:
        case NodeKind.ADD:
            context.write(f"add {lhs}, {rhs}")
        case NodeKind.SUBTRACT:
            context.write(f"sub {lhs}, {rhs}")
        case NodeKind.MULTIPLY:
            context.write(f"imul {lhs}, {rhs}")
        case NodeKind.DIVIDE:
            # Sign-extend rax into rdx:rax, quotient is left in rax and remainder (rdx) is discarded
            context.write(
                "cqo",
                f"idiv {rhs}",
            )
        case _:
            msg = f"{operation} cannot be performed by codegen `{perform_operation_onto_stack.__name__}`"
            raise ValueError(msg)
    push_register_onto_stack(context, lhs)
