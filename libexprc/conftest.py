"""Shared fixtures for library tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


def _wrap_signed(value: int) -> int:
    value &= WORD_MASK
    return value - (1 << WORD_BITS) if value >> (WORD_BITS - 1) else value


def _truncating_division(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _evaluate_assembly(assembly: str) -> int:
    """Execute emitted accumulator / stack instructions and return value left in `rax` at `ret`.

    Understands only subset of instructions emitted by AMD64 backend.
    """
    registers = {"rax": 0, "rdi": 0, "rdx": 0}
    stack: list[int] = []

    def operand(raw: str) -> int:
        return registers[raw] if raw in registers else int(raw)

    for line in assembly.splitlines():
        if not line.startswith(" "):
            continue  # Directive or label

        mnemonic, _, rest = line.strip().partition(" ")
        args = [arg.strip() for arg in rest.split(",")] if rest else []

        match mnemonic, args:
            case "push", [value]:
                stack.append(operand(value))
            case "pop", [register]:
                registers[register] = stack.pop()
            case "mov", [register, value]:
                registers[register] = _wrap_signed(operand(value))
            case "add", [dst, src]:
                registers[dst] = _wrap_signed(registers[dst] + registers[src])
            case "sub", [dst, src]:
                registers[dst] = _wrap_signed(registers[dst] - registers[src])
            case "imul", [dst, src]:
                registers[dst] = _wrap_signed(registers[dst] * registers[src])
            case "cqo", []:
                registers["rdx"] = -1 if registers["rax"] < 0 else 0
            case "idiv", [src]:
                divisor = registers[src]
                if divisor == 0:
                    msg = "Division by zero (SIGFPE)"
                    raise ZeroDivisionError(msg)
                dividend = registers["rax"]
                registers["rax"] = _wrap_signed(_truncating_division(dividend, divisor))
                registers["rdx"] = dividend - _truncating_division(dividend, divisor) * divisor
            case "ret", []:
                assert not stack, "Stack must be balanced at return"
                return registers["rax"]
            case _:
                msg = f"Unknown instruction: {line!r}"
                raise ValueError(msg)

    msg = "No `ret` instruction emitted"
    raise AssertionError(msg)


@pytest.fixture
def evaluate_assembly() -> Callable[[str], int]:
    return _evaluate_assembly
