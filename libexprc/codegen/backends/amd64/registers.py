"""Consts and types related to AMD64 registers and architecture."""

from __future__ import annotations

from typing import Literal

# Registers specification for AMD64
# Skips most of registers due to being unused by expression evaluation
type AMD64_GP_REGISTERS = Literal[
    "rax",
    "rdi",
    "rdx",
]

# Primary (accumulator, left operand, return value) and secondary (right operand) registers
AMD64_PRIMARY_REGISTER: AMD64_GP_REGISTERS = "rax"
AMD64_SECONDARY_REGISTER: AMD64_GP_REGISTERS = "rdi"

# `push imm` accepts only 32 bit immediate which is sign-extended to 64 bits
AMD64_PUSH_IMMEDIATE_MIN = -(2**31)
AMD64_PUSH_IMMEDIATE_MAX = 2**31 - 1
