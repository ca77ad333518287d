"""exprc toolchain.

Provides CLI for compiling arithmetic expressions into assembly.
"""
