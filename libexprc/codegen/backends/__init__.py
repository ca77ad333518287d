"""Code generation backend module.

Provides code generation backends (codegen) for emitting assembly from expression tree.
"""

from .amd64.codegen import AMD64CodegenBackend
from .base import CodeGeneratorBackend

__all__ = [
    "AMD64CodegenBackend",
    "CodeGeneratorBackend",
]
