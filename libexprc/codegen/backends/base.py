from typing import IO, Protocol

from libexprc.codegen.config import CodegenConfig
from libexprc.parser.nodes import ExpressionNode
from libexprc.targets.target import Target


class CodeGeneratorBackend(Protocol):
    """Base code generator backend protocol.

    All backends inherited from this protocol.
    """

    def __init__(
        self,
        target: Target,
        root: ExpressionNode,
        fd: IO[str],
        config: CodegenConfig,
    ) -> None: ...

    def emit(self) -> None: ...
