from __future__ import annotations

from typing import IO, TYPE_CHECKING

from libexprc.codegen.config import CodegenConfig
from libexprc.codegen.get_backend import get_backend_for_target
from libexprc.targets import DEFAULT_TARGET_TRIPLET, Target

if TYPE_CHECKING:
    from libexprc.parser.nodes import ExpressionNode


def generate_code_for_expression(
    root: ExpressionNode,
    fd: IO[str],
    *,
    target: Target | None = None,
    config: CodegenConfig | None = None,
) -> None:
    """Emit assembly for given expression tree into given text stream."""
    target = target or Target.from_triplet(DEFAULT_TARGET_TRIPLET)
    backend_cls = get_backend_for_target(target)
    backend = backend_cls(
        target=target,
        root=root,
        fd=fd,
        config=config or CodegenConfig(),
    )
    backend.emit()
