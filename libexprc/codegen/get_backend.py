from libexprc.codegen.errors import UnsupportedTargetError
from libexprc.targets.target import Target

from .backends import (
    AMD64CodegenBackend,
    CodeGeneratorBackend,
)


def get_backend_for_target(
    target: Target,
) -> type[CodeGeneratorBackend]:
    """Get code generator backend for specified target architecture."""
    match target.architecture:
        case "AMD64":
            return AMD64CodegenBackend
        case _:
            raise UnsupportedTargetError(target=target)
