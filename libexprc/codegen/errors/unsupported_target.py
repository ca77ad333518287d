from libexprc.exceptions import ExprcError
from libexprc.targets.target import Target


class UnsupportedTargetError(ExprcError):
    def __init__(self, target: Target) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"""No code generator backend for target '{self.target.triplet}' ({self.target.architecture})!

Only AMD64 targets are supported.

{self.generic_error_name}"""
