from .target import DEFAULT_TARGET_TRIPLET, Target, Triplet

__all__ = [
    "DEFAULT_TARGET_TRIPLET",
    "Target",
    "Triplet",
]
