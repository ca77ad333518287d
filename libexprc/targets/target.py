from dataclasses import dataclass
from typing import Literal

type Triplet = Literal[
    "amd64-unknown-linux",
    "arm64-apple-darwin",
]


@dataclass(eq=True)
class Target:
    """Specifications for target build host."""

    # Conventional triplet for that target for comparisons
    triplet: Triplet

    # Based on triplet
    architecture: Literal["AMD64", "ARM64"]
    operating_system: Literal["Darwin", "Linux"]

    @staticmethod
    def from_triplet(triplet: Triplet) -> "Target":
        match triplet:
            case "amd64-unknown-linux":
                return Target(
                    triplet=triplet,
                    architecture="AMD64",
                    operating_system="Linux",
                )
            case "arm64-apple-darwin":
                return Target(
                    triplet=triplet,
                    architecture="ARM64",
                    operating_system="Darwin",
                )


DEFAULT_TARGET_TRIPLET: Triplet = "amd64-unknown-linux"
