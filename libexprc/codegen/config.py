from dataclasses import dataclass, field

LINKER_EXPECTED_ENTRY_POINT = "main"


@dataclass
class CodegenConfig:
    """Configuration for codegen.

    Low-level configuration specifies how to generate code by codegen
    (Do not mismatch with something like general parameters, they are forced by compiler)
    """

    # Name of global symbol which program is entered at (C runtime calls it)
    entry_point_name: str = field(default=LINKER_EXPECTED_ENTRY_POINT)

    # Prefix for each emitted instruction (labels and directives are not indented)
    indentation: str = field(default="  ")
