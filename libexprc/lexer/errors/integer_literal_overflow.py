from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.exceptions import ExprcError
from libexprc.lexer.tokens import TokenLocation


class IntegerLiteralOverflowError(ExprcError):
    def __init__(self, at: TokenLocation, number_raw: str, max_value: int) -> None:
        self.at = at
        self.number_raw = number_raw
        self.max_value = max_value

    def __repr__(self) -> str:
        return f"""Integer literal overflow at {self.at}!

Literal '{self.number_raw}' does not fit into signed 64 bit machine word (max {self.max_value}).

{self.generic_error_name}"""

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.LEX,
            message="integer literal is too large",
            offset=self.at.col_number,
        )
