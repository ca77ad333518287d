from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.exceptions import ExprcError
from libexprc.lexer.tokens import Token


class ExpectedSymbolError(ExprcError):
    def __init__(self, expected: str, got: Token) -> None:
        self.expected = expected
        self.got = got

    def __repr__(self) -> str:
        return f"""Expected '{self.expected}' but got {self.got.type.name} ({self.got.text or 'end of input'}) at {self.got.location}!

{self.generic_error_name}"""

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.SYNTAX,
            message=f"not the expected symbol '{self.expected}'",
            offset=self.got.location.col_number,
        )
