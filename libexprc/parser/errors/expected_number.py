from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.exceptions import ExprcError
from libexprc.lexer.tokens import Token


class ExpectedNumberError(ExprcError):
    def __init__(self, got: Token) -> None:
        self.got = got

    def __repr__(self) -> str:
        return f"""Expected an integer but got {self.got.type.name} ({self.got.text or 'end of input'}) at {self.got.location}!

Did you forgot an operand or typed two operators in a row?

{self.generic_error_name}"""

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.SYNTAX,
            message="not a digit",
            offset=self.got.location.col_number,
        )
