from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.exceptions import ExprcError
from libexprc.lexer.tokens import Token


class UnexpectedTrailingTokenError(ExprcError):
    def __init__(self, got: Token) -> None:
        self.got = got

    def __repr__(self) -> str:
        return f"""Unexpected '{self.got.text}' after end of an expression at {self.got.location}!

Did you forgot an operator between operands or have unbalanced parentheses?

{self.generic_error_name}"""

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.SYNTAX,
            message="unexpected token after expression",
            offset=self.got.location.col_number,
        )
