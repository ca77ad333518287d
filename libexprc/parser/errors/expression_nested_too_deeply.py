from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.exceptions import ExprcError
from libexprc.lexer.tokens import Token


class ExpressionNestedTooDeeplyError(ExprcError):
    def __init__(self, at: Token, max_depth: int) -> None:
        self.at = at
        self.max_depth = max_depth

    def __repr__(self) -> str:
        return f"""Expression is nested too deeply at {self.at.location}!

At most {self.max_depth} levels of parentheses are allowed.

{self.generic_error_name}"""

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.SYNTAX,
            message="expression is nested too deeply",
            offset=self.at.location.col_number,
        )
