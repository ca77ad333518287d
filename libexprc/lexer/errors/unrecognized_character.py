from libexprc.diagnostics import Diagnostic, DiagnosticKind
from libexprc.exceptions import ExprcError
from libexprc.lexer.tokens import TokenLocation


class UnrecognizedCharacterError(ExprcError):
    def __init__(self, at: TokenLocation, character: str) -> None:
        self.at = at
        self.character = character

    def __repr__(self) -> str:
        return f"""Unrecognized character {self.character!r} at {self.at}!

Expected an integer, operator (`+`, `-`, `*`, `/`) or parenthesis.

{self.generic_error_name}"""

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=DiagnosticKind.LEX,
            message="cannot tokenize",
            offset=self.at.col_number,
        )
