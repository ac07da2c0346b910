"""Lexical errors.

Scanning never raises these: they are returned in the token stream next to
regular tokens so a consumer can report every error of a pass at once.
"""

from colloid.lexer.tokens import Token, TokenKind
from colloid.text import TextRange


class LexError(Exception):
    """Base class for errors produced while scanning."""


class UnexpectedInput(LexError):
    """A consumed character matched none of the scanning rules."""

    def __init__(self, token: Token) -> None:
        if token.kind != TokenKind.ERROR:
            raise ValueError(f"UnexpectedInput expects an ERROR token, got {token.kind!r}")
        super().__init__(token)
        self.token = token

    @property
    def lexeme(self) -> str:
        return self.token.lexeme

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def column(self) -> int:
        return self.token.column

    @property
    def range(self) -> TextRange:
        return self.token.range

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnexpectedInput):
            return NotImplemented
        return self.token == other.token

    def __hash__(self) -> int:
        return hash(self.token)

    def __repr__(self) -> str:
        return f"UnexpectedInput({self.token!r})"

    def __str__(self) -> str:
        return f"Unexpected input: {self.token.lexeme}"


type TokenResult = Token | UnexpectedInput
