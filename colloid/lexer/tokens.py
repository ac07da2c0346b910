"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from colloid.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    ERROR = 0  # rejected character, only ever carried inside a lex error
    END_OF_LINE = 1
    END_OF_FILE = 2

    # -------------------------
    # Punctuation
    # -------------------------
    LEFT_PARENTHESIS = 10  # (
    RIGHT_PARENTHESIS = 11  # )

    # -------------------------
    # Identifiers (reserved, no scanning rule yet)
    # -------------------------
    IDENTIFIER = 20

    @property
    def debug_name(self) -> str:
        """Symbolic name used in token display, e.g. `LeftParenthesis`."""
        return _DEBUG_NAMES[self]


_DEBUG_NAMES: Final[dict[TokenKind, str]] = {
    kind: "".join(part.capitalize() for part in kind.name.split("_")) for kind in TokenKind
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `column` is the column counter after the token's characters were consumed,
    so for a one-character token it is the 1-based column of that character.
    """

    kind: TokenKind
    lexeme: str
    line: int
    column: int
    range: TextRange

    def is_error(self) -> bool:
        return self.kind == TokenKind.ERROR

    def is_regular(self) -> bool:
        return not self.is_error()

    def __str__(self) -> str:
        return f"'{self.lexeme}'[{self.kind.debug_name}]@{self.line}:{self.column}"

