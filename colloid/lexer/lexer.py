"""Lexer."""

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import TextIO

from colloid.lexer.errors import TokenResult, UnexpectedInput
from colloid.lexer.tokens import Token, TokenKind
from colloid.text import TextRange


@dataclass(frozen=True, slots=True)
class ScannerCheckpoint:
    """Scanner checkpoint."""

    start: int
    current: int
    line: int
    column: int
    source: str = field(repr=False)


class Scanner:
    """Single-pass scanner over one source text.

    Tokens carry the line they start on and the column counter after their
    last character, so `(` at the start of a line is reported at column 1.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._length = len(source)
        self._start = 0
        self._current = 0
        self._line = 1
        self._column = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def current(self) -> int:
        return self._current

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def is_at_end(self) -> bool:
        return self._current >= self._length

    @property
    def checkpoint(self) -> ScannerCheckpoint:
        return ScannerCheckpoint(
            start=self._start,
            current=self._current,
            line=self._line,
            column=self._column,
            source=self._source,
        )

    def rewind(self, checkpoint: ScannerCheckpoint) -> None:
        if checkpoint.source != self._source:
            raise ValueError("Checkpoint was taken on a different source")
        self._start = checkpoint.start
        self._current = checkpoint.current
        self._line = checkpoint.line
        self._column = checkpoint.column

    def tokenize(self) -> list[TokenResult]:
        """Scan to the end of input; the last element is always END_OF_FILE."""
        return list(self)

    def __iter__(self) -> Iterator[TokenResult]:
        while True:
            result = self.scan_token()
            yield result
            if isinstance(result, Token) and result.kind == TokenKind.END_OF_FILE:
                return

    def scan_token(self) -> TokenResult:
        self._start = self._current

        if self.is_at_end:
            return self._make_token(TokenKind.END_OF_FILE)

        self._skip_whitespace()
        self._start = self._current
        if self.is_at_end:
            return self._make_token(TokenKind.END_OF_FILE)

        ch = self._advance()

        match ch:
            case "\n":
                token = self._make_token(TokenKind.END_OF_LINE)
                self._line += 1
                self._column = 0
                return token
            case "(":
                return self._make_token(TokenKind.LEFT_PARENTHESIS)
            case ")":
                return self._make_token(TokenKind.RIGHT_PARENTHESIS)
            case _:
                # Multi-character rules (identifiers first) go above this
                # fallback, each consuming a maximal run before classifying.
                return UnexpectedInput(self._make_token(TokenKind.ERROR))

    def _make_token(self, kind: TokenKind) -> Token:
        return Token(
            kind,
            self._source[self._start : self._current],
            line=self._line,
            column=self._column,
            range=TextRange(self._start, self._current),
        )

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        self._column += 1
        return ch

    def _peek_char(self) -> str | None:
        if self.is_at_end:
            return None
        return self._source[self._current]

    def _skip_whitespace(self) -> None:
        while (ch := self._peek_char()) is not None:
            if ch == "\n" or not ch.isspace():
                return
            self._advance()


def format_token_result(result: TokenResult) -> str:
    """Render a token with its display form, or an error with its position."""
    if isinstance(result, UnexpectedInput):
        return f"error: {result} @{result.line}:{result.column}"
    return str(result)


def dump_tokens(results: Iterable[TokenResult], *, file: TextIO | None = None) -> None:
    """Print the token stream, one numbered line per result, for debugging."""
    out = file if file is not None else sys.stdout
    for i, result in enumerate(results):
        print(f"{i:03d} {format_token_result(result)}", file=out)
