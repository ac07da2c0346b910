"""Lex carrier for scan-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from colloid.diagnostics import diagnostic_from_lex_error, has_errors
from colloid.lexer import Token, TokenKind, UnexpectedInput

if TYPE_CHECKING:
    from colloid.diagnostics import Diagnostic
    from colloid.lexer import TokenResult


@dataclass(slots=True)
class LexResult:
    """Output of one full scan, split into tokens and errors on demand."""

    source_text: str
    results: list[TokenResult]
    _diagnostics: list[Diagnostic] | None = field(default=None, init=False, repr=False)

    @property
    def tokens(self) -> list[Token]:
        return [result for result in self.results if isinstance(result, Token)]

    @property
    def errors(self) -> list[UnexpectedInput]:
        return [result for result in self.results if isinstance(result, UnexpectedInput)]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self._diagnostics is None:
            self._diagnostics = [diagnostic_from_lex_error(error) for error in self.errors]
        return self._diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    @property
    def end_of_file(self) -> Token:
        last = self.results[-1]
        if not isinstance(last, Token) or last.kind != TokenKind.END_OF_FILE:
            raise RuntimeError("Token stream does not end with END_OF_FILE")
        return last
