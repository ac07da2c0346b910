"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from colloid.diagnostics.codes import LEXER_UNEXPECTED_INPUT
from colloid.diagnostics.diagnostic import Diagnostic
from colloid.lexer import UnexpectedInput


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def diagnostic_from_lex_error(error: UnexpectedInput) -> Diagnostic:
    """Position a lexer diagnostic on the rejected character."""
    spec = LEXER_UNEXPECTED_INPUT
    return Diagnostic(
        code=spec.code,
        message=spec.message.format(lexeme=error.lexeme),
        range=error.range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
        line=error.line,
        column=error.column,
    )
