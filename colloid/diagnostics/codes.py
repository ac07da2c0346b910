"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_INPUT",
    message="Unexpected input: {lexeme}",
    hint="Only parentheses, newlines and whitespace are recognized.",
    severity="error",
    category="lexer",
)
