"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from colloid.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and its consumers."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        position = f"{self.line}:{self.column}: " if self.line is not None else ""
        return f"{position}{self.severity}[{self.code}] {self.message}"
