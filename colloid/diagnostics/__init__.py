"""Diagnostics."""

from colloid.diagnostics.codes import LEXER_UNEXPECTED_INPUT, DiagnosticSpec
from colloid.diagnostics.diagnostic import Diagnostic, Severity
from colloid.diagnostics.report import collect_diagnostics, diagnostic_from_lex_error, has_errors

__all__ = [
    "LEXER_UNEXPECTED_INPUT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "diagnostic_from_lex_error",
    "has_errors",
]
