"""Lex carriers and entrypoints."""

from colloid.pipeline.entrypoints import run_lex, run_lex_file
from colloid.pipeline.result import LexResult

__all__ = [
    "LexResult",
    "run_lex",
    "run_lex_file",
]
