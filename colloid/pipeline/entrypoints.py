"""Entrypoints that run one scan lifecycle."""

from __future__ import annotations

from pathlib import Path

from colloid.lexer import Scanner
from colloid.pipeline.result import LexResult


def run_lex(text: str) -> LexResult:
    """Tokenize `text` to completion."""
    return LexResult(source_text=text, results=Scanner(text).tokenize())


def run_lex_file(path: str | Path, *, encoding: str = "utf-8") -> LexResult:
    """Read a whole file and tokenize it.

    Line endings are kept as stored so ranges and columns match the file.
    """
    with open(path, encoding=encoding, newline="") as f:
        text = f.read()
    return run_lex(text)
