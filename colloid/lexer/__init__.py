"""Lexer."""

from colloid.lexer.errors import LexError, TokenResult, UnexpectedInput
from colloid.lexer.lexer import Scanner, ScannerCheckpoint, dump_tokens, format_token_result
from colloid.lexer.tokens import Token, TokenKind

__all__ = [
    "LexError",
    "Scanner",
    "ScannerCheckpoint",
    "Token",
    "TokenKind",
    "TokenResult",
    "UnexpectedInput",
    "dump_tokens",
    "format_token_result",
]
