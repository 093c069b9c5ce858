"""
Expression Lexer Package

Implements the lexical analyzer (tokenizer) for integer arithmetic
expressions.

Key Features:
- Single character-by-character scan, no regular expressions
- All invalid character runs reported in one error
- Source location tracking for diagnostics
- Optional fixed-width literal checking

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string
from .errors import (
    ErrorKind, Diagnostic, LexerError, InvalidTokenError, EmptyExpressionError,
    TokenIndexOutOfRangeError, LiteralOverflowError
)

__all__ = [
    "Lexer",
    "tokenize_string",
    "Token",
    "TokenType",
    "SourceLocation",
    "ErrorKind",
    "Diagnostic",
    "LexerError",
    "InvalidTokenError",
    "EmptyExpressionError",
    "TokenIndexOutOfRangeError",
    "LiteralOverflowError",
]
