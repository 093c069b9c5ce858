"""
Token definitions for the expression lexer.

The expression language is deliberately tiny: non-negative integer literals,
the four arithmetic operators and parentheses. Whitespace separates tokens
but never produces one.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    """Enumeration of all token types in an arithmetic expression."""

    # Punctuation
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )

    # Arithmetic operators
    MINUS = auto()                  # - (subtraction and negation)
    PLUS = auto()                   # +
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /

    # Literals
    INTEGER = auto()                # 42


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    Expressions are single-line, but the line is kept so diagnostics read
    the same way as any other compiler output.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of expression

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Contains the token type, lexeme (raw text), semantic value and source
    location. Only INTEGER tokens carry a value.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Optional[int]            # Integer value for INTEGER, otherwise None
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")


# Single-character tokens, keyed by their source text
OPERATORS = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

# Operators accepted between two operands. All share one precedence level.
BINARY_OPERATORS = (
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
)

DIGITS = frozenset("0123456789")

WHITESPACE = frozenset(" \t")

# Every character that may appear anywhere in an expression
ALLOWED_CHARS = DIGITS | WHITESPACE | frozenset(OPERATORS)
