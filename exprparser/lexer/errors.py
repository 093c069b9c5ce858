"""
Error handling for the expression lexer.

Every error raised by the package carries a Diagnostic with source location
information and an ErrorKind, so callers can classify failures without
matching on message text.

Author: xwest
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


class ErrorKind(Enum):
    """Classification of every failure the pipeline can report."""

    # Lexical errors
    LEXER_ERROR = "LexerError"
    INVALID_TOKEN = "InvalidToken"
    EMPTY_EXPRESSION = "EmptyExpression"
    TOKEN_INDEX_OUT_OF_RANGE = "TokenIndexOutOfRange"
    LITERAL_OVERFLOW = "LiteralOverflow"

    # Syntax and evaluation errors
    PARSE_ERROR = "ParseError"
    PARENTHESES_MISMATCH = "ParenthesesMismatch"
    UNEXPECTED_PARENTHESES = "UnexpectedParentheses"
    UNEXPECTED_TOKEN = "UnexpectedToken"
    NESTING_DEPTH_EXCEEDED = "NestingDepthExceeded"
    DIVIDE_BY_ZERO = "DivideByZero"
    UNKNOWN_OPERATOR = "UnknownOperator"


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a fatal error.

    Subclasses fix the kind and code; the message is prefixed with
    ``Lexer::`` so the failing stage is obvious in plain output.
    """

    kind: ErrorKind = ErrorKind.LEXER_ERROR
    code: str = "L000"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        message = f"Lexer:: {message}"
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return self.message


class InvalidTokenError(LexerError):
    """The expression contains characters outside the allowed set."""

    kind = ErrorKind.INVALID_TOKEN
    code = "L001"

    def __init__(self, tokens: List[str], location: Optional[SourceLocation] = None):
        self.tokens = list(tokens)
        super().__init__(
            f"Invalid token(s) detected in expression: {', '.join(self.tokens)}",
            location,
            help_text="Expressions may only contain digits, '+', '-', '*', '/', "
                      "parentheses, spaces and tabs."
        )


class EmptyExpressionError(LexerError):
    """No tokens could be extracted from the expression."""

    kind = ErrorKind.EMPTY_EXPRESSION
    code = "L002"

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("Empty expression is invalid", location)


class TokenIndexOutOfRangeError(LexerError):
    """A token was requested outside the bounds of the token sequence."""

    kind = ErrorKind.TOKEN_INDEX_OUT_OF_RANGE
    code = "L003"

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Token index is out of range: {index} (token count {count})")


class LiteralOverflowError(LexerError):
    """An integer literal does not fit the configured integer width."""

    kind = ErrorKind.LITERAL_OVERFLOW
    code = "L004"

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        bits: Optional[int] = None
    ):
        self.lexeme = lexeme
        self.bits = bits
        if bits is not None:
            help_text = f"Literals must not exceed {max_literal_value(bits)} with {bits}-bit integers."
        else:
            help_text = "The literal has too many digits to convert."

        shown = lexeme if len(lexeme) <= 40 else f"{lexeme[:37]}..."
        super().__init__(f"Integer literal out of range: {shown}", location, help_text=help_text)


def max_literal_value(bits: int) -> int:
    """Largest literal representable by a signed integer of the given width."""
    return (1 << (bits - 1)) - 1


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Empty expression",
    "L003": "Token index out of range",
    "L004": "Number literal overflow",
}
