"""
Error handling for the expression parser and evaluator.

Syntax errors are raised while building the tree; DivideByZeroError and
UnknownOperatorError are raised while evaluating it. Both belong to the
same family so a caller only needs to catch ParseError and LexerError.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import Diagnostic, ErrorKind


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    kind: ErrorKind = ErrorKind.PARSE_ERROR
    code: str = "P000"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        message = f"RDParser:: {message}"
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
        self.token = token

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return self.message


class ParenthesesMismatchError(ParseError):
    """An opening parenthesis was never closed."""

    kind = ErrorKind.PARENTHESES_MISMATCH
    code = "P001"

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(
            "Mismatched parentheses in expression",
            location,
            suggestions=["Add a closing parenthesis ')'"]
        )


class UnexpectedParenthesesError(ParseError):
    """Tokens remain after a complete expression was parsed."""

    kind = ErrorKind.UNEXPECTED_PARENTHESES
    code = "P002"

    def __init__(self, token: Optional[Token] = None):
        super().__init__(
            "Unexpected parentheses in expression",
            token.location if token else None,
            token,
            help_text="A parenthesis appears where the expression should already be complete."
        )


class UnexpectedTokenError(ParseError):
    """A token appeared where a literal or '(' was required."""

    kind = ErrorKind.UNEXPECTED_TOKEN
    code = "P003"

    def __init__(self, token: Token):
        super().__init__(
            f"Unexpected token encountered: {token.lexeme}",
            token.location,
            token,
            help_text="Expected an integer, '-' or '(' at this position.",
            suggestions=["Ensure all operators have operands"]
        )


class NestingDepthExceededError(ParseError):
    """Parentheses or negations are nested deeper than the configured limit."""

    kind = ErrorKind.NESTING_DEPTH_EXCEEDED
    code = "P004"

    def __init__(self, max_depth: int, token: Optional[Token] = None):
        self.max_depth = max_depth
        super().__init__(
            f"Expression nesting exceeds maximum depth of {max_depth}",
            token.location if token else None,
            token
        )


class DivideByZeroError(ParseError):
    """The right operand of a division evaluated to zero."""

    kind = ErrorKind.DIVIDE_BY_ZERO
    code = "P005"

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("Division by zero", location)


class UnknownOperatorError(ParseError):
    """A binary node holds an operator the evaluator does not implement."""

    kind = ErrorKind.UNKNOWN_OPERATOR
    code = "P006"

    def __init__(self, operator: object, location: Optional[SourceLocation] = None):
        self.operator = operator
        super().__init__(f"Unknown operator: {operator}", location)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Mismatched parentheses",
    "P002": "Unexpected parentheses",
    "P003": "Unexpected token",
    "P004": "Nesting too deep",
    "P005": "Division by zero",
    "P006": "Unknown operator",
}
