"""
Driver for the expression pipeline.

Runs tokenize -> parse -> evaluate and turns any failure into an
EvaluationResult instead of an exception, so callers can report errors
and choose their own fallback value.

Author: xwest
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .config import ParserConfig
from .lexer.errors import ErrorKind, LexerError
from .parser.errors import ParseError
from .parser.parser import Parser


_logger = logging.getLogger("Driver")


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one expression."""
    expression: str
    success: bool
    value: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.success

    def value_or(self, fallback: int) -> int:
        """Return the value, or ``fallback`` if evaluation failed."""
        return self.value if self.success else fallback


def evaluate(expression: str, config: Optional[ParserConfig] = None,
             parser: Optional[Parser] = None) -> EvaluationResult:
    """
    Evaluate an expression without raising for expression errors.

    Args:
        expression: Expression text
        config: Pipeline settings, used when no parser is supplied
        parser: Existing parser to reuse

    Returns:
        EvaluationResult describing the value or the failure
    """
    parser = parser or Parser(config)

    try:
        value = parser.parse(expression)
    except (LexerError, ParseError) as e:
        _logger.debug("Evaluation of %r failed: %s", expression, e.kind.value)
        return EvaluationResult(
            expression=expression,
            success=False,
            error_kind=e.kind,
            message=str(e),
        )

    return EvaluationResult(
        expression=expression,
        success=True,
        value=value,
        message=f"{expression} = {format_value(value)}",
    )


def format_value(value: int) -> str:
    """
    Render a result for display.

    Python refuses to convert integers above a configured digit count to
    text, so such values are described by their size instead.
    """
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit integer>"
