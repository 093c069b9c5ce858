"""
Recursive descent parser for integer arithmetic expressions.

Grammar:
    Expression -> Binary
    Binary     -> Unary (("+" | "-" | "*" | "/") Unary)*
    Unary      -> "-" Unary | Primary
    Primary    -> Literal | "(" Expression ")"

All four binary operators share a single precedence level and associate
to the left, so ``1 + 3 * 4`` is ``(1 + 3) * 4``. Parentheses are the only
way to group differently.

Author: xwest
"""

import logging
from contextlib import contextmanager
from typing import Iterable, Optional

from ..config import ParserConfig
from ..lexer.lexer import Lexer
from ..lexer.tokens import Token, TokenType, BINARY_OPERATORS
from .ast_nodes import Expression, Literal, Unary, Binary, SourceSpan
from .evaluator import evaluate_tree
from .errors import (
    ParenthesesMismatchError, UnexpectedParenthesesError, UnexpectedTokenError,
    NestingDepthExceededError
)


class Parser:
    """
    Recursive descent parser and evaluator.

    Owns its lexer. Every call to ``parse`` or ``parse_tree`` resets the
    cursor and re-tokenizes, so an instance can be reused for any number of
    expressions (but not shared between threads).
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the parser.

        Args:
            config: Pipeline settings; defaults to ``ParserConfig()``
        """
        self.config = config or ParserConfig()
        self.lexer = Lexer(self.config)
        self.current = 0
        self.depth = 0
        self._logger = logging.getLogger("Parser")

    def parse(self, source: str) -> int:
        """
        Parse and evaluate an expression.

        Args:
            source: Expression text

        Returns:
            Integer value of the expression

        Raises:
            LexerError: If tokenization fails
            ParseError: If the expression is malformed or cannot be evaluated
        """
        return evaluate_tree(self.parse_tree(source))

    def parse_tree(self, source: str) -> Expression:
        """
        Parse an expression into its tree without evaluating it.

        Raises:
            LexerError: If tokenization fails
            ParseError: If the expression is malformed
        """
        self.current = 0
        self.depth = 0

        self.lexer.clear()
        self.lexer.tokenize(source)

        expression = self._parse_expression()

        if self.current < self.lexer.token_count:
            # Anything other than a stray ')' is consumed or rejected
            # inside _parse_primary, so leftover tokens mean bad parentheses.
            raise UnexpectedParenthesesError(self.lexer.get_token(self.current))

        self._logger.debug("Parsed %d tokens into %s", self.lexer.token_count,
                           expression.node_type.value)
        return expression

    def _parse_expression(self) -> Expression:
        """Expression -> Binary"""
        return self._parse_binary()

    def _parse_binary(self) -> Expression:
        """Binary -> Unary (("+" | "-" | "*" | "/") Unary)*"""
        left = self._parse_unary()

        while self._match_any(BINARY_OPERATORS):
            operator_token = self._previous()
            right = self._parse_unary()
            left = Binary(
                operator_token.type, left, right,
                SourceSpan(left.span.start, right.span.end)
            )

        return left

    def _parse_unary(self) -> Expression:
        """Unary -> "-" Unary | Primary"""
        if self._match(TokenType.MINUS):
            minus_token = self._previous()
            with self._nested(minus_token):
                operand = self._parse_unary()
            return Unary(operand, SourceSpan(minus_token.location, operand.span.end))

        return self._parse_primary()

    def _parse_primary(self) -> Expression:
        """Primary -> Literal | "(" Expression ")" """
        if self._match(TokenType.INTEGER):
            token = self._previous()
            return Literal(token.value, SourceSpan(token.location, token.location))

        if self._match(TokenType.LEFT_PAREN):
            open_token = self._previous()
            with self._nested(open_token):
                expression = self._parse_expression()

            if not self._match(TokenType.RIGHT_PAREN):
                raise ParenthesesMismatchError(open_token.location)

            return expression

        # Neither a literal nor '(' - report the token at the cursor. After a
        # trailing operator the cursor sits one past the end, so clamp it.
        bad_index = min(self.current, self.lexer.token_count - 1)
        raise UnexpectedTokenError(self.lexer.get_token(bad_index))

    @contextmanager
    def _nested(self, token: Token):
        """Track recursion depth for one level of '(' or unary '-'."""
        if self.depth >= self.config.max_depth:
            raise NestingDepthExceededError(self.config.max_depth, token)

        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    # Utility methods

    def _match(self, token_type: TokenType) -> bool:
        """Consume the current token if it has the given type."""
        if (self.current < self.lexer.token_count and
                self.lexer.get_token(self.current).type == token_type):
            self.current += 1
            return True
        return False

    def _match_any(self, token_types: Iterable[TokenType]) -> bool:
        return any(self._match(token_type) for token_type in token_types)

    def _previous(self) -> Token:
        """Return the most recently consumed token."""
        return self.lexer.get_token(self.current - 1)


def parse_string(source: str, config: Optional[ParserConfig] = None) -> int:
    """
    Convenience function to parse and evaluate an expression.

    Args:
        source: Expression text
        config: Optional pipeline settings

    Returns:
        Integer value of the expression

    Raises:
        LexerError: If tokenization fails
        ParseError: If parsing or evaluation fails
    """
    parser = Parser(config)
    return parser.parse(source)
