"""
Expression lexer - turns expression text into a flat sequence of tokens.

Runs in two passes over the text. The first collects every run of
characters that can never appear in an expression so they can all be
reported together; the second is a plain classify-and-consume scan.

Author: xwest
"""

import logging
from typing import List, Optional, Tuple

from ..config import ParserConfig
from .tokens import (
    Token, TokenType, SourceLocation, OPERATORS, DIGITS, WHITESPACE, ALLOWED_CHARS
)
from .errors import (
    InvalidTokenError, EmptyExpressionError, TokenIndexOutOfRangeError,
    LiteralOverflowError, max_literal_value
)


class Lexer:
    """
    Lexical analyzer for arithmetic expressions.

    A single instance can be reused: every call to ``tokenize`` starts from
    a clean state, and the previous token sequence is dropped.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the lexer.

        Args:
            config: Pipeline settings; defaults to ``ParserConfig()``
        """
        self.config = config or ParserConfig()
        self.source = ""
        self.pos = 0
        self.tokens: Tuple[Token, ...] = ()
        self._logger = logging.getLogger("Lexer")

    def tokenize(self, source: str) -> Tuple[Token, ...]:
        """
        Tokenize an expression.

        Args:
            source: Expression text

        Returns:
            Tuple of tokens in source order

        Raises:
            InvalidTokenError: If the text contains disallowed characters
            EmptyExpressionError: If no tokens were found
            LiteralOverflowError: If a literal exceeds the configured width
        """
        self.clear()
        self.source = source

        invalid_runs = self._find_invalid_runs()
        if invalid_runs:
            first_offset = invalid_runs[0][0]
            raise InvalidTokenError(
                [run for _, run in invalid_runs],
                self._location(first_offset)
            )

        tokens: List[Token] = []
        while self.pos < len(self.source):
            if self.source[self.pos] in WHITESPACE:
                self._advance()
                continue

            tokens.append(self._next_token())

        if not tokens:
            raise EmptyExpressionError(self._location(0))

        self.tokens = tuple(tokens)
        self._logger.debug("Tokenized %r into %d tokens", source, len(self.tokens))
        return self.tokens

    def clear(self):
        """Drop the current token sequence and reset the scan position."""
        self.source = ""
        self.pos = 0
        self.tokens = ()

    def get_token(self, index: int) -> Token:
        """
        Fetch a token by index.

        Raises:
            TokenIndexOutOfRangeError: If index is outside [0, token_count)
        """
        if index < 0 or index >= len(self.tokens):
            raise TokenIndexOutOfRangeError(index, len(self.tokens))

        return self.tokens[index]

    @property
    def token_count(self) -> int:
        return len(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def _find_invalid_runs(self) -> List[Tuple[int, str]]:
        """Collect (offset, text) for each maximal run of disallowed characters."""
        runs = []
        run_start = None

        for offset, char in enumerate(self.source):
            if char not in ALLOWED_CHARS:
                if run_start is None:
                    run_start = offset
                continue

            if run_start is not None:
                runs.append((run_start, self.source[run_start:offset]))
                run_start = None

        if run_start is not None:
            runs.append((run_start, self.source[run_start:]))

        return runs

    def _next_token(self) -> Token:
        """Consume and return the token starting at the current position."""
        start_pos = self.pos
        current_char = self.source[self.pos]

        if current_char in DIGITS:
            return self._tokenize_integer(start_pos)

        token_type = OPERATORS.get(current_char)
        if token_type is None:
            # The invalid-character pass has already rejected anything else
            raise InvalidTokenError([current_char], self._location(start_pos))

        self._advance()
        return Token(token_type, current_char, None, self._location(start_pos))

    def _tokenize_integer(self, start_pos: int) -> Token:
        """Tokenize a run of decimal digits."""
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        location = self._location(start_pos)
        bits = self.config.integer_bits

        try:
            value = int(lexeme)
        except ValueError:
            # Interpreter digit limit for int() conversion
            raise LiteralOverflowError(lexeme, location, bits)

        if bits is not None and value > max_literal_value(bits):
            raise LiteralOverflowError(lexeme, location, bits)

        return Token(TokenType.INTEGER, lexeme, value, location)

    def _advance(self):
        """Advance position by one character."""
        if self.pos < len(self.source):
            self.pos += 1

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation(self.config.filename, 1, offset + 1, offset)


def tokenize_string(source: str, config: Optional[ParserConfig] = None) -> Tuple[Token, ...]:
    """
    Convenience function to tokenize an expression.

    Args:
        source: Expression text
        config: Optional pipeline settings

    Returns:
        Tuple of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(config)
    return lexer.tokenize(source)
