"""
Expression Parser Package

Evaluates integer arithmetic expressions with parentheses, unary negation
and the four basic operators. Unlike conventional arithmetic, all binary
operators share one precedence level and apply left to right:

    >>> from exprparser import Parser
    >>> Parser().parse("1 + 3 * 4")
    16

Architecture:
    exprparser/
    ├── lexer/           # Tokenization and lexical analysis
    ├── parser/          # Recursive descent parsing, AST and evaluation
    ├── config.py        # Pipeline settings
    ├── driver.py        # Error-to-result conversion
    └── cli.py           # Command-line front end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .config import ParserConfig
from .lexer import Lexer, Token, TokenType, ErrorKind, LexerError
from .parser import Parser, ParseError, evaluate_tree, parse_string
from .driver import EvaluationResult, evaluate

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "ParserConfig",
    "Token",
    "TokenType",

    # Functions
    "evaluate",
    "evaluate_tree",
    "parse_string",
    "EvaluationResult",

    # Errors
    "ErrorKind",
    "LexerError",
    "ParseError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
