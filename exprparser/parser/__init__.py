"""
Expression Parser Package

Implements a recursive descent parser that builds an expression tree from
lexer tokens, and the evaluator that reduces the tree to an integer.

Key Features:
- One routine per grammar rule
- Equal precedence, left-associative binary operators
- Immutable tree nodes with source spans
- Stack-based evaluation with truncating integer division

Author: xwest
"""

from .ast_nodes import (
    ASTNodeType, SourceSpan, Literal, Unary, Binary, Expression, format_tree
)
from .parser import Parser, parse_string
from .evaluator import evaluate_tree, truncating_divide
from .errors import (
    ParseError, ParenthesesMismatchError, UnexpectedParenthesesError,
    UnexpectedTokenError, NestingDepthExceededError, DivideByZeroError,
    UnknownOperatorError
)

__all__ = [
    # Core parser
    "Parser",
    "parse_string",

    # AST nodes
    "ASTNodeType", "SourceSpan", "Literal", "Unary", "Binary", "Expression",
    "format_tree",

    # Evaluation
    "evaluate_tree", "truncating_divide",

    # Error handling
    "ParseError", "ParenthesesMismatchError", "UnexpectedParenthesesError",
    "UnexpectedTokenError", "NestingDepthExceededError", "DivideByZeroError",
    "UnknownOperatorError",
]
