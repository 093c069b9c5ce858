"""
Abstract Syntax Tree node definitions for arithmetic expressions.

The tree is a closed set of three node kinds. Nodes are immutable and own
their children outright; there are no parent links, so a tree never
contains a cycle.

Author: xwest
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from ..lexer.tokens import SourceLocation, TokenType


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""
    LITERAL = "Literal"
    UNARY_OP = "UnaryOp"
    BINARY_OP = "BinaryOp"


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.column}"


@dataclass(frozen=True)
class Literal:
    """Integer literal."""
    value: int
    span: SourceSpan = field(compare=False, repr=False)

    node_type = ASTNodeType.LITERAL

    def children(self) -> List['Expression']:
        return []


@dataclass(frozen=True)
class Unary:
    """Negation of its operand."""
    operand: 'Expression'
    span: SourceSpan = field(compare=False, repr=False)

    node_type = ASTNodeType.UNARY_OP

    def children(self) -> List['Expression']:
        return [self.operand]


@dataclass(frozen=True)
class Binary:
    """Binary arithmetic operation; operator is the token type that produced it."""
    operator: TokenType
    left: 'Expression'
    right: 'Expression'
    span: SourceSpan = field(compare=False, repr=False)

    node_type = ASTNodeType.BINARY_OP

    def children(self) -> List['Expression']:
        return [self.left, self.right]


Expression = Union[Literal, Unary, Binary]


def format_tree(root: Expression) -> str:
    """
    Render a tree as a fully parenthesised expression, e.g. ``((1 + 3) * 4)``.

    Uses an explicit work stack so left-deep trees from long operator chains
    render without hitting the recursion limit.
    """
    rendered: List[str] = []
    pending: List[Tuple[Expression, bool]] = [(root, False)]

    while pending:
        node, children_ready = pending.pop()

        if isinstance(node, Literal):
            rendered.append(str(node.value))

        elif not children_ready:
            pending.append((node, True))
            for child in reversed(node.children()):
                pending.append((child, False))

        elif isinstance(node, Unary):
            rendered.append(f"-{rendered.pop()}")

        else:
            right = rendered.pop()
            left = rendered.pop()
            symbol = OPERATOR_SYMBOLS.get(node.operator, node.operator.name)
            rendered.append(f"({left} {symbol} {right})")

    return rendered.pop()


OPERATOR_SYMBOLS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.MULTIPLY: "*",
    TokenType.DIVIDE: "/",
}
