"""
Tree evaluation for arithmetic expressions.

Evaluation is a post-order walk driven by an explicit work stack rather
than recursion: a long operator chain such as ``1+1+...+1`` builds a
left-deep tree whose height grows with the input length.

Author: xwest
"""

import operator
from typing import Callable, Dict, List, Tuple

from ..lexer.tokens import TokenType
from .ast_nodes import Expression, Literal, Unary, Binary
from .errors import DivideByZeroError, UnknownOperatorError


def truncating_divide(left: int, right: int) -> int:
    """Integer division rounding toward zero (Python's // rounds down)."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


OPERATIONS: Dict[TokenType, Callable[[int, int], int]] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.MULTIPLY: operator.mul,
    TokenType.DIVIDE: truncating_divide,
}


def evaluate_tree(root: Expression) -> int:
    """
    Reduce an expression tree to its integer value.

    The left operand of every binary node is fully evaluated before its
    right operand.

    Raises:
        DivideByZeroError: If a divisor evaluates to zero
        UnknownOperatorError: If a binary node holds an unsupported operator
    """
    values: List[int] = []
    pending: List[Tuple[Expression, bool]] = [(root, False)]

    while pending:
        node, operands_ready = pending.pop()

        if isinstance(node, Literal):
            values.append(node.value)

        elif isinstance(node, Unary):
            if operands_ready:
                values.append(-values.pop())
            else:
                pending.append((node, True))
                pending.append((node.operand, False))

        elif isinstance(node, Binary):
            if operands_ready:
                right = values.pop()
                left = values.pop()
                values.append(_apply_operator(node, left, right))
            else:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))

        else:
            raise TypeError(f"Not an expression node: {node!r}")

    return values.pop()


def _apply_operator(node: Binary, left: int, right: int) -> int:
    operation = OPERATIONS.get(node.operator)
    if operation is None:
        raise UnknownOperatorError(node.operator, node.span.start)

    if node.operator == TokenType.DIVIDE and right == 0:
        raise DivideByZeroError(node.span.start)

    return operation(left, right)
