"""
Type inference for the exprcalc expression language.

Infers an expression's result type statically, following the same
promotion rule the evaluator applies at runtime.
"""

from __future__ import annotations

from exprcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FloatLiteral,
    IntLiteral,
    NumberType,
    UnaryExpr,
)


class ExpressionTypeError(Exception):
    """Type error in an expression."""


def infer_type(expr: Expr) -> NumberType:
    """Infer the result type of an expression.

    Args:
        expr: Expression AST node.

    Returns:
        NumberType.FLOAT if any float literal or division takes part,
        NumberType.INT otherwise.

    Raises:
        ExpressionTypeError: If the node is not an expression.
    """
    # Float wins over int and negation preserves type, so a single float
    # literal or division anywhere in the tree makes the whole result float.
    result = NumberType.INT
    stack: list[Expr] = [expr]

    while stack:
        node = stack.pop()
        if isinstance(node, IntLiteral):
            continue
        if isinstance(node, FloatLiteral):
            result = NumberType.FLOAT
        elif isinstance(node, BinaryExpr):
            if node.op == BinaryOp.DIV:
                result = NumberType.FLOAT
            stack.append(node.left)
            stack.append(node.right)
        elif isinstance(node, UnaryExpr):
            stack.append(node.operand)
        else:
            raise ExpressionTypeError(f"Not an expression: {type(node).__name__}")

    return result
