"""
Expression evaluator for the exprcalc expression language.

Reduces expression AST nodes to a number. Pure evaluation: no I/O, no side
effects, children are always evaluated left before right.

Numeric promotion:
    int op int   -> int for +, - and *
    x / y        -> float (true division)
    float op any -> float
"""

from __future__ import annotations

import math

from exprcalc.core.errors import DivisionByZero, EvalError, NumericOverflow
from exprcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse_expr
from exprcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FloatLiteral,
    IntLiteral,
    UnaryExpr,
    UnaryOp,
)

Number = int | float

# Integer results wider than this cannot be printed in decimal
_MAX_INT_BITS = 14_000


def evaluate(expr: Expr) -> Number:
    """Evaluate an expression tree to a number.

    Args:
        expr: Parsed expression AST.

    Returns:
        An int when only integers meet under +, - and *; a float otherwise.

    Raises:
        DivisionByZero: If any divisor evaluates to zero.
    """
    return _interpret(expr)


def calculate(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Number:
    """Parse and evaluate an expression string in one step."""
    return evaluate(parse_expr(source, max_depth=max_depth))


def _interpret(expr: Expr) -> Number:
    """Post-order walk with an explicit stack.

    Operator chains build trees as tall as the chain is long, so the walk
    never recurses. A node is pushed once to schedule its children and once
    more, marked ready, to combine their values.
    """
    values: list[Number] = []
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, ready = stack.pop()

        if isinstance(node, (IntLiteral, FloatLiteral)):
            values.append(node.value)

        elif isinstance(node, BinaryExpr):
            if ready:
                right = values.pop()
                left = values.pop()
                values.append(_interpret_binary(node, left, right))
            else:
                stack.append((node, True))
                # Left is pushed last so it is evaluated first
                stack.append((node.right, False))
                stack.append((node.left, False))

        elif isinstance(node, UnaryExpr):
            if ready:
                values.append(_interpret_unary(node, values.pop()))
            else:
                stack.append((node, True))
                stack.append((node.operand, False))

        else:
            raise EvalError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _interpret_binary(expr: BinaryExpr, left: Number, right: Number) -> Number:
    """Combine the evaluated operands of a binary expression."""
    try:
        result = _apply(expr, left, right)
    except OverflowError as e:
        raise NumericOverflow(expr) from e
    if isinstance(result, int) and result.bit_length() > _MAX_INT_BITS:
        raise NumericOverflow(expr)
    return result


def _apply(expr: BinaryExpr, left: Number, right: Number) -> Number:
    if expr.op == BinaryOp.ADD:
        return left + right
    if expr.op == BinaryOp.SUB:
        return left - right
    if expr.op == BinaryOp.MULT:
        return left * right
    if expr.op == BinaryOp.DIV:
        if right == 0:
            raise DivisionByZero(expr.right, expr)
        return left / right

    raise EvalError(f"Unknown binary op: {expr.op}")


def _interpret_unary(expr: UnaryExpr, val: Number) -> Number:
    if expr.op == UnaryOp.NEG:
        return -val
    raise EvalError(f"Unknown unary op: {expr.op}")


def format_number(value: Number) -> str:
    """Render a result the way the answer line prints it.

    Integral values print without a fractional part (``4.0`` -> ``4``);
    everything else uses the shortest round-trip decimal form.
    """
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
