"""
exprcalc Intermediate Representation (IR) types.

All types are re-exported from this package for convenience.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FloatLiteral,
    IntLiteral,
    NumberType,
    UnaryExpr,
    UnaryOp,
    expression_depth,
    to_infix,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "FloatLiteral",
    "IntLiteral",
    "NumberType",
    "UnaryExpr",
    "UnaryOp",
    "expression_depth",
    "to_infix",
]
