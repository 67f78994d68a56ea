"""
Expression types for the exprcalc IR.

Supports:
- Integer and decimal literals: 42, 3.14
- Arithmetic: +, -, *, /
- Unary negation: -x
"""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Expression type system
# ---------------------------------------------------------------------------


class NumberType(StrEnum):
    """Types that expressions can evaluate to."""

    INT = "int"
    FLOAT = "float"


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MULT = "*"
    DIV = "/"

    @property
    def label(self) -> str:
        """Display name used by the tree renderer."""
        return _OP_LABELS[self.value]


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    NEG = "-"

    @property
    def label(self) -> str:
        return _OP_LABELS[self.value]


_OP_LABELS = {"+": "Add", "-": "Sub", "*": "Mult", "/": "Div"}


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class IntLiteral(BaseModel):
    """An integer constant, e.g. ``3`` or ``100``."""

    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True, strict=True)

    def __str__(self) -> str:
        return str(self.value)


class FloatLiteral(BaseModel):
    """A decimal constant, e.g. ``3.14`` or ``1.234``."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    @field_validator("value")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("float literal must be finite")
        return v

    def __str__(self) -> str:
        return repr(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    right: Expr
    op: BinaryOp

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return to_infix(self)


class UnaryExpr(BaseModel):
    """Unary operation: op operand. Only negation exists."""

    operand: Expr
    op: UnaryOp = UnaryOp.NEG

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return to_infix(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = IntLiteral | FloatLiteral | BinaryExpr | UnaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
UnaryExpr.model_rebuild()


def expression_depth(expr: Expr) -> int:
    """Number of operator levels in the tree; a lone literal has depth 0.

    Walks with an explicit stack so that very deep trees can be measured
    before anything recursive touches them.
    """
    deepest = 0
    stack: list[tuple[Expr, int]] = [(expr, 0)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(node, BinaryExpr):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        elif isinstance(node, UnaryExpr):
            stack.append((node.operand, depth + 1))
    return deepest


def to_infix(expr: Expr) -> str:
    """Fully parenthesized infix text, e.g. ``((8 - 3) - 2)`` or ``-(1 + 2)``.

    Pending output is kept on a stack of strings and nodes so that long
    operator chains do not recurse through ``__str__``.
    """
    parts: list[str] = []
    stack: list[str | Expr] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, BinaryExpr):
            stack.extend([")", item.right, f" {item.op.value} ", item.left, "("])
        elif isinstance(item, UnaryExpr):
            stack.extend([item.operand, item.op.value])
        else:
            parts.append(str(item))
    return "".join(parts)
