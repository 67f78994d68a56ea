"""
Indented tree display for expression ASTs.

Produces blocks of the form::

    BinOp {
        left: IntLiteral {
            value: 1
        }
        right: IntLiteral {
            value: 2
        }
        op: Add
    }

A nested node's opening line is inlined after its field name, and fields
appear in construction order with the operator last. The output is for
people to read; nothing parses it back.
"""

from __future__ import annotations

from exprcalc.core.ir.expressions import (
    BinaryExpr,
    Expr,
    FloatLiteral,
    IntLiteral,
    UnaryExpr,
)

DEFAULT_INDENT = 4


def render(expr: Expr, indent: int = DEFAULT_INDENT) -> str:
    """Render an expression tree as an indented block."""
    if indent < 0:
        raise ValueError("indent must be non-negative")
    return "\n".join(_render_lines(expr, indent))


def _render_lines(expr: Expr, indent: int) -> list[str]:
    """Emit output lines in order, walking the tree with an explicit stack.

    Stack entries are either finished lines (str) or a node to open,
    together with its depth and the text leading its opening line.
    """
    lines: list[str] = []
    stack: list[str | tuple[Expr, int, str]] = [(expr, 0, "")]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            lines.append(item)
            continue

        node, depth, lead = item
        pad = " " * (depth * indent)
        inner = " " * ((depth + 1) * indent)

        if isinstance(node, (IntLiteral, FloatLiteral)):
            lines.append(f"{lead}{type(node).__name__} {{")
            lines.append(f"{inner}value: {node.value!r}")
            lines.append(f"{pad}}}")
        elif isinstance(node, BinaryExpr):
            lines.append(f"{lead}BinOp {{")
            stack.append(f"{pad}}}")
            stack.append(f"{inner}op: {node.op.label}")
            stack.append((node.right, depth + 1, f"{inner}right: "))
            stack.append((node.left, depth + 1, f"{inner}left: "))
        elif isinstance(node, UnaryExpr):
            lines.append(f"{lead}UnaryOp {{")
            stack.append(f"{pad}}}")
            stack.append(f"{inner}op: {node.op.label}")
            stack.append((node.operand, depth + 1, f"{inner}operand: "))
        else:
            raise TypeError(f"Cannot render {type(node).__name__}")

    return lines
