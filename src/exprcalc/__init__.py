"""
exprcalc - arithmetic expression parser and tree-walking evaluator.

Parses integers, decimals, + - * /, unary minus and parentheses into a
syntax tree and reduces the tree to a number.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    EvalError,
    ExprCalcError,
    LexError,
    ParseError,
)
from .core.expression_lang import calculate, evaluate, parse_expr, render

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ExprCalcError",
    "LexError",
    "ParseError",
    "EvalError",
    "calculate",
    "evaluate",
    "parse_expr",
    "render",
]
