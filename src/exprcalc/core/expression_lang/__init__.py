"""
exprcalc arithmetic expression language.

Tokenizer, parser, evaluator, renderer, and type checker for arithmetic
over integers and decimals with + - * /, unary minus and parentheses.

Usage:
    from exprcalc.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("14 * (2 + 3)")
    result = evaluate(expr)
    # result == 70
"""

from exprcalc.core.expression_lang.evaluator import calculate, evaluate, format_number
from exprcalc.core.expression_lang.parser import parse, parse_expr
from exprcalc.core.expression_lang.renderer import render
from exprcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from exprcalc.core.expression_lang.type_checker import infer_type

__all__ = [
    "Token",
    "TokenKind",
    "calculate",
    "evaluate",
    "format_number",
    "infer_type",
    "parse",
    "parse_expr",
    "render",
    "tokenize",
]
