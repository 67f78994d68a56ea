"""
Recursive descent parser for the exprcalc expression language.

Grammar (precedence low to high):
    expr        → mult_expr (("+"|"-") mult_expr)*
    mult_expr   → entity (("*"|"/") entity)*
    entity      → INT | FLOAT | "-" entity | "(" expr ")"

Each level folds its operands to the left, so chains such as ``8 - 3 - 2``
group as ``(8 - 3) - 2``. Deeper levels bind tighter; a parenthesised
expression re-enters ``expr`` from ``entity``.
"""

from __future__ import annotations

import logging
import math

from exprcalc.core.errors import (
    LexError,
    LiteralOutOfRange,
    NestingTooDeep,
    ParseError,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from exprcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from exprcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FloatLiteral,
    IntLiteral,
    UnaryExpr,
    UnaryOp,
    expression_depth,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 200

# Each level of parentheses costs three interpreter frames while parsing
MAX_DEPTH_LIMIT = 250

_ADDITIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.ADD: BinaryOp.ADD,
    TokenKind.SUB: BinaryOp.SUB,
}

_MULTIPLICATIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.MULT: BinaryOp.MULT,
    TokenKind.DIV: BinaryOp.DIV,
}


class _Parser:
    """Recursive descent parser over a token list with a single cursor."""

    def __init__(self, tokens: list[Token], max_depth: int) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.pos = 0
        self.max_depth = max_depth
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind, context: str) -> Token:
        if self.current.kind != kind:
            raise self.error(context)
        return self.advance()

    def error(self, context: str) -> ParseError:
        """Build the error for a rule that cannot match the current token."""
        tok = self.current
        if tok.kind == TokenKind.EOF:
            return UnexpectedEndOfInput(tok.pos, context)
        return UnexpectedToken(tok.value, tok.pos, context)

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """mult_expr (('+' | '-') mult_expr)*"""
        left = self.parse_mult_expr()
        while self.current.kind in _ADDITIVE_OPS:
            op = _ADDITIVE_OPS[self.advance().kind]
            right = self.parse_mult_expr()
            left = BinaryExpr(left=left, right=right, op=op)
        return left

    def parse_mult_expr(self) -> Expr:
        """entity (('*' | '/') entity)*"""
        left = self.parse_entity()
        while self.current.kind in _MULTIPLICATIVE_OPS:
            op = _MULTIPLICATIVE_OPS[self.advance().kind]
            right = self.parse_entity()
            left = BinaryExpr(left=left, right=right, op=op)
        return left

    def parse_entity(self) -> Expr:
        """INT | FLOAT | '-' entity | '(' expr ')'"""
        tok = self.current

        if tok.kind in (TokenKind.INT_LITERAL, TokenKind.FLOAT_LITERAL):
            self.advance()
            return _literal(tok)

        if tok.kind == TokenKind.SUB:
            self.advance()
            self._enter(tok)
            operand = self.parse_entity()
            self.depth -= 1
            return UnaryExpr(op=UnaryOp.NEG, operand=operand)

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            self._enter(tok)
            expr = self.parse_expr()
            self.expect(TokenKind.RPAREN, "closing parenthesis")
            self.depth -= 1
            return expr

        raise self.error("entity")

    def _enter(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(tok.pos, self.max_depth)


def _literal(tok: Token) -> IntLiteral | FloatLiteral:
    """Convert a numeric token to a leaf node."""
    try:
        if tok.kind == TokenKind.INT_LITERAL:
            return IntLiteral(value=int(tok.value))
        value = float(tok.value)
    except ValueError as e:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise LiteralOutOfRange(tok.value, tok.pos) from e
    if not math.isfinite(value):
        raise LiteralOutOfRange(tok.value, tok.pos)
    return FloatLiteral(value=value)


def parse(tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse a token list into an AST.

    Args:
        tokens: Output of tokenize(), terminated by an EOF token.
        max_depth: Limit on nesting of parentheses and unary minus. Operator
            chains are parsed by iteration and do not count against it.

    Returns:
        Root node of the parsed expression.

    Raises:
        UnexpectedToken: If a token cannot start or continue the rule being parsed.
        UnexpectedEndOfInput: If tokens run out mid-rule.
        NestingTooDeep: If the expression exceeds max_depth.
    """
    parser = _Parser(tokens, max_depth)
    try:
        expr = parser.parse_expr()
    except RecursionError as e:
        # max_depth set beyond what the interpreter stack holds
        raise NestingTooDeep(parser.current.pos, max_depth) from e

    # Ensure all tokens consumed
    if parser.current.kind != TokenKind.EOF:
        raise parser.error("end of expression")

    logger.debug(
        "Parsed %d tokens into %s of depth %d",
        len(tokens),
        type(expr).__name__,
        expression_depth(expr),
    )
    return expr


def parse_expr(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "14 * (2 + 3)")
        max_depth: See parse().

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the expression is invalid.
        LexError: If tokenization fails.
    """
    try:
        return parse(tokenize(source), max_depth=max_depth)
    except (ParseError, LexError) as e:
        e.attach_source(source)
        raise
