"""
Tokenizer for the exprcalc expression language.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from exprcalc.core.errors import MalformedNumber, UnrecognizedCharacter


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    INT_LITERAL = auto()
    FLOAT_LITERAL = auto()

    # Operators
    ADD = auto()
    SUB = auto()
    MULT = auto()
    DIV = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    kind: TokenKind
    value: str
    pos: int

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "pos", pos)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.pos) == (other.kind, other.value, other.pos)

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.pos))

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"

    def describe(self) -> str:
        """Human-readable lexeme for error messages."""
        return self.value if self.kind != TokenKind.EOF else "end of input"


# ASCII digits only; str.isdigit() also accepts superscripts that int() rejects
_DIGITS_RE = re.compile(r"[0-9]+")

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    The list always ends with a single EOF token positioned at len(source).

    Raises:
        UnrecognizedCharacter: For any character outside the expression alphabet.
        MalformedNumber: For a decimal point with no digits after it.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        # Skip whitespace
        if c.isspace():
            i += 1
            continue

        # Numbers: digits, optionally "." and more digits
        m = _DIGITS_RE.match(source, i)
        if m:
            i, tok = _read_number(source, i, m.end())
            tokens.append(tok)
            continue

        kind = _SINGLE_CHAR_TOKENS.get(c)
        if kind is not None:
            tokens.append(Token(kind, c, i))
            i += 1
            continue

        raise UnrecognizedCharacter(c, i)

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens


def _read_number(source: str, start: int, end: int) -> tuple[int, Token]:
    """Read an integer or decimal literal whose integer part spans start..end."""
    if end < len(source) and source[end] == ".":
        frac = _DIGITS_RE.match(source, end + 1)
        if frac is None:
            raise MalformedNumber(source[start : end + 1], start)
        return frac.end(), Token(TokenKind.FLOAT_LITERAL, source[start : frac.end()], start)
    return end, Token(TokenKind.INT_LITERAL, source[start:end], start)
