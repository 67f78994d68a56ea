"""
Error types for exprcalc tokenizing, parsing, evaluation and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exprcalc.core.ir.expressions import Expr


class ExprCalcError(Exception):
    """Base exception for all exprcalc errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        return self._format_message()

    def _format_message(self) -> str:
        """Format error message with a source snippet if available."""
        if self.context and self.context.source is not None:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    @property
    def position(self) -> int | None:
        return self.context.position if self.context else None

    def attach_source(self, source: str) -> ExprCalcError:
        """Record the source text so the snippet can be rendered."""
        if self.context and self.context.source is None:
            self.context.source = source
        return self


@dataclass
class ErrorContext:
    """
    Location of an error inside an expression.

    Attributes:
        position: 0-based character offset into the source
        source: Full source text, attached once known
    """

    position: int
    source: str | None = None

    def format(self) -> str:
        """
        Format the offending source line with a caret under the position.

        Returns:
            Two lines like::

                  14 * (2 + 3
                             ^
        """
        if self.source is None:
            return f"position {self.position}"

        line_start = self.source.rfind("\n", 0, self.position) + 1
        line_end = self.source.find("\n", self.position)
        if line_end == -1:
            line_end = len(self.source)
        line = self.source[line_start:line_end].rstrip("\r")
        column = self.position - line_start
        return f"  {line}\n  {' ' * column}^"


# ---------------------------------------------------------------------------
# Tokenizer errors
# ---------------------------------------------------------------------------


class LexError(ExprCalcError):
    """
    Raised when source text cannot be split into tokens.

    Examples:
    - Characters outside the expression alphabet
    - Numbers with a dangling decimal point
    """

    pass


class UnrecognizedCharacter(LexError):
    def __init__(self, char: str, position: int) -> None:
        self.char = char
        super().__init__(
            f"Unrecognized character {char!r} at position {position}",
            ErrorContext(position),
        )


class MalformedNumber(LexError):
    """A decimal point that is not followed by any digits, e.g. ``1.``."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        super().__init__(
            f"Unfinished float literal {text!r} at position {position}",
            ErrorContext(position),
        )


# ---------------------------------------------------------------------------
# Parser errors
# ---------------------------------------------------------------------------


class ParseError(ExprCalcError):
    """
    Raised when a token sequence does not match the grammar.

    Examples:
    - Two numbers with no operator between them
    - Unmatched parentheses
    - Operators missing an operand
    """

    pass


class UnexpectedToken(ParseError):
    def __init__(self, found: str, position: int, context: str) -> None:
        self.found = found
        self.expected = context
        super().__init__(
            f"Unexpected token {found!r} at position {position} (expected {context})",
            ErrorContext(position),
        )


class UnexpectedEndOfInput(ParseError):
    def __init__(self, position: int, context: str) -> None:
        self.expected = context
        super().__init__(
            f"Unexpected end of input at position {position} (expected {context})",
            ErrorContext(position),
        )


class LiteralOutOfRange(ParseError):
    """A literal too large to represent, e.g. a float beyond 1.8e308."""

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        shown = text if len(text) <= 20 else text[:17] + "..."
        super().__init__(
            f"Number {shown!r} at position {position} is out of range",
            ErrorContext(position),
        )


class NestingTooDeep(ParseError):
    def __init__(self, position: int, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"Expression nests deeper than {limit} levels at position {position}",
            ErrorContext(position),
        )


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------


class EvalError(ExprCalcError):
    """Raised when a well-formed tree cannot be reduced to a number."""

    pass


class DivisionByZero(EvalError):
    def __init__(self, divisor: Expr, expr: Expr) -> None:
        self.divisor = divisor
        self.expr = expr
        super().__init__(f"Division by zero: {divisor} evaluates to 0 in {expr}")


class NumericOverflow(EvalError):
    def __init__(self, expr: Expr) -> None:
        self.expr = expr
        super().__init__(f"Numeric overflow evaluating {expr}")


class ConfigError(ExprCalcError):
    """
    Raised when exprcalc.toml cannot be loaded.

    Examples:
    - Explicit config path that does not exist
    - Invalid TOML syntax
    - Unknown keys or out-of-range values
    """

    pass
