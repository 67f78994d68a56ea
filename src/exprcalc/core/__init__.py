"""Core exprcalc functionality: IR, tokenizer, parser, evaluator, configuration."""

from . import ir
from .config import ExprCalcConfig, load_config
from .errors import (
    ConfigError,
    DivisionByZero,
    ErrorContext,
    EvalError,
    ExprCalcError,
    LexError,
    LiteralOutOfRange,
    MalformedNumber,
    NestingTooDeep,
    NumericOverflow,
    ParseError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnrecognizedCharacter,
)

__all__ = [
    "ir",
    "ExprCalcConfig",
    "load_config",
    "ConfigError",
    "DivisionByZero",
    "ErrorContext",
    "EvalError",
    "ExprCalcError",
    "LexError",
    "LiteralOutOfRange",
    "MalformedNumber",
    "NestingTooDeep",
    "NumericOverflow",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "UnrecognizedCharacter",
]
