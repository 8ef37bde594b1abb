"""Core graphy functionality: expression tree, tokenizer, parser, evaluator, errors."""

from . import ir
from .errors import (
    ErrorContext,
    ErrorKind,
    EvaluationError,
    ExpressionSyntaxError,
    GraphyError,
    LexicalError,
    ParseError,
)
from .logging import setup_logging

__all__ = [
    "ir",
    "ErrorContext",
    "ErrorKind",
    "EvaluationError",
    "ExpressionSyntaxError",
    "GraphyError",
    "LexicalError",
    "ParseError",
    "setup_logging",
]
