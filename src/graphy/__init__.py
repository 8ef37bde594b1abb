"""
graphy - an embeddable expression engine for function plotters.

Parses an arithmetic expression over x and y once, then evaluates the
resulting tree at as many (x, y) points as needed.

    from graphy import create_evaluator, parse

    tree = parse("sinc(x) * y ^ 2")   # raises ParseError on bad input
    f = create_evaluator(tree)
    f(0.0, 3.0)                       # == 9.0
"""

from __future__ import annotations

import logging

from ._version import __version__
from .core import ir
from .core.errors import (
    ErrorContext,
    ErrorKind,
    EvaluationError,
    ExpressionSyntaxError,
    GraphyError,
    LexicalError,
    ParseError,
)
from .core.expression_lang import (
    CONSTANTS,
    FUNCTIONS,
    VARIABLES,
    Evaluator,
    ParseResult,
    create_evaluator,
    evaluate,
    parse_expr,
    tokenize,
    try_parse,
)
from .core.logging import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

parse = parse_expr

__all__ = [
    "__version__",
    "ir",
    "CONSTANTS",
    "FUNCTIONS",
    "VARIABLES",
    "ErrorContext",
    "ErrorKind",
    "Evaluator",
    "EvaluationError",
    "ExpressionSyntaxError",
    "GraphyError",
    "LexicalError",
    "ParseError",
    "ParseResult",
    "create_evaluator",
    "evaluate",
    "parse",
    "parse_expr",
    "setup_logging",
    "tokenize",
    "try_parse",
]
