"""
graphy expression language.

Tokenizer, Pratt parser and evaluator for arithmetic expressions over the
variables x and y.

Usage:
    from graphy.core.expression_lang import create_evaluator, parse_expr

    tree = parse_expr("sin x * y^2")
    f = create_evaluator(tree)
    f(1.0, 2.0)  # == sin(1) * 4
"""

from graphy.core.expression_lang.evaluator import Evaluator, create_evaluator, evaluate
from graphy.core.expression_lang.parser import ParseResult, parse_expr, try_parse
from graphy.core.expression_lang.symbols import CONSTANTS, FUNCTIONS, VARIABLES
from graphy.core.expression_lang.tokenizer import tokenize

__all__ = [
    "CONSTANTS",
    "Evaluator",
    "FUNCTIONS",
    "ParseResult",
    "VARIABLES",
    "create_evaluator",
    "evaluate",
    "parse_expr",
    "tokenize",
    "try_parse",
]
