"""
Expression evaluator for the graphy expression language.

Evaluates expression trees for concrete values of x and y. Pure evaluation:
no I/O, no mutation of the tree, no shared mutable state, so one tree may be
evaluated concurrently from several threads. Arithmetic follows IEEE-754:
division by zero gives an infinity or NaN rather than raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from graphy.core.errors import EvaluationError
from graphy.core.expression_lang import numeric
from graphy.core.expression_lang.symbols import FUNCTIONS
from graphy.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    Literal,
    UnaryExpr,
    UnaryOp,
    Variable,
    VariableRef,
)

logger = logging.getLogger(__name__)

Evaluator = Callable[[float, float], float]

_BINARY: dict[BinaryOp, Callable[[float, float], float]] = {
    BinaryOp.ADD: lambda a, b: a + b,
    BinaryOp.SUB: lambda a, b: a - b,
    BinaryOp.MUL: lambda a, b: a * b,
    BinaryOp.DIV: numeric.divide,
    BinaryOp.POW: numeric.power,
}


def evaluate(expr: Expr, x: float, y: float) -> float:
    """Evaluate a tree for one (x, y) pair.

    Args:
        expr: Parsed expression tree.
        x: Value bound to the variable ``x``.
        y: Value bound to the variable ``y``.

    Returns:
        The computed value.

    Raises:
        EvaluationError: If the tree is malformed (missing child or unknown
            node). Never raised for a tree returned by ``parse_expr``.
    """
    return _interpret(expr, x, y)


def create_evaluator(expr: Expr) -> Evaluator:
    """Return a reusable ``(x, y) -> value`` function for ``expr``."""

    def evaluator(x: float, y: float) -> float:
        return _interpret(expr, x, y)

    return evaluator


def _interpret(expr: Expr | None, x: float, y: float) -> float:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, VariableRef):
        if expr.name == Variable.X:
            return x
        if expr.name == Variable.Y:
            return y
        raise _malformed(f"Unknown variable: {expr.name!r}")

    if isinstance(expr, UnaryExpr):
        return _interpret_unary(expr, x, y)

    if isinstance(expr, BinaryExpr):
        return _interpret_binary(expr, x, y)

    if isinstance(expr, FuncCall):
        return _interpret_func_call(expr, x, y)

    if expr is None:
        raise _malformed("Missing operand in expression tree")

    raise _malformed(f"Unknown expression type: {type(expr).__name__}")


def _interpret_unary(expr: UnaryExpr, x: float, y: float) -> float:
    """Evaluate a unary expression."""
    val = _interpret(getattr(expr, "operand", None), x, y)
    if expr.op == UnaryOp.POS:
        return val
    if expr.op == UnaryOp.NEG:
        return -val
    raise _malformed(f"Unknown unary op: {expr.op}")


def _interpret_binary(expr: BinaryExpr, x: float, y: float) -> float:
    """Evaluate a binary expression."""
    apply = _BINARY.get(expr.op)
    if apply is None:
        raise _malformed(f"Unknown binary op: {expr.op}")
    left = _interpret(getattr(expr, "left", None), x, y)
    right = _interpret(getattr(expr, "right", None), x, y)
    return apply(left, right)


def _interpret_func_call(expr: FuncCall, x: float, y: float) -> float:
    """Evaluate a built-in function call (closed set, no user-defined functions)."""
    func = FUNCTIONS.get(expr.name)
    if func is None:
        raise _malformed(f"Unknown function: {expr.name}()")
    return func(_interpret(getattr(expr, "argument", None), x, y))


def _malformed(message: str) -> EvaluationError:
    logger.error("Malformed expression tree: %s", message)
    return EvaluationError(message)
