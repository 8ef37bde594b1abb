"""
Static symbol tables for the expression language.

Both tables are read-only views built once at import time. Names are
case-sensitive.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from types import MappingProxyType

from graphy.core.expression_lang import numeric

UnaryFunction = Callable[[float], float]

FUNCTIONS: Mapping[str, UnaryFunction] = MappingProxyType(
    {
        "abs": math.fabs,
        "acos": numeric.acos,
        "asin": numeric.asin,
        "atan": math.atan,
        "ceil": numeric.ceil,
        "cos": numeric.cos,
        "exp": numeric.exp,
        "floor": numeric.floor,
        "log": numeric.log,
        "round": numeric.round_half_up,
        "sin": numeric.sin,
        "sinc": numeric.sinc,
        "sqrt": numeric.sqrt,
        "tan": numeric.tan,
    }
)

CONSTANTS: Mapping[str, float] = MappingProxyType(
    {
        "E": math.e,
        "e": math.e,
        "pi": math.pi,
        "PI": math.pi,
    }
)

# The two free variables, in evaluator argument order
VARIABLES: tuple[str, ...] = ("x", "y")
