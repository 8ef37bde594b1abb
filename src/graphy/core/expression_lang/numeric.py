"""
IEEE-754 arithmetic helpers.

Python raises ``ZeroDivisionError``, ``ValueError`` or ``OverflowError`` in
several places where IEEE-754 defines a result. The expression language
evaluates with IEEE semantics throughout, so these helpers return the
infinities and NaNs a native double would produce.
"""

from __future__ import annotations

import functools
import math
from collections.abc import Callable

INF = math.inf
NAN = math.nan

# Every double at or above this magnitude is already a whole number
_INTEGRAL_MAGNITUDE = 2.0**52


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and value % 2 == 1


def divide(left: float, right: float) -> float:
    """``left / right`` with signed infinity and NaN on a zero divisor."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return NAN
        return math.copysign(INF, left) * math.copysign(1.0, right)


def power(base: float, exponent: float) -> float:
    """``base ^ exponent`` following C ``pow``."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        if base == 0 and exponent < 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -INF
            return INF
        # Negative base with a non-integer exponent
        return NAN


def sqrt(value: float) -> float:
    if value < 0:
        return NAN
    return math.sqrt(value)


def log(value: float) -> float:
    if value == 0:
        return -INF
    if value < 0:
        return NAN
    return math.log(value)


def exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return INF


def acos(value: float) -> float:
    if -1.0 <= value <= 1.0:
        return math.acos(value)
    return NAN


def asin(value: float) -> float:
    if -1.0 <= value <= 1.0:
        return math.asin(value)
    return NAN


def _periodic(func: Callable[[float], float]) -> Callable[[float], float]:
    @functools.wraps(func)
    def wrapped(value: float) -> float:
        if math.isinf(value):
            return NAN
        return func(value)

    return wrapped


sin = _periodic(math.sin)
cos = _periodic(math.cos)
tan = _periodic(math.tan)


def floor(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(math.floor(value))


def ceil(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(math.ceil(value))


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves toward positive infinity."""
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_MAGNITUDE:
        return value
    r = float(math.floor(value))
    if value - r >= 0.5:
        r += 1.0
    # Keep the sign of zero, as in round(-0.4) == -0.0
    return math.copysign(r, value) if r == 0 else r


def sinc(value: float) -> float:
    """Unnormalised sinc: 1 at zero, else sin(v)/v."""
    if value == 0:
        return 1.0
    return sin(value) / value
