"""Tests for the IEEE-754 arithmetic helpers."""

import math

import pytest

from graphy.core.expression_lang import numeric


class TestDivide:
    def test_ordinary(self) -> None:
        assert numeric.divide(7.0, 2.0) == 3.5

    def test_signed_infinity(self) -> None:
        assert numeric.divide(1.0, 0.0) == math.inf
        assert numeric.divide(-1.0, 0.0) == -math.inf
        assert numeric.divide(1.0, -0.0) == -math.inf
        assert numeric.divide(-1.0, -0.0) == math.inf

    def test_integers(self) -> None:
        assert numeric.divide(3, 0) == math.inf

    def test_nan(self) -> None:
        assert math.isnan(numeric.divide(0.0, 0.0))
        assert math.isnan(numeric.divide(math.nan, 0.0))


class TestPower:
    def test_zero_to_the_zero(self) -> None:
        assert numeric.power(0.0, 0.0) == 1.0

    def test_negative_base_fractional_exponent(self) -> None:
        assert math.isnan(numeric.power(-8.0, 1 / 3))

    def test_negative_base_integer_exponent(self) -> None:
        assert numeric.power(-2.0, 3.0) == -8.0

    def test_zero_negative_exponent(self) -> None:
        assert numeric.power(0.0, -1.0) == math.inf
        assert numeric.power(-0.0, -1.0) == -math.inf
        assert numeric.power(-0.0, -2.0) == math.inf

    def test_overflow(self) -> None:
        assert numeric.power(10.0, 400.0) == math.inf
        assert numeric.power(-10.0, 401.0) == -math.inf
        assert numeric.power(-10.0, 400.0) == math.inf


class TestFunctions:
    @pytest.mark.parametrize(
        "func, arg",
        [
            (numeric.sqrt, -1.0),
            (numeric.log, -1.0),
            (numeric.acos, 1.5),
            (numeric.asin, -1.5),
            (numeric.sin, math.inf),
            (numeric.cos, -math.inf),
            (numeric.tan, math.inf),
        ],
    )
    def test_domain_errors_give_nan(self, func, arg: float) -> None:
        assert math.isnan(func(arg))

    def test_log_zero(self) -> None:
        assert numeric.log(0.0) == -math.inf

    def test_exp_overflow(self) -> None:
        assert numeric.exp(1e6) == math.inf

    def test_round_half_up(self) -> None:
        assert numeric.round_half_up(0.5) == 1.0
        assert numeric.round_half_up(1.5) == 2.0
        assert numeric.round_half_up(-0.5) == 0.0
        assert numeric.round_half_up(-1.5) == -1.0

    def test_round_just_below_half(self) -> None:
        # The largest double below 0.5; adding 0.5 to it rounds up to 1.0
        assert numeric.round_half_up(0.49999999999999994) == 0.0
        assert numeric.round_half_up(-0.5000000000000001) == -1.0

    def test_round_large_integers_unchanged(self) -> None:
        assert numeric.round_half_up(4503599627370497.0) == 4503599627370497.0
        assert numeric.round_half_up(-4503599627370497.0) == -4503599627370497.0
        assert numeric.round_half_up(2.0**53 + 2) == 2.0**53 + 2
        assert numeric.round_half_up(4503599627370495.5) == 4503599627370496.0

    def test_round_keeps_negative_zero(self) -> None:
        assert math.copysign(1.0, numeric.round_half_up(-0.4)) == -1.0
        assert math.copysign(1.0, numeric.round_half_up(-0.5)) == -1.0
        assert math.copysign(1.0, numeric.round_half_up(0.4)) == 1.0

    def test_rounding_returns_floats(self) -> None:
        assert isinstance(numeric.floor(1.7), float)
        assert isinstance(numeric.ceil(1.2), float)
        assert isinstance(numeric.round_half_up(1.2), float)

    def test_rounding_passes_non_finite_through(self) -> None:
        for func in (numeric.floor, numeric.ceil, numeric.round_half_up):
            assert func(math.inf) == math.inf
            assert func(-math.inf) == -math.inf
            assert math.isnan(func(math.nan))

    def test_sinc(self) -> None:
        assert numeric.sinc(0.0) == 1.0
        assert numeric.sinc(math.pi) == pytest.approx(0.0, abs=1e-15)

    def test_wrapped_names(self) -> None:
        assert numeric.sin.__name__ == "sin"
