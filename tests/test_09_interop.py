"""Interoperability tests: fractions, sympy and numpy arrays, display configuration and logging."""
import logging
import pytest
import numpy as np
import sympy
from fractions import Fraction
from sympy import Rational
from bigrational import (FixedBigRational, FloatingBigRational, RationalMath, Configuration, display_mode,
                         DisableLogger, NonFiniteOperand)
from bigrational.names import ASCII, UNICODE

F = FixedBigRational
FL = FloatingBigRational

# =============================================================================
# fractions.Fraction
# =============================================================================


def test_fraction_conversion():
    assert RationalMath.to_fraction(F(3, 4)) == Fraction(3, 4)
    assert RationalMath.from_fraction(Fraction(6, 8)) == F(3, 4)
    assert RationalMath.from_fraction(Fraction(2), FL) is FL.TWO
    assert F(-5, 7).to_fraction() == Fraction(-5, 7)
    with pytest.raises(NonFiniteOperand):
        RationalMath.to_fraction(FL.NaN)


# =============================================================================
# sympy
# =============================================================================


def test_to_sympy():
    assert RationalMath.to_sympy_rational(F(3, 4)) == Rational(3, 4)
    assert RationalMath.to_sympy_rational(FL.NaN) is sympy.nan
    assert RationalMath.to_sympy_rational(FL.POSITIVE_INFINITY) is sympy.oo
    assert RationalMath.to_sympy_rational(FL.NEGATIVE_INFINITY) is -sympy.oo


def test_from_sympy(rational_class):
    assert RationalMath.from_sympy(Rational(3, 4), rational_class) == rational_class(3, 4)
    assert RationalMath.from_sympy(sympy.Integer(10), rational_class) is rational_class.TEN
    assert RationalMath.from_sympy(sympy.Float(0.5), rational_class) == rational_class(1, 2)
    with pytest.raises(TypeError):
        RationalMath.from_sympy(sympy.Symbol("x"), rational_class)


def test_from_sympy_specials():
    assert RationalMath.from_sympy(sympy.nan, FL) is FL.NaN
    assert RationalMath.from_sympy(sympy.zoo, FL) is FL.NaN
    assert RationalMath.from_sympy(sympy.oo, FL) is FL.POSITIVE_INFINITY
    assert RationalMath.from_sympy(-sympy.oo, FL) is FL.NEGATIVE_INFINITY
    with pytest.raises(NonFiniteOperand):
        RationalMath.from_sympy(sympy.oo)


# =============================================================================
# numpy arrays
# =============================================================================


def test_array_to_rationals():
    arr = RationalMath.array_to_rationals(np.array([[0.5, 0.25], [3, -1.5]]))
    assert arr.shape == (2, 2)
    assert arr.dtype == object
    assert arr[0, 0] == F(1, 2)
    assert arr[1, 1] == F(-3, 2)
    assert all(isinstance(value, FixedBigRational) for value in arr.flat)
    mixed = RationalMath.array_to_rationals(np.array([Rational(1, 3), 2], dtype=object), FL)
    assert mixed[0] == FL(1, 3)
    assert mixed[1] is FL.TWO


def test_array_with_specials():
    arr = RationalMath.array_to_rationals(np.array([np.nan, np.inf, 1.0]), FL)
    assert arr[0] is FL.NaN
    assert arr[1] is FL.POSITIVE_INFINITY
    floats = RationalMath.rationals_to_floats(arr)
    assert np.isnan(floats[0])
    assert floats[1] == np.inf
    assert floats[2] == 1.0
    with pytest.raises(NonFiniteOperand):
        RationalMath.array_to_rationals(np.array([np.inf]))


def test_rationals_to_sympy():
    arr = np.array([F(1, 3), F(-2)], dtype=object)
    result = RationalMath.rationals_to_sympy(arr)
    assert list(result) == [Rational(1, 3), sympy.Integer(-2)]
    assert RationalMath.rationals_to_floats(arr).tolist() == [1 / 3, -2.0]


def test_object_array_arithmetic():
    arr = RationalMath.array_to_rationals(np.array([1, 2, 3]))
    total = (arr / 3).sum()
    assert total is F.TWO


# =============================================================================
# Configuration and logging
# =============================================================================


def test_configuration_singleton():
    assert Configuration() is Configuration()
    assert Configuration().display_mode == ASCII
    with pytest.raises(ValueError):
        Configuration().display_mode = "latex"
    assert Configuration().display_mode == ASCII


def test_display_mode_restored_after_error():
    with pytest.raises(RuntimeError):
        with display_mode(UNICODE) as conf:
            assert conf.display_mode == UNICODE
            raise RuntimeError("boom")
    assert Configuration().display_mode == ASCII


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="bigrational")
    F(0.1)
    assert any("IEEE decomposition" in record.getMessage() for record in caplog.records)


def test_disable_logger(caplog):
    caplog.set_level(logging.DEBUG, logger="bigrational")
    with DisableLogger():
        F(0.3)
        F.ZERO.range_to(2)
    assert not caplog.records
