"""Math function tests: roots, powers, division with remainder, aggregates and denominator predicates."""
import math
import pytest
import numpy as np
from bigrational import (FixedBigRational, FloatingBigRational, NoExactRepresentation, big_rational_sum, average)
from bigrational.math_functions import integer_root

F = FixedBigRational

# =============================================================================
# Roots
# =============================================================================


@pytest.mark.parametrize("value, k, root", [(0, 3, 0), (1, 5, 1), (26, 3, 2), (27, 3, 3), (10**30, 3, 10**10),
                                            (10**30 - 1, 3, 10**10 - 1), (2**200, 2, 2**100), (99, 2, 9)])
def test_integer_root(value, k, root):
    assert integer_root(value, k) == root


def test_integer_root_of_negative():
    with pytest.raises(ValueError):
        integer_root(-1, 2)


def test_sqrt(rational_class):
    assert rational_class(9, 4).sqrt() == rational_class(3, 2)
    assert rational_class(4).sqrt() is rational_class.TWO
    assert rational_class.ZERO.sqrt() is rational_class.ZERO
    with pytest.raises(NoExactRepresentation):
        rational_class(2).sqrt()
    with pytest.raises(NoExactRepresentation):
        rational_class(-4).sqrt()


def test_sqrt_approximated():
    assert F(2).sqrt_approximated() == F(math.sqrt(2))
    assert F(25, 49).sqrt_approximated() == F(5, 7)
    with pytest.raises(NoExactRepresentation):
        F(-2).sqrt_approximated()


@pytest.mark.parametrize("n, d, root, remainder", [
    (2, 9, (1, 3), (1, 9)),
    (3, 2, (1, 1), (1, 2)),
    (1, 2, (0, 1), (1, 2)),
    (9, 4, (3, 2), (0, 1)),
    (10, 1, (3, 1), (1, 1)),
    (10000, 3, (57, 1), (253, 3)),
    (10**40 + 7, 3, (57735026918962576450, 1), (10**40 + 7 - 3 * 57735026918962576450**2, 3)),
])
def test_sqrt_and_remainder(rational_class, n, d, root, remainder):
    r = rational_class(n, d)
    s, rest = r.sqrt_and_remainder()
    assert s == rational_class(*root)
    assert rest == rational_class(*remainder)
    assert s * s + rest == r
    assert rest >= 0


def test_cbrt(rational_class):
    assert rational_class(-27, 8).cbrt() == rational_class(-3, 2)
    assert rational_class(1000).cbrt() is rational_class.TEN
    with pytest.raises(NoExactRepresentation):
        rational_class(2).cbrt()
    assert rational_class(2).cbrt_approximated() == rational_class(float(np.cbrt(2.0)))
    assert rational_class(-8).cbrt_approximated() == -2


def test_roots_of_specials():
    fl = FloatingBigRational
    assert fl.POSITIVE_INFINITY.sqrt() is fl.POSITIVE_INFINITY
    assert fl.NaN.sqrt() is fl.NaN
    assert fl.NEGATIVE_INFINITY.cbrt() is fl.NEGATIVE_INFINITY
    assert fl.NaN.cbrt_approximated() is fl.NaN
    with pytest.raises(NoExactRepresentation):
        fl.NEGATIVE_INFINITY.sqrt()


# =============================================================================
# Powers and division
# =============================================================================


def test_powers(rational_class):
    r = rational_class(2, 3)
    assert r.pow(3) == rational_class(8, 27)
    assert r**-2 == rational_class(9, 4)
    assert r**0 is rational_class.ONE
    assert rational_class(-2)**3 == -8
    with pytest.raises(TypeError):
        pow(r, 2, 5)
    with pytest.raises(TypeError):
        r**r


def test_inc_dec(rational_class):
    assert rational_class(1, 2).inc() == rational_class(3, 2)
    assert rational_class.ONE.dec() is rational_class.ZERO
    assert rational_class.ZERO.dec() == -1


@pytest.mark.parametrize("a, b, quotient, remainder", [
    ((13, 2), (2, 1), (3, 1), (1, 2)),
    ((-13, 2), (2, 1), (-3, 1), (-1, 2)),
    ((13, 2), (-2, 1), (-3, 1), (1, 2)),
    ((7, 3), (1, 3), (7, 1), (0, 1)),
])
def test_divide_and_remainder(rational_class, a, b, quotient, remainder):
    dividend, divisor = rational_class(*a), rational_class(*b)
    q, rest = dividend.divide_and_remainder(divisor)
    assert q == rational_class(*quotient)
    assert rest == rational_class(*remainder)
    assert divisor * q + rest == dividend


def test_exact_remainder(rational_class):
    assert rational_class(7, 2).rem(2) is rational_class.ZERO
    assert rational_class(7, 2) % rational_class(1, 3) is rational_class.ZERO


# =============================================================================
# Aggregates
# =============================================================================


def test_sum(rational_class):
    values = [rational_class(1, 2), rational_class(1, 3), rational_class(1, 6)]
    assert big_rational_sum(values) is rational_class.ONE
    assert big_rational_sum([], rational_class.ZERO) is rational_class.ZERO
    assert big_rational_sum(values, rational_class.ONE) is rational_class.TWO
    with pytest.raises(ValueError):
        big_rational_sum([])


def test_average(rational_class):
    assert average([rational_class(1), rational_class(2)]) == rational_class(3, 2)
    assert average(rational_class(n) for n in range(1, 11)) == rational_class(11, 2)
    with pytest.raises(ValueError):
        average([])


def test_aggregates_with_specials():
    fl = FloatingBigRational
    assert average([fl.ONE, fl.NaN]) is fl.NaN
    assert big_rational_sum([fl.ONE, fl.POSITIVE_INFINITY]) is fl.POSITIVE_INFINITY
    assert big_rational_sum([fl.POSITIVE_INFINITY, fl.NEGATIVE_INFINITY]) is fl.NaN


# =============================================================================
# Denominator predicates
# =============================================================================


def test_denominator_predicates(rational_class):
    assert rational_class(3, 8).is_dyadic()
    assert rational_class(5).is_dyadic()
    assert not rational_class(1, 3).is_dyadic()
    assert rational_class(5, 9).is_p_adic(3)
    assert not rational_class(5, 18).is_p_adic(3)
    assert rational_class(1, 6).is_denominator_even()
    assert not rational_class(1, 3).is_denominator_even()
    assert rational_class.ONE.is_one()
    assert rational_class(7).is_integer()
    with pytest.raises(ValueError):
        rational_class(1, 2).is_p_adic(1)
