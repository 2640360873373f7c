"""Continued fraction tests: decomposition, reconstruction, convergents and approximations of irrationals."""
import pytest
from bigrational import (FixedBigRational, FloatingBigRational, FixedContinuedFraction, FloatingContinuedFraction,
                         InvalidConvergentIndex, NonFiniteOperand)

F = FixedBigRational
CF = FixedContinuedFraction


def continued_fraction_class(rational_class):
    return FixedContinuedFraction if rational_class is FixedBigRational else FloatingContinuedFraction


# =============================================================================
# Decomposition and reconstruction
# =============================================================================


def test_decomposition():
    assert list(CF.value_of(F(3245, 1000))) == [3, 4, 12, 4]
    assert list(CF.value_of(F(-3245, 1000))) == [-4, 1, 3, 12, 4]
    assert list(CF.value_of(F(2, 3))) == [0, 1, 2]
    assert list(CF.value_of(7)) == [7]
    assert list(CF.value_of(F.ZERO)) == [0]
    assert list(F(19, 7).to_continued_fraction()) == [2, 1, 2, 2]


@pytest.mark.parametrize("n", [-50, -7, -1, 0, 1, 2, 13, 97])
@pytest.mark.parametrize("d", [1, 2, 3, 7, 10, 64, 1001])
def test_round_trip(rational_class, n, d):
    """Folding the expansion gives back the exact rational"""
    r = rational_class(n, d)
    cf = r.to_continued_fraction()
    assert isinstance(cf, continued_fraction_class(rational_class))
    assert cf.to_big_rational() == r
    assert all(term.is_integer() for term in cf)
    assert all(term > 0 for term in cf.fractional_parts)


def test_expansion_of_double():
    cf = CF.value_of(0.1)
    assert cf.to_big_rational() == F(0.1)
    assert float(cf) == 0.1


def test_terms_are_converted():
    cf = CF.from_terms(1, 2, 3)
    assert all(isinstance(term, FixedBigRational) for term in cf)
    assert cf.to_big_rational() == F(10, 7)
    with pytest.raises(ValueError):
        CF([])


def test_floating_specials():
    for special in (FloatingBigRational.NaN, FloatingBigRational.POSITIVE_INFINITY,
                    FloatingBigRational.NEGATIVE_INFINITY):
        cf = special.to_continued_fraction()
        assert len(cf) == 1
        assert cf.integer_part is FloatingBigRational.NaN
        assert not cf.is_finite()
        assert cf.to_big_rational() is FloatingBigRational.NaN
    assert FloatingContinuedFraction.value_of(FloatingBigRational(1, 2)).is_finite()
    with pytest.raises(NonFiniteOperand):
        CF.value_of(float("inf"))


# =============================================================================
# Parts and predicates
# =============================================================================


def test_parts():
    cf = CF.value_of(F(3245, 1000))
    assert cf.integer_part == 3
    assert cf.fractional_parts == (F(4), F(12), F(4))
    assert cf.terms(0) == (F(3),)
    assert cf.terms(2) == (F(3), F(4), F(12))
    assert cf.terms(10) == tuple(cf)
    assert cf[-1] == 4
    assert len(cf) == 4


def test_is_simple():
    assert CF.value_of(2).is_simple()
    assert not CF.value_of(F(2, 3)).is_simple()
    assert CF.from_terms(0, 1, 1).is_simple()
    assert CF.phi(5).is_simple()


def test_str_and_repr():
    assert str(CF.value_of(F(3245, 1000))) == "[3; 4, 12, 4]"
    assert str(CF.value_of(5)) == "[5;]"
    assert repr(CF.from_terms(1, 2)) == "FixedContinuedFraction([FixedBigRational(1, 1), FixedBigRational(2, 1)])"


# =============================================================================
# Convergents
# =============================================================================


def test_convergents():
    cf = CF.from_terms(2, 1, 2, 1, 1)
    assert [cf.convergent(n) for n in range(len(cf))] == [F(2), F(3), F(8, 3), F(11, 4), F(19, 7)]
    cf = CF.value_of(F(3245, 1000))
    assert [cf.convergent(n) for n in range(4)] == [F(3), F(13, 4), F(159, 49), F(649, 200)]


def test_convergents_of_decimal_e():
    """e to eleven places starts with the convergents 2, 3 and 8/3"""
    e = F(271828182845, 100000000000)
    cf = e.to_continued_fraction()
    assert list(cf.terms(2)) == [2, 1, 2]
    assert [cf.convergent(n) for n in range(3)] == [F(2), F(3), F(8, 3)]
    assert cf.convergent(len(cf) - 1) == e
    assert cf.to_big_rational() == e


def test_last_convergent_is_value(rational_class):
    r = rational_class(-355, 113)
    cf = r.to_continued_fraction()
    assert cf.convergent(len(cf) - 1) == r


def test_convergent_out_of_range():
    cf = CF.from_terms(2, 1, 2)
    with pytest.raises(InvalidConvergentIndex):
        cf.convergent(-1)
    with pytest.raises(InvalidConvergentIndex):
        cf.convergent(3)
    with pytest.raises(IndexError):
        CF.value_of(4).convergent(1)


# =============================================================================
# Irrational approximations
# =============================================================================


def test_phi():
    assert CF.phi(10).to_big_rational() == F(89, 55)
    assert CF.phi(1).to_big_rational() is F.ONE
    with pytest.raises(ValueError):
        CF.phi(0)


def test_root2():
    assert CF.root2(10).to_big_rational() == F(3363, 2378)
    assert CF.root2(2).to_big_rational() == F(3, 2)
    with pytest.raises(ValueError):
        CF.root2(0)


def test_root3():
    assert CF.root3(10).to_big_rational() == F(362, 209)
    assert list(CF.root3(5)) == [1, 1, 2, 1, 2]
    with pytest.raises(ValueError):
        FloatingContinuedFraction.root3(-1)


@pytest.mark.timeout(30)
def test_long_fibonacci_expansion():
    """Ratios of consecutive Fibonacci numbers expand to long runs of ones"""
    a, b = 1, 1
    for _ in range(500):
        a, b = b, a + b
    cf = CF.value_of(F(b, a))
    assert len(cf) == 500
    assert all(term.is_one() for term in cf[:-1])
    assert cf[-1] is F.TWO
    assert cf.to_big_rational() == F(b, a)


# =============================================================================
# Arithmetic, reciprocal and ordering
# =============================================================================


def test_reciprocal():
    cf = CF.value_of(F(3245, 1000))
    assert cf.reciprocal == CF.from_terms(0, 3, 4, 12, 4)
    assert cf.reciprocal.to_big_rational() == F(200, 649)
    assert cf.reciprocal.reciprocal == cf
    assert CF.value_of(F(1, 2)).reciprocal == CF.value_of(2)
    assert FloatingContinuedFraction.value_of(0).reciprocal.integer_part is FloatingBigRational.NaN


def test_arithmetic():
    half = CF.value_of(F(1, 2))
    third = CF.value_of(F(1, 3))
    assert (half + third).to_big_rational() == F(5, 6)
    assert (half - third).to_big_rational() == F(1, 6)
    assert (half * third).to_big_rational() == F(1, 6)
    assert (half / third).to_big_rational() == F(3, 2)
    with pytest.raises(TypeError):
        half + FloatingContinuedFraction.value_of(1)


def test_equality_compares_terms():
    assert CF.from_terms(1, 2) != CF.from_terms(1, 1, 1)
    assert CF.from_terms(1, 2).to_big_rational() == CF.from_terms(1, 1, 1).to_big_rational()
    assert CF.from_terms(1, 2) == CF.value_of(F(3, 2))
    assert hash(CF.from_terms(1, 2)) == hash(CF.value_of(F(3, 2)))
    nan = FloatingContinuedFraction.value_of(FloatingBigRational.NaN)
    assert nan != FloatingContinuedFraction.value_of(FloatingBigRational.NaN)


def test_ordering():
    values = [CF.value_of(F(n, 7)) for n in (5, -3, 22, 0)]
    assert [cf.to_big_rational() for cf in sorted(values)] == [F(-3, 7), F.ZERO, F(5, 7), F(22, 7)]
    assert CF.phi(10) > CF.root2(10)
    assert CF.root2(10).compare_to(CF.root3(10)) == -1
    assert CF.root3(4) <= CF.root3(4)
