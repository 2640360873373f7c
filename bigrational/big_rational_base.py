#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""
Canonical rational values and the factory producing them.

A rational is an immutable (numerator, denominator) pair in lowest terms with
a positive denominator. Instances are only ever built by the companion of
their class (the factory), which reduces its input and hands out shared
singletons for 0, 1, 2 and 10. Calling the class itself,
e.g. FixedBigRational(3, 6), goes through the same factory.

The base class implements the finite arithmetic. Subclasses decide what a
zero denominator or a non-finite input means (error or special value) and may
intercept operations before the finite path runs.
"""

import logging
import math
import numbers
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Tuple
import numpy as np
from bigrational.config import Configuration
from bigrational.conversion import (double_to_ratio, single_to_ratio, decimal_to_ratio, ratio_to_double,
                                    ratio_to_single, ratio_to_decimal)
from bigrational.exceptions import NonFiniteOperand, NoExactRepresentation
from bigrational.names import FRACTION_SLASH, FIXED, FLOATING, ASCII, UNICODE
from bigrational.rounding import RoundingMode, DEFAULT_ROUNDING, round_quotient
from bigrational import measures
from bigrational import math_functions

LOG = logging.getLogger(__name__)

# Plain numbers accepted as operands, converted exactly before delegating
CONVERTIBLE = (numbers.Rational, float, np.floating, np.integer, Decimal)


def _binary_operator(operation):
    """Forward and reflected operator calling operation(left, right) on coerced operands"""

    def forward(a, b):
        b = a._coerce(b)
        if b is NotImplemented:
            return NotImplemented
        return operation(a, b)

    def reverse(b, a):
        a = b._coerce(a)
        if a is NotImplemented:
            return NotImplemented
        return operation(a, b)

    return forward, reverse


class BigRationalCompanion:
    """
    Factory and constant table of one rational class.

    Each concrete rational class gets exactly one companion, created right
    after the class body. The companion owns the singletons ZERO, ONE, TWO and
    TEN and is the only place that creates instances.
    """

    semantics = None
    # all companions by semantics, used to convert between the variants
    registry = {}

    def __init__(self, rational_class):
        self.rational_class = rational_class
        rational_class.companion = self
        self.ZERO = rational_class._raw(0, 1)
        self.ONE = rational_class._raw(1, 1)
        self.TWO = rational_class._raw(2, 1)
        self.TEN = rational_class._raw(10, 1)
        self._cached = {1: self.ONE, 2: self.TWO, 10: self.TEN}
        BigRationalCompanion.registry[self.semantics] = self

    def __repr__(self):
        return f"{type(self).__name__}({self.rational_class.__name__})"

    # =========================================================================
    # Factory
    # =========================================================================

    def value_of(self, numerator=0, denominator=1):
        """
        Canonical rational numerator/denominator.

        Integers are reduced directly. Any other accepted number (float,
        numpy float32, Decimal, Fraction, rational of this class) is first
        converted exactly, then the two are divided.
        """
        if isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral):
            return self.reduce(operator.index(numerator), operator.index(denominator))
        numerator = self.convert(numerator)
        if isinstance(denominator, numbers.Integral) and denominator == 1:
            return numerator
        return numerator / self.convert(denominator)

    def reduce(self, numerator: int, denominator: int):
        if denominator == 0:
            return self._zero_denominator(numerator)
        if numerator == 0:
            return self.ZERO
        if denominator < 0:
            numerator = -numerator
            denominator = -denominator
        divisor = math.gcd(numerator, denominator)
        if divisor != 1:
            numerator //= divisor
            denominator //= divisor
        if denominator == 1:
            cached = self._cached.get(numerator)
            if cached is not None:
                return cached
        return self.rational_class._raw(numerator, denominator)

    def _zero_denominator(self, numerator: int):
        raise NotImplementedError

    def _non_finite(self, numerator: int, source):
        raise NotImplementedError

    def _from_encoded(self, ratio: Tuple[int, int], source):
        numerator, denominator = ratio
        if denominator == 0:
            return self._non_finite(numerator, source)
        return self.reduce(numerator, denominator)

    # =========================================================================
    # Conversion of plain numbers
    # =========================================================================

    def value_of_double(self, value):
        """Exact rational of an IEEE-754 double"""
        return self._from_encoded(double_to_ratio(value), value)

    def value_of_single(self, value):
        """Exact rational of an IEEE-754 float32"""
        return self._from_encoded(single_to_ratio(value), value)

    def value_of_decimal(self, value: Decimal):
        """Exact rational of a decimal"""
        return self._from_encoded(decimal_to_ratio(value), value)

    def convert(self, value):
        """Exact rational of this class for any accepted number"""
        if isinstance(value, self.rational_class):
            return value
        if isinstance(value, BigRationalBase):
            raise TypeError(f"Cannot mix {type(value).__name__} with {self.rational_class.__name__}, "
                            f"convert explicitly with to_fixed() or to_floating()")
        if isinstance(value, numbers.Integral):
            return self.reduce(operator.index(value), 1)
        if isinstance(value, np.float32):
            return self.value_of_single(value)
        if isinstance(value, (float, np.floating)):
            return self.value_of_double(value)
        if isinstance(value, Decimal):
            return self.value_of_decimal(value)
        if isinstance(value, numbers.Rational):
            return self.reduce(int(value.numerator), int(value.denominator))
        raise TypeError(f"Cannot convert {type(value).__name__} to {self.rational_class.__name__}")


class BigRationalBase:
    """
    Immutable rational number in lowest terms.

    Do not instantiate the base class. Use FixedBigRational or
    FloatingBigRational, or the value_of of their companions.
    """

    __slots__ = ('_numerator', '_denominator')

    companion = None

    def __new__(cls, numerator=0, denominator=1):
        return cls.companion.value_of(numerator, denominator)

    @classmethod
    def _raw(cls, numerator: int, denominator: int):
        self = object.__new__(cls)
        self._numerator = numerator
        self._denominator = denominator
        return self

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def __reduce__(self):
        return (type(self), (self._numerator, self._denominator))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_finite(self) -> bool:
        return True

    def is_nan(self) -> bool:
        return False

    def is_positive_infinity(self) -> bool:
        return False

    def is_negative_infinity(self) -> bool:
        return False

    def is_infinite(self) -> bool:
        return self.is_positive_infinity() or self.is_negative_infinity()

    def is_zero(self) -> bool:
        return self is self.companion.ZERO

    def is_one(self) -> bool:
        return self is self.companion.ONE

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_dyadic(self) -> bool:
        """Checks if the denominator is a power of 2"""
        d = self._denominator
        return d > 0 and d & (d - 1) == 0

    def is_p_adic(self, p: int) -> bool:
        """Checks if the denominator is a power of p (p is not checked for primality)"""
        if p < 2:
            raise ValueError(f"p must be at least 2: {p}")
        d = self._denominator
        if d <= 0:
            return False
        while d % p == 0:
            d //= p
        return d == 1

    def is_denominator_even(self) -> bool:
        return self._denominator > 0 and self._denominator % 2 == 0

    # =========================================================================
    # Arithmetic, finite path
    # =========================================================================

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other
        if isinstance(other, BigRationalBase):
            return NotImplemented
        if isinstance(other, CONVERTIBLE):
            return self.companion.convert(other)
        return NotImplemented

    def _negate(self):
        return self.companion.reduce(-self._numerator, self._denominator)

    def _plus(self, other):
        if self._denominator == other._denominator:
            return self.companion.reduce(self._numerator + other._numerator, self._denominator)
        return self.companion.reduce(self._numerator * other._denominator + other._numerator * self._denominator,
                                     self._denominator * other._denominator)

    def _minus(self, other):
        return self._plus(other._negate())

    def _times(self, other):
        return self.companion.reduce(self._numerator * other._numerator, self._denominator * other._denominator)

    def _divide(self, other):
        return self.companion.reduce(self._numerator * other._denominator, self._denominator * other._numerator)

    def _remainder(self, other):
        # division is exact, nothing remains
        return self.companion.ZERO

    def _power(self, exponent: int):
        if exponent < 0:
            return self.companion.reduce(self._denominator**-exponent, self._numerator**-exponent)
        return self.companion.reduce(self._numerator**exponent, self._denominator**exponent)

    def _compare(self, other) -> int:
        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        return (left > right) - (left < right)

    def _equals(self, other) -> bool:
        return self._numerator == other._numerator and self._denominator == other._denominator

    def _accepts(self, value) -> bool:
        """False for plain numbers this class cannot represent, used by =="""
        return True

    __add__, __radd__ = _binary_operator(lambda a, b: a._plus(b))
    __sub__, __rsub__ = _binary_operator(lambda a, b: a._minus(b))
    __mul__, __rmul__ = _binary_operator(lambda a, b: a._times(b))
    __truediv__, __rtruediv__ = _binary_operator(lambda a, b: a._divide(b))
    __mod__, __rmod__ = _binary_operator(lambda a, b: a._remainder(b))

    def __pow__(self, exponent, modulo=None):
        if modulo is not None or not isinstance(exponent, numbers.Integral):
            return NotImplemented
        return self._power(operator.index(exponent))

    def __neg__(self):
        return self._negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return self._negate() if self._numerator < 0 else self

    def inc(self):
        """This plus one"""
        return self._plus(self.companion.ONE)

    def dec(self):
        """This minus one"""
        return self._minus(self.companion.ONE)

    @property
    def sign(self):
        """ZERO, ONE or -ONE"""
        return self.companion.reduce((self._numerator > 0) - (self._numerator < 0), 1)

    @property
    def reciprocal(self):
        return self.companion.reduce(self._denominator, self._numerator)

    def pow(self, exponent: int):
        return self._power(exponent)

    def rem(self, other):
        return self % other

    def divide_and_remainder(self, other):
        """Truncated exact quotient and the remainder self - other * quotient"""
        other = self.companion.convert(other)
        quotient = self._divide(other).truncate()
        return quotient, self._minus(other._times(quotient))

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare_to(self, other) -> int:
        """
        -1, 0 or 1 on the total order of this class.

        Unlike ==, this is defined for every pair of values of the class, so
        that sorting is deterministic.
        """
        other = self.companion.convert(other)
        if self is other:
            return 0
        return self._compare(other)

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self is other or self._compare(other) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self is other or self._compare(other) >= 0

    def __eq__(self, other):
        if isinstance(other, BigRationalBase):
            if type(other) is not type(self):
                return False
        elif isinstance(other, CONVERTIBLE):
            if not self._accepts(other):
                return False
            other = self.companion.convert(other)
        else:
            return NotImplemented
        return self._equals(other)

    def __hash__(self):
        return hash(Fraction(self._numerator, self._denominator))

    def equivalent(self, other) -> bool:
        """Numeric equality across the fixed and floating variants"""
        return (self.is_finite() and other.is_finite() and self._numerator == other.numerator and
                self._denominator == other.denominator)

    # =========================================================================
    # Rounding
    # =========================================================================

    def round(self, mode: RoundingMode = DEFAULT_ROUNDING):
        """Nearest whole number according to mode, HALF_EVEN by default"""
        if self._denominator == 1:
            return self
        return self.companion.reduce(round_quotient(self._numerator, self._denominator, mode), 1)

    def floor(self):
        return self.round(RoundingMode.FLOOR)

    def ceil(self):
        return self.round(RoundingMode.CEILING)

    def truncate(self):
        return self.round(RoundingMode.DOWN)

    def truncate_and_fraction(self):
        """Whole part towards zero and the signed fraction left over"""
        whole = self.truncate()
        return whole, self._minus(whole)

    def fraction(self):
        return self.truncate_and_fraction()[1]

    def round_in(self):
        """Rounds towards zero"""
        return self.round_towards(self.companion.ZERO)

    def round_out(self):
        """Rounds away from zero, zero stays zero"""
        if self._compare(self.companion.ZERO) > 0:
            return self.ceil()
        return self.floor()

    def round_towards(self, goal):
        """Rounds towards goal, a value equal to goal is returned as is"""
        goal = self.companion.convert(goal)
        if goal == self:
            return self
        if goal < self:
            return self.floor()
        return self.ceil()

    # =========================================================================
    # Measures and roots
    # =========================================================================

    def gcd(self, other):
        return measures.gcd(self, self.companion.convert(other))

    def lcm(self, other):
        return measures.lcm(self, self.companion.convert(other))

    def mediant(self, other):
        return measures.mediant(self, self.companion.convert(other))

    def sqrt(self):
        return math_functions.sqrt(self)

    def sqrt_and_remainder(self):
        return math_functions.sqrt_and_remainder(self)

    def sqrt_approximated(self):
        return math_functions.sqrt_approximated(self)

    def cbrt(self):
        return math_functions.cbrt(self)

    def cbrt_approximated(self):
        return math_functions.cbrt_approximated(self)

    def to_continued_fraction(self):
        from bigrational.continued_fraction import continued_fraction_of
        return continued_fraction_of(self)

    def range_to(self, last, step=None):
        """Progression self, self + step, ... up to last, step ONE by default"""
        from bigrational.progression import BigRationalProgression
        return BigRationalProgression(self, last, step)

    def down_to(self, last, step=None):
        """Progression self, self + step, ... down to last, step -ONE by default"""
        from bigrational.progression import BigRationalProgression
        return BigRationalProgression(self, last, -self.companion.ONE if step is None else step)

    # =========================================================================
    # Conversion
    # =========================================================================

    def _require_finite(self):
        if not self.is_finite():
            raise NonFiniteOperand(f"{self} is not finite")

    def __float__(self):
        return ratio_to_double(self._numerator, self._denominator)

    def to_single(self) -> np.float32:
        """IEEE-754 float32 of the nearest double, rounded twice"""
        return ratio_to_single(self._numerator, self._denominator)

    def __int__(self):
        self._require_finite()
        return round_quotient(self._numerator, self._denominator, RoundingMode.DOWN)

    __trunc__ = __int__

    def __floor__(self):
        self._require_finite()
        return self._numerator // self._denominator

    def __ceil__(self):
        self._require_finite()
        return -(-self._numerator // self._denominator)

    def __round__(self, ndigits=None):
        if ndigits is None:
            self._require_finite()
            return round_quotient(self._numerator, self._denominator)
        if not self.is_finite():
            return self
        if ndigits >= 0:
            scale = 10**ndigits
            return self.companion.reduce(round_quotient(self._numerator * scale, self._denominator), scale)
        scale = 10**-ndigits
        return self.companion.reduce(round_quotient(self._numerator, self._denominator * scale) * scale, 1)

    def __bool__(self):
        return self._numerator != 0

    def to_decimal(self, mode: RoundingMode = None, context=None) -> Decimal:
        """
        Exact decimal of a terminating rational.

        Without a rounding mode a non-terminating expansion raises
        NoExactRepresentation. With one, the quotient is rounded to the
        precision of context (the current decimal context by default).
        """
        if not self.is_finite():
            raise NoExactRepresentation(f"{self} has no decimal representation")
        return ratio_to_decimal(self._numerator, self._denominator, mode, context)

    def to_fraction(self) -> Fraction:
        self._require_finite()
        return Fraction(self._numerator, self._denominator)

    def to_fixed(self):
        """This value as a fixed rational"""
        self._require_finite()
        return BigRationalCompanion.registry[FIXED].reduce(self._numerator, self._denominator)

    def to_floating(self):
        """This value as a floating rational"""
        return BigRationalCompanion.registry[FLOATING].reduce(self._numerator, self._denominator)

    # =========================================================================
    # Display
    # =========================================================================

    def _render_special(self, display_mode: str) -> str:
        raise NotImplementedError

    def _render(self, display_mode: str) -> str:
        if not self.is_finite():
            return self._render_special(display_mode)
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}{FRACTION_SLASH}{self._denominator}"

    def __str__(self):
        return self._render(Configuration().display_mode)

    def __repr__(self):
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

    def __format__(self, format_spec):
        if format_spec == '':
            return str(self)
        if format_spec == 'a':
            return self._render(ASCII)
        if format_spec == 'u':
            return self._render(UNICODE)
        return format(float(self), format_spec)
