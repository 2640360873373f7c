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
Floating rationals: a zero denominator encodes NaN or an infinity.

NaN is (0, 0), +Infinity (1, 0) and -Infinity (-1, 0). All three are
singletons tagged with a Kind. Every operation checks the tags first and
resolves non-finite operands through the tables in special_values; only
finite operands reach the arithmetic of BigRationalBase.

NaN is never equal to anything, itself included, but it still has a place
in the total order (last) so that sorting is deterministic.
"""

import math
from bigrational.big_rational_base import BigRationalBase, BigRationalCompanion
from bigrational.names import FLOATING, UNICODE, NAN_STR, POS_INF_STR, NEG_INF_STR, POS_INF_UNICODE, NEG_INF_UNICODE
from bigrational.special_values import Kind, add_kind, multiply_kind, divide_kind, compare_kinds, sign_of
from bigrational.rounding import RoundingMode, DEFAULT_ROUNDING
from bigrational import measures


def _kind_of(numerator: int, denominator: int) -> Kind:
    if denominator != 0:
        return Kind.FINITE
    if numerator == 0:
        return Kind.NAN
    return Kind.POSITIVE_INFINITY if numerator > 0 else Kind.NEGATIVE_INFINITY


class FloatingBigRational(BigRationalBase):
    """
    Immutable exact rational with NaN and signed infinities.

    Nothing raises in arithmetic: 1/0 is +Infinity, 0/0 is NaN, and any
    operation touching NaN yields NaN.

    Examples:
        >>> FloatingBigRational(1, 0) is FloatingBigRational.POSITIVE_INFINITY
        True
        >>> FloatingBigRational.NaN == FloatingBigRational.NaN
        False
    """

    __slots__ = ('_kind',)

    @classmethod
    def _raw(cls, numerator: int, denominator: int):
        self = super()._raw(numerator, denominator)
        self._kind = _kind_of(numerator, denominator)
        return self

    @property
    def kind(self) -> Kind:
        return self._kind

    def _both_finite(self, other) -> bool:
        return self._kind is Kind.FINITE and other._kind is Kind.FINITE

    def _special(self, kind: Kind):
        return self.companion.special(kind)

    def _sign_int(self) -> int:
        return sign_of(self._kind, self._numerator)

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_finite(self) -> bool:
        return self._kind is Kind.FINITE

    def is_nan(self) -> bool:
        return self._kind is Kind.NAN

    def is_positive_infinity(self) -> bool:
        return self._kind is Kind.POSITIVE_INFINITY

    def is_negative_infinity(self) -> bool:
        return self._kind is Kind.NEGATIVE_INFINITY

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _plus(self, other):
        if self._both_finite(other):
            return super()._plus(other)
        return self._special(add_kind(self._kind, other._kind))

    def _times(self, other):
        if self._both_finite(other):
            return super()._times(other)
        return self._special(multiply_kind(self._kind, self._sign_int(), other._kind, other._sign_int()))

    def _divide(self, other):
        # x / 0 needs no table, the factory maps the zero denominator
        if self._both_finite(other):
            return super()._divide(other)
        return self._special(divide_kind(self._kind, self._sign_int(), other._kind, other._sign_int()))

    def _remainder(self, other):
        if self.is_nan() or other.is_nan():
            return self.companion.NaN
        return super()._remainder(other)

    def _power(self, exponent: int):
        if self._kind is Kind.FINITE:
            return super()._power(exponent)
        if self.is_nan() or exponent == 0:
            return self.companion.NaN
        if exponent < 0:
            return self.companion.ZERO
        if self.is_negative_infinity() and exponent % 2 == 1:
            return self.companion.NEGATIVE_INFINITY
        return self.companion.POSITIVE_INFINITY

    @property
    def sign(self):
        if self.is_nan():
            return self
        return super().sign

    def __bool__(self):
        return self._kind is not Kind.FINITE or self._numerator != 0

    # =========================================================================
    # Comparison
    # =========================================================================

    def _compare(self, other) -> int:
        if self._both_finite(other):
            return super()._compare(other)
        return compare_kinds(self._kind, other._kind)

    def _equals(self, other) -> bool:
        if self.is_nan() or other.is_nan():
            return False
        return super()._equals(other)

    def __hash__(self):
        if self._kind is Kind.FINITE:
            return super().__hash__()
        if self.is_nan():
            return object.__hash__(self)
        return hash(math.inf) if self.is_positive_infinity() else hash(-math.inf)

    # =========================================================================
    # Rounding and measures
    # =========================================================================

    def round(self, mode: RoundingMode = DEFAULT_ROUNDING):
        if not self.is_finite():
            return self
        return super().round(mode)

    def gcd(self, other):
        other = self.companion.convert(other)
        if not self._both_finite(other):
            return self.companion.NaN
        return measures.gcd(self, other)

    def lcm(self, other):
        other = self.companion.convert(other)
        if not self._both_finite(other):
            return self.companion.NaN
        return measures.lcm(self, other)

    def mediant(self, other):
        """Farey sum, NaN propagates and the two infinities meet at ZERO"""
        other = self.companion.convert(other)
        if self.is_nan() or other.is_nan():
            return self.companion.NaN
        if self.is_infinite() and other.is_infinite() and self._kind is not other._kind:
            return self.companion.ZERO
        return measures.mediant(self, other)

    # =========================================================================
    # Display
    # =========================================================================

    def _render_special(self, display_mode: str) -> str:
        if self.is_nan():
            return NAN_STR
        if display_mode == UNICODE:
            return POS_INF_UNICODE if self.is_positive_infinity() else NEG_INF_UNICODE
        return POS_INF_STR if self.is_positive_infinity() else NEG_INF_STR


class FloatingBigRationalCompanion(BigRationalCompanion):
    """Factory of floating rationals, owns NaN and the infinities as well"""

    semantics = FLOATING

    def __init__(self, rational_class):
        super().__init__(rational_class)
        self.NaN = rational_class._raw(0, 0)
        self.POSITIVE_INFINITY = rational_class._raw(1, 0)
        self.NEGATIVE_INFINITY = rational_class._raw(-1, 0)
        self._specials = {
            Kind.FINITE: self.ZERO,
            Kind.NAN: self.NaN,
            Kind.POSITIVE_INFINITY: self.POSITIVE_INFINITY,
            Kind.NEGATIVE_INFINITY: self.NEGATIVE_INFINITY,
        }

    def special(self, kind: Kind):
        """Singleton for a table result, FINITE standing for ZERO"""
        return self._specials[kind]

    def _zero_denominator(self, numerator: int):
        return self._specials[_kind_of(numerator, 0)]

    def _non_finite(self, numerator: int, source):
        return self._zero_denominator(numerator)


companion = FloatingBigRationalCompanion(FloatingBigRational)

FloatingBigRational.ZERO = companion.ZERO
FloatingBigRational.ONE = companion.ONE
FloatingBigRational.TWO = companion.TWO
FloatingBigRational.TEN = companion.TEN
FloatingBigRational.NaN = companion.NaN
FloatingBigRational.POSITIVE_INFINITY = companion.POSITIVE_INFINITY
FloatingBigRational.NEGATIVE_INFINITY = companion.NEGATIVE_INFINITY


def over(numerator, denominator=1) -> FloatingBigRational:
    """numerator/denominator as a floating rational, any accepted numbers"""
    return companion.value_of(numerator, denominator)
