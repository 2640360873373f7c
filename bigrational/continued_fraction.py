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
Continued fractions of rationals.

A continued fraction [a0; a1, a2, ...] is stored as an immutable, non-empty
tuple of rationals of one class: a0 is the integer part, the following terms
are the partial quotients. Every finite rational has a finite expansion, so
decomposition always terminates, and folding the terms back from the right
reconstructs the rational exactly. Non-finite floating rationals decompose to
the single term NaN.
"""

import logging
from collections.abc import Sequence
from bigrational.exceptions import InvalidConvergentIndex
from bigrational.fixed import FixedBigRational
from bigrational.floating import FloatingBigRational

LOG = logging.getLogger(__name__)


class ContinuedFractionBase(Sequence):
    """Immutable continued fraction over the rationals of rational_class"""

    __slots__ = ('_terms',)

    rational_class = None

    def __init__(self, terms):
        convert = self.rational_class.companion.convert
        self._terms = tuple(convert(term) for term in terms)
        if not self._terms:
            raise ValueError("A continued fraction has at least an integer part")

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def value_of(cls, value):
        """Decomposes a rational (or any accepted number) into its continued fraction"""
        companion = cls.rational_class.companion
        value = companion.convert(value)
        if not value.is_finite():
            return cls([companion.NaN])
        terms = []
        while True:
            term = value.floor()
            terms.append(term)
            remainder = value - term
            if remainder.is_zero():
                break
            value = remainder.reciprocal
        LOG.debug(f"Continued fraction with {len(terms)} terms")
        return cls(terms)

    @classmethod
    def from_terms(cls, integer_part, *fractional_parts):
        """Continued fraction from its terms, [integer_part; fractional_parts...]"""
        return cls((integer_part,) + fractional_parts)

    @classmethod
    def phi(cls, n: int):
        """
        φ (the golden ratio) to n terms, [1; 1, 1, ...].

        Convergents are ratios of consecutive Fibonacci numbers, so the
        approximation is rather slow.
        """
        if n < 1:
            raise ValueError(f"Not enough terms to approximate φ: {n}")
        one = cls.rational_class.ONE
        return cls([one] * n)

    @classmethod
    def root2(cls, n: int):
        """√2 to n terms, [1; 2, 2, ...]"""
        if n < 1:
            raise ValueError(f"Not enough terms to approximate √2: {n}")
        rc = cls.rational_class
        return cls([rc.ONE] + [rc.TWO] * (n - 1))

    @classmethod
    def root3(cls, n: int):
        """√3 to n terms, [1; 1, 2, 1, 2, ...]"""
        if n < 1:
            raise ValueError(f"Not enough terms to approximate √3: {n}")
        rc = cls.rational_class
        return cls([rc.ONE] + [rc.ONE if i % 2 == 0 else rc.TWO for i in range(n - 1)])

    # =========================================================================
    # Sequence protocol and parts
    # =========================================================================

    def __getitem__(self, index):
        return self._terms[index]

    def __len__(self):
        return len(self._terms)

    @property
    def integer_part(self):
        return self._terms[0]

    @property
    def fractional_parts(self) -> tuple:
        return self._terms[1:]

    def terms(self, fractional_terms: int) -> tuple:
        """The integer part followed by the first fractional_terms partial quotients"""
        return self._terms[:fractional_terms + 1]

    def is_simple(self) -> bool:
        """True if all fractional terms have numerator 1"""
        return all(term.numerator == 1 for term in self.fractional_parts)

    # =========================================================================
    # Evaluation
    # =========================================================================

    def to_big_rational(self):
        """Folds the terms from the right: a_i + 1/accumulator"""
        accumulator = self._terms[-1]
        for term in reversed(self._terms[:-1]):
            accumulator = term + accumulator.reciprocal
        return accumulator

    def convergent(self, n: int):
        """
        The n-th convergent; the 0th is the integer part.

        Uses c[i] = (a[i] c[i-1].num + c[i-2].num) / (a[i] c[i-1].den + c[i-2].den)
        seeded with c[0] = a[0] and c[1] = (a[1] c[0] + 1) / a[1].
        """
        if n < 0 or n >= len(self._terms):
            raise InvalidConvergentIndex(f"No convergent {n} for {len(self._terms)} terms of {self}")
        c0 = self.integer_part
        if n == 0:
            return c0
        term1 = self._terms[1]
        c1 = (term1 * c0 + 1) / term1
        c_2, c_1 = c0, c1
        for term in self._terms[2:n + 1]:
            c_2, c_1 = c_1, (term * c_1.numerator + c_2.numerator) / (term * c_1.denominator + c_2.denominator)
        return c_1

    @property
    def reciprocal(self):
        """Drops a leading zero term or prepends one"""
        if self.integer_part.is_zero():
            if len(self._terms) == 1:
                return type(self).value_of(self.integer_part.reciprocal)
            return type(self)(self.fractional_parts)
        return type(self)((self.rational_class.ZERO,) + self._terms)

    def __float__(self):
        return float(self.to_big_rational())

    # =========================================================================
    # Arithmetic and comparison through the rationals
    # =========================================================================

    def _arithmetic(self, other, operation):
        if type(other) is not type(self):
            return NotImplemented
        return type(self).value_of(operation(self.to_big_rational(), other.to_big_rational()))

    def __add__(self, other):
        return self._arithmetic(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._arithmetic(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._arithmetic(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._arithmetic(other, lambda a, b: a / b)

    def compare_to(self, other) -> int:
        return self.to_big_rational().compare_to(other.to_big_rational())

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other):
        """Equal terms, so [1; 2] and [1; 1, 1] differ although both are 3/2"""
        if type(other) is not type(self):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self._terms, other._terms))

    def __hash__(self):
        return hash(self._terms)

    def __str__(self):
        if len(self._terms) == 1:
            return f"[{self.integer_part};]"
        return f"[{self.integer_part}; {', '.join(str(term) for term in self.fractional_parts)}]"

    def __repr__(self):
        return f"{type(self).__name__}({list(self._terms)!r})"


class FixedContinuedFraction(ContinuedFractionBase):
    """Continued fraction of fixed rationals"""

    __slots__ = ()
    rational_class = FixedBigRational


class FloatingContinuedFraction(ContinuedFractionBase):
    """Continued fraction of floating rationals, [NaN] for non-finite values"""

    __slots__ = ()
    rational_class = FloatingBigRational

    def is_finite(self) -> bool:
        return self.integer_part.is_finite()


CONTINUED_FRACTIONS = {
    FixedBigRational: FixedContinuedFraction,
    FloatingBigRational: FloatingContinuedFraction,
}


def continued_fraction_of(value):
    """Continued fraction of a fixed or floating rational, in the same variant"""
    return CONTINUED_FRACTIONS[type(value)].value_of(value)
