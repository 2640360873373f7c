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
"""Fixed rationals: a zero denominator is an error"""

import math
from decimal import Decimal
import numpy as np
from bigrational.big_rational_base import BigRationalBase, BigRationalCompanion
from bigrational.exceptions import DivisionByZero, NonFiniteOperand
from bigrational.names import FIXED


class FixedBigRational(BigRationalBase):
    """
    Immutable exact rational without special values.

    Construction with a zero denominator, division by zero and conversion
    of NaN or infinite floating-point input raise.

    Examples:
        >>> FixedBigRational(3, 6)
        FixedBigRational(1, 2)
        >>> FixedBigRational(2) is FixedBigRational.TWO
        True
    """

    __slots__ = ()

    def _accepts(self, value) -> bool:
        if isinstance(value, (float, np.floating)):
            return math.isfinite(value)
        if isinstance(value, Decimal):
            return value.is_finite()
        return True

    def _remainder(self, other):
        if other.is_zero():
            raise DivisionByZero(f"Remainder of {self} by zero")
        return super()._remainder(other)


class FixedBigRationalCompanion(BigRationalCompanion):
    """Factory of fixed rationals"""

    semantics = FIXED

    def _zero_denominator(self, numerator: int):
        raise DivisionByZero(f"Denominator is zero: {numerator}/0")

    def _non_finite(self, numerator: int, source):
        raise NonFiniteOperand(f"Fixed rationals are finite: {source}")


companion = FixedBigRationalCompanion(FixedBigRational)

FixedBigRational.ZERO = companion.ZERO
FixedBigRational.ONE = companion.ONE
FixedBigRational.TWO = companion.TWO
FixedBigRational.TEN = companion.TEN


def over(numerator, denominator=1) -> FixedBigRational:
    """numerator/denominator as a fixed rational, any accepted numbers"""
    return companion.value_of(numerator, denominator)
