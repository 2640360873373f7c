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
Interoperability of big rationals with fractions, numpy and sympy.

This module converts between the rationals of this package and Python's
fractions.Fraction, sympy's Rational (including nan, oo and -oo) and numpy
object arrays.
"""

import logging
from fractions import Fraction
from typing import Union
import numpy as np
import sympy
from sympy import Rational
from bigrational.big_rational_base import BigRationalBase
from bigrational.fixed import FixedBigRational
from bigrational.conversion import NAN_RATIO, POSITIVE_INFINITY_RATIO, NEGATIVE_INFINITY_RATIO

LOG = logging.getLogger(__name__)

# Type alias for values that can be converted to a big rational
Numeric = Union[int, float, Fraction, Rational, BigRationalBase]


class RationalMath:
    """Utility class for converting big rationals to and from other number types."""

    @staticmethod
    def to_fraction(value: BigRationalBase) -> Fraction:
        """
        Convert a finite big rational to a Fraction.

        Args:
            value: A fixed or finite floating big rational

        Returns:
            Fraction with the same numerator and denominator
        """
        return value.to_fraction()

    @staticmethod
    def from_fraction(value: Fraction, rational_class=FixedBigRational) -> BigRationalBase:
        """
        Convert a Fraction to a big rational.

        Args:
            value: Fraction to convert
            rational_class: FixedBigRational (default) or FloatingBigRational

        Returns:
            Big rational of rational_class
        """
        return rational_class.companion.reduce(value.numerator, value.denominator)

    @staticmethod
    def to_sympy_rational(value: BigRationalBase):
        """
        Convert a big rational to a sympy number.

        Args:
            value: Big rational, NaN and infinities are allowed

        Returns:
            sympy.Rational, or sympy.nan, sympy.oo, -sympy.oo for non-finite values
        """
        if value.is_nan():
            return sympy.nan
        if value.is_positive_infinity():
            return sympy.oo
        if value.is_negative_infinity():
            return -sympy.oo
        return Rational(value.numerator, value.denominator)

    @staticmethod
    def from_sympy(value, rational_class=FixedBigRational) -> BigRationalBase:
        """
        Convert a sympy number to a big rational.

        Floats are converted exactly, nan and the infinities map to the special
        values of floating rationals (fixed rationals raise NonFiniteOperand).

        Args:
            value: sympy Rational, Integer, Float, nan, oo, -oo or zoo
            rational_class: FixedBigRational (default) or FloatingBigRational

        Returns:
            Big rational of rational_class
        """
        companion = rational_class.companion
        if value is sympy.nan or value is sympy.zoo:
            return companion._from_encoded(NAN_RATIO, value)
        if value is sympy.oo:
            return companion._from_encoded(POSITIVE_INFINITY_RATIO, value)
        if value is -sympy.oo:
            return companion._from_encoded(NEGATIVE_INFINITY_RATIO, value)
        if isinstance(value, sympy.Float):
            value = Rational(value)
        if isinstance(value, Rational):
            return companion.reduce(int(value.p), int(value.q))
        raise TypeError(f"Cannot convert {type(value)} to {rational_class.__name__}")

    @staticmethod
    def array_to_rationals(arr: np.ndarray, rational_class=FixedBigRational) -> np.ndarray:
        """
        Convert a numpy array to an array of big rationals.

        Args:
            arr: Numpy array of numeric values, floats are converted exactly
            rational_class: FixedBigRational (default) or FloatingBigRational

        Returns:
            Object array containing big rationals
        """
        arr = np.asarray(arr)
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat
        convert = rational_class.companion.convert
        for i, val in enumerate(arr.flat):
            if isinstance(val, sympy.Basic):
                flat_result[i] = RationalMath.from_sympy(val, rational_class)
            else:
                flat_result[i] = convert(val)
        LOG.debug(f"Converted array of shape {arr.shape} to {rational_class.__name__}")
        return result

    @staticmethod
    def rationals_to_floats(arr: np.ndarray) -> np.ndarray:
        """
        Convert an array of big rationals to floats.

        Args:
            arr: Object array containing big rationals

        Returns:
            Float array, NaN and infinities included
        """
        result = np.empty(arr.shape, dtype=float)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            flat_result[i] = float(val)
        return result

    @staticmethod
    def rationals_to_sympy(arr: np.ndarray) -> np.ndarray:
        """
        Convert an array of big rationals to sympy numbers.

        Args:
            arr: Object array containing big rationals

        Returns:
            Object array containing sympy Rationals (nan, oo, -oo for specials)
        """
        result = np.empty(arr.shape, dtype=object)
        flat_result = result.flat
        for i, val in enumerate(arr.flat):
            flat_result[i] = RationalMath.to_sympy_rational(val)
        return result
