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
Exact conversions between rationals and IEEE-754 binary or decimal numbers.

All functions here work on plain (numerator, denominator) integer pairs and
leave reduction to the factories. Non-finite inputs are encoded the same way
the floating rationals encode them: NaN is (0, 0), +Infinity (1, 0) and
-Infinity (-1, 0). The fixed factory rejects these pairs.

Binary floating point is decoded from its bit pattern rather than from a
decimal rendering, so that every double and float32 maps to the rational
it denotes exactly, including denormals and the largest finite magnitude.
"""

import logging
import math
from decimal import Decimal, Context, getcontext
from typing import Optional, Tuple
import numpy as np
from bigrational.exceptions import NoExactRepresentation

LOG = logging.getLogger(__name__)

Ratio = Tuple[int, int]

NAN_RATIO = (0, 0)
POSITIVE_INFINITY_RATIO = (1, 0)
NEGATIVE_INFINITY_RATIO = (-1, 0)

# IEEE-754 binary64
DOUBLE_BITS = 64
DOUBLE_MANTISSA_BITS = 52
DOUBLE_EXPONENT_MASK = 0x7ff
DOUBLE_BIAS = 1023

# IEEE-754 binary32
SINGLE_BITS = 32
SINGLE_MANTISSA_BITS = 23
SINGLE_EXPONENT_MASK = 0xff
SINGLE_BIAS = 127

# =============================================================================
# Binary floating point -> rational
# =============================================================================


def double_bits(value) -> int:
    """Raw bit pattern of a double"""
    return int(np.asarray(value, dtype=np.float64).view(np.uint64))


def single_bits(value) -> int:
    """Raw bit pattern of a float32, the value is first rounded to float32"""
    return int(np.asarray(value, dtype=np.float32).view(np.uint32))


def _decompose(bits: int, width: int, mantissa_bits: int, exponent_mask: int, bias: int) -> Ratio:
    sign = -1 if bits >> (width - 1) else 1
    exponent = (bits >> mantissa_bits) & exponent_mask
    mantissa = bits & ((1 << mantissa_bits) - 1)
    if exponent == exponent_mask:
        if mantissa:
            return NAN_RATIO
        return POSITIVE_INFINITY_RATIO if sign > 0 else NEGATIVE_INFINITY_RATIO
    if exponent == 0:
        # denormal, no implicit bit
        power = 1 - bias - mantissa_bits
    else:
        mantissa |= 1 << mantissa_bits
        power = exponent - bias - mantissa_bits
    LOG.debug(f"IEEE decomposition: sign={sign}, mantissa={mantissa:#x}, power={power}")
    if power >= 0:
        return (sign * mantissa) << power, 1
    return sign * mantissa, 1 << -power


def double_to_ratio(value) -> Ratio:
    """
    Exact ratio of an IEEE-754 double.

    Normal numbers are (mantissa | 2^52) * 2^(exponent - 1075), denormals are
    mantissa * 2^-1074.
    """
    return _decompose(double_bits(value), DOUBLE_BITS, DOUBLE_MANTISSA_BITS, DOUBLE_EXPONENT_MASK, DOUBLE_BIAS)


def single_to_ratio(value) -> Ratio:
    """Exact ratio of an IEEE-754 float32, see double_to_ratio"""
    return _decompose(single_bits(value), SINGLE_BITS, SINGLE_MANTISSA_BITS, SINGLE_EXPONENT_MASK, SINGLE_BIAS)


# =============================================================================
# Rational -> binary floating point
# =============================================================================


def ratio_to_double(numerator: int, denominator: int) -> float:
    """Correctly rounded double, saturating to infinity on overflow"""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    try:
        return numerator / denominator
    except OverflowError:
        return math.copysign(math.inf, numerator)


def ratio_to_single(numerator: int, denominator: int) -> np.float32:
    """The double rounded again to float32"""
    with np.errstate(over='ignore'):
        return np.float32(ratio_to_double(numerator, denominator))


# =============================================================================
# Decimal <-> rational
# =============================================================================


def decimal_to_ratio(value: Decimal) -> Ratio:
    """
    Exact ratio of a decimal from its unscaled value and scale.

    scale == 0 gives unscaled/1, a negative scale multiplies by 10^-scale and a
    positive scale divides by 10^scale.
    """
    if value.is_nan():
        return NAN_RATIO
    if value.is_infinite():
        return NEGATIVE_INFINITY_RATIO if value.is_signed() else POSITIVE_INFINITY_RATIO
    sign, digits, exponent = value.as_tuple()
    unscaled = 0
    for digit in digits:
        unscaled = unscaled * 10 + digit
    if sign:
        unscaled = -unscaled
    scale = -exponent
    LOG.debug(f"Decimal {value}: unscaled={unscaled}, scale={scale}")
    if scale == 0:
        return unscaled, 1
    if scale < 0:
        return unscaled * 10**-scale, 1
    return unscaled, 10**scale


def _split_two_five(denominator: int) -> Tuple[int, int, int]:
    """Multiplicities of 2 and 5 in the denominator and the remaining cofactor"""
    twos = (denominator & -denominator).bit_length() - 1
    rest = denominator >> twos
    fives = 0
    while rest % 5 == 0:
        rest //= 5
        fives += 1
    return twos, fives, rest


def is_terminating(denominator: int) -> bool:
    """True if n/denominator has a finite decimal expansion"""
    return _split_two_five(denominator)[2] == 1


def ratio_to_decimal(numerator: int, denominator: int, mode=None, context: Optional[Context] = None) -> Decimal:
    """
    Decimal of a finite ratio.

    Terminating expansions are returned exactly. Otherwise, without a
    rounding mode, NoExactRepresentation is raised. With a mode the quotient
    is rounded to the precision of the given (or current) decimal context.
    """
    twos, fives, rest = _split_two_five(denominator)
    if rest == 1:
        scale = max(twos, fives)
        unscaled = numerator * (10**scale // denominator)
        digits = tuple(int(c) for c in str(abs(unscaled)))
        return Decimal((0 if unscaled >= 0 else 1, digits, -scale))
    if mode is None or mode.decimal_rounding is None:
        raise NoExactRepresentation(f"{numerator}/{denominator} has no terminating decimal expansion")
    ctx = (context or getcontext()).copy()
    ctx.rounding = mode.decimal_rounding
    return ctx.divide(Decimal(numerator), Decimal(denominator))
