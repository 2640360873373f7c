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
"""Rounding of exact quotients to whole numbers"""

import decimal
from enum import Enum
from bigrational.exceptions import NoExactRepresentation


class RoundingMode(Enum):
    """
    Rounding modes for rounding a rational to a whole number.

    The values mirror the rounding constants of the decimal module, so a
    mode can be handed to a decimal.Context. UNNECESSARY has no decimal
    counterpart: it asserts that the value is already whole.
    """
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    DOWN = decimal.ROUND_DOWN
    UP = decimal.ROUND_UP
    UNNECESSARY = 'ROUND_UNNECESSARY'

    @property
    def decimal_rounding(self):
        """Rounding constant for decimal.Context or None"""
        if self is RoundingMode.UNNECESSARY:
            return None
        return self.value


DEFAULT_ROUNDING = RoundingMode.HALF_EVEN


def round_quotient(numerator: int, denominator: int, mode: RoundingMode = DEFAULT_ROUNDING) -> int:
    """
    Rounds numerator/denominator (denominator > 0) to a whole number.

    Works on integers only: the floored quotient and its remainder decide
    between the two whole neighbours.
    """
    lower, remainder = divmod(numerator, denominator)
    if remainder == 0:
        return lower
    if mode is RoundingMode.UNNECESSARY:
        raise NoExactRepresentation(f"Rounding necessary for {numerator}/{denominator}")
    upper = lower + 1
    positive = numerator > 0
    if mode is RoundingMode.FLOOR:
        return lower
    if mode is RoundingMode.CEILING:
        return upper
    if mode is RoundingMode.DOWN:
        return lower if positive else upper
    if mode is RoundingMode.UP:
        return upper if positive else lower
    twice = 2 * remainder
    if twice < denominator:
        return lower
    if twice > denominator:
        return upper
    # exactly half way
    if mode is RoundingMode.HALF_UP:
        return upper if positive else lower
    if mode is RoundingMode.HALF_DOWN:
        return lower if positive else upper
    if mode is RoundingMode.HALF_EVEN:
        return lower if lower % 2 == 0 else upper
    raise ValueError(f"Unknown rounding mode {mode}")
