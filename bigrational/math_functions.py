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
Roots and aggregates of rationals.

Exact roots exist only if numerator and denominator are both perfect powers;
otherwise the exact functions raise NoExactRepresentation while the
*_approximated variants fall back to the exact rational of the IEEE double
root.
"""

import logging
import math
from typing import Iterable, Optional
import numpy as np
from bigrational.exceptions import NoExactRepresentation

LOG = logging.getLogger(__name__)


def integer_root(value: int, k: int) -> int:
    """Floor of the k-th root of a non-negative integer (Newton iteration from above)"""
    if value < 0:
        raise ValueError(f"Negative radicand: {value}")
    if value < 2:
        return value
    if k == 2:
        return math.isqrt(value)
    x = 1 << -(-value.bit_length() // k)
    while True:
        y = ((k - 1) * x + value // x**(k - 1)) // k
        if y >= x:
            return x
        x = y


def _exact_root(r, k: int) -> Optional[tuple]:
    sign = -1 if r.numerator < 0 else 1
    n_root = integer_root(abs(r.numerator), k)
    d_root = integer_root(r.denominator, k)
    if n_root**k != abs(r.numerator) or d_root**k != r.denominator:
        return None
    return sign * n_root, d_root


def sqrt(r):
    """Exact square root, raises NoExactRepresentation for negative or irrational roots"""
    if r.numerator < 0:
        raise NoExactRepresentation(f"No real square root: {r}")
    root = _exact_root(r, 2)
    if root is None:
        raise NoExactRepresentation(f"No rational square root: {r}")
    return r.companion.reduce(*root)


def sqrt_and_remainder(r):
    """
    Square root from below and remainder, with r == root * root + remainder.

    The root has the floored root of the denominator as its denominator and
    the largest numerator whose square stays below r. Both parts are
    non-negative.
    """
    if r.numerator < 0:
        raise NoExactRepresentation(f"No real square root: {r}")
    d_root = math.isqrt(r.denominator)
    # k**2 / d_root**2 <= n / d  <=>  k**2 <= floor(n * d_root**2 / d)
    n_root = math.isqrt(r.numerator * d_root * d_root // r.denominator)
    root = r.companion.reduce(n_root, d_root)
    return root, r - root * root


def sqrt_approximated(r):
    """Exact square root if there is one, else the rational of the double square root"""
    if r.numerator < 0:
        raise NoExactRepresentation(f"No real square root: {r}")
    root = _exact_root(r, 2)
    if root is not None:
        return r.companion.reduce(*root)
    LOG.debug(f"No rational square root of {r}, approximating")
    return r.companion.value_of_double(np.sqrt(float(r)))


def cbrt(r):
    """Exact cube root, raises NoExactRepresentation for irrational roots"""
    root = _exact_root(r, 3)
    if root is None:
        raise NoExactRepresentation(f"No rational cube root: {r}")
    return r.companion.reduce(*root)


def cbrt_approximated(r):
    """Exact cube root if there is one, else the rational of the double cube root"""
    root = _exact_root(r, 3)
    if root is not None:
        return r.companion.reduce(*root)
    LOG.debug(f"No rational cube root of {r}, approximating")
    return r.companion.value_of_double(np.cbrt(float(r)))


def big_rational_sum(values: Iterable, start=None):
    """
    Sum of rationals of one class.

    start is returned for an empty iterable; without a start an empty
    iterable raises ValueError since the rational class is unknown.
    """
    total = start
    for value in values:
        total = value if total is None else total + value
    if total is None:
        raise ValueError("Sum of an empty iterable needs a start value")
    return total


def average(values: Iterable):
    """Arithmetic mean of a non-empty iterable of rationals"""
    total = None
    count = 0
    for value in values:
        total = value if total is None else total + value
        count += 1
    if count == 0:
        raise ValueError("Average of an empty iterable")
    return total / count
