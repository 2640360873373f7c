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
Special-value algebra of floating rationals.

A floating rational is tagged with a Kind. Operations first consult the
tables below whenever an operand is not FINITE and only fall through to the
finite arithmetic otherwise. Table results are Kinds, where FINITE stands for
the ZERO singleton (the only finite outcome of combining non-finite values
under +, *, /).

Ordering is total: NEGATIVE_INFINITY < FINITE < POSITIVE_INFINITY < NAN.
NaN sorts last so that sorting is deterministic, although NaN never equals
anything, itself included.
"""

from enum import Enum


class Kind(Enum):
    """Tag of a floating rational"""
    FINITE = 'finite'
    NAN = 'NaN'
    POSITIVE_INFINITY = '+Infinity'
    NEGATIVE_INFINITY = '-Infinity'


_F = Kind.FINITE
_N = Kind.NAN
_P = Kind.POSITIVE_INFINITY
_M = Kind.NEGATIVE_INFINITY

ORDER_RANK = {_M: 0, _F: 1, _P: 2, _N: 3}

# Addition with at least one infinite operand. NaN operands never reach this.
ADDITION = {
    (_P, _P): _P,
    (_P, _M): _N,
    (_P, _F): _P,
    (_M, _P): _N,
    (_M, _M): _M,
    (_M, _F): _M,
    (_F, _P): _P,
    (_F, _M): _M,
}


def kind_of_sign(sign: int) -> Kind:
    """Infinity of the given sign, NaN for a zero sign"""
    if sign > 0:
        return _P
    if sign < 0:
        return _M
    return _N


def sign_of(kind: Kind, numerator: int) -> int:
    """Sign of a value given its kind and numerator"""
    if kind is _P:
        return 1
    if kind is _M:
        return -1
    return (numerator > 0) - (numerator < 0)


def add_kind(a: Kind, b: Kind) -> Kind:
    if a is _N or b is _N:
        return _N
    return ADDITION[(a, b)]


def multiply_kind(a: Kind, sign_a: int, b: Kind, sign_b: int) -> Kind:
    """Multiplication with at least one non-finite operand: 0 * Infinity is NaN"""
    if a is _N or b is _N:
        return _N
    return kind_of_sign(sign_a * sign_b)


def divide_kind(a: Kind, sign_a: int, b: Kind, sign_b: int) -> Kind:
    """
    Division involving a non-finite operand or a zero divisor.

    finite / Infinity is ZERO (returned as FINITE), Infinity / Infinity is
    NaN, Infinity / 0 keeps the sign of the infinity and x / 0 is the
    infinity of the sign of x (NaN for 0 / 0).
    """
    if a is _N or b is _N:
        return _N
    if b is not _F:
        return _N if a is not _F else _F
    if sign_b == 0:
        return kind_of_sign(sign_a)
    return kind_of_sign(sign_a * sign_b)


def compare_kinds(a: Kind, b: Kind) -> int:
    """Compares two kinds on the total order, finite values compare equal here"""
    rank_a = ORDER_RANK[a]
    rank_b = ORDER_RANK[b]
    return (rank_a > rank_b) - (rank_a < rank_b)
