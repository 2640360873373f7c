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
"""gcd, lcm and mediant of finite rationals of the same class"""

import math


def gcd(a, b):
    """
    Greatest common divisor of two rationals.

    The gcd of the numerators over the lcm of the denominators. When a is
    zero, b is returned unchanged, so the result is zero only if both are.
    """
    if a.is_zero():
        return b
    return a.companion.reduce(math.gcd(a.numerator, b.numerator), math.lcm(a.denominator, b.denominator))


def lcm(a, b):
    """Least common multiple, the lcm of the numerators over the gcd of the denominators"""
    if a.is_zero():
        return a.companion.ZERO
    return a.companion.reduce(math.lcm(a.numerator, b.numerator), math.gcd(a.denominator, b.denominator))


def mediant(a, b):
    """Farey sum (a.num + b.num) / (a.den + b.den)"""
    return a.companion.reduce(a.numerator + b.numerator, a.denominator + b.denominator)
