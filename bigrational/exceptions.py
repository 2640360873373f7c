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
"""Errors raised by the rational kernel

All errors derive from BigRationalError, itself an ArithmeticError, and in
addition from the closest built-in exception so that callers catching e.g.
ZeroDivisionError or ValueError keep working.
"""


class BigRationalError(ArithmeticError):
    """Base class of all errors of the bigrational package"""


class DivisionByZero(BigRationalError, ZeroDivisionError):
    """A fixed rational was constructed or divided with a zero denominator"""


class NonFiniteOperand(BigRationalError, ValueError):
    """A NaN or infinite value was used where only finite values are valid"""


class NoExactRepresentation(BigRationalError, ValueError):
    """The requested result (root, decimal, whole number) is not exact"""


class InvalidProgression(BigRationalError, ValueError):
    """Zero step, direction mismatch or non-finite bound of a progression"""


class InvalidConvergentIndex(BigRationalError, IndexError):
    """A convergent was requested outside the terms of a continued fraction"""
