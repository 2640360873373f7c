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
"""Arithmetic progressions of rationals, first..last step s"""

import logging
from bigrational.exceptions import InvalidProgression
from bigrational.names import RANGE_TO, DOWN_TO, STEP

LOG = logging.getLogger(__name__)


class BigRationalProgression:
    """
    Immutable description of the values first, first + step, ... up to last.

    The progression is validated when built: the step must be non-zero and
    point from first towards last, and all three values must be finite.
    Every iter() gets its own cursor, so one progression can be iterated
    many times.
    """

    __slots__ = ('_first', '_last', '_step')

    def __init__(self, first, last, step=None):
        companion = first.companion
        last = companion.convert(last)
        step = companion.ONE if step is None else companion.convert(step)
        for bound in (first, last, step):
            if not bound.is_finite():
                raise InvalidProgression(f"Progression values must be finite: {first}, {last}, {step}")
        if step.is_zero():
            raise InvalidProgression(f"Step must be non-zero: {first}{RANGE_TO}{last}")
        if step > companion.ZERO and first > last:
            raise InvalidProgression(f"Step {step} does not advance from {first} to {last}")
        if step < companion.ZERO and first < last:
            raise InvalidProgression(f"Step {step} does not advance from {first} down to {last}")
        self._first = first
        self._last = last
        self._step = step
        LOG.debug(f"Progression {self}")

    @property
    def first(self):
        return self._first

    @property
    def last(self):
        return self._last

    @property
    def step_size(self):
        return self._step

    def step(self, step):
        """Same bounds with another step"""
        return BigRationalProgression(self._first, self._last, step)

    def _ascending(self) -> bool:
        return self._step > self._first.companion.ZERO

    def __iter__(self):
        current = self._first
        if self._ascending():
            while current <= self._last:
                yield current
                current = current + self._step
        else:
            while current >= self._last:
                yield current
                current = current + self._step

    def __contains__(self, value):
        value = self._first.companion.convert(value)
        if not value.is_finite():
            return False
        if self._ascending():
            within = self._first <= value <= self._last
        else:
            within = self._last <= value <= self._first
        return within and ((value - self._first) / self._step).is_integer()

    def is_empty(self) -> bool:
        # construction rejects progressions that would not reach their first value
        return False

    def __eq__(self, other):
        if not isinstance(other, BigRationalProgression):
            return NotImplemented
        return self._first == other._first and self._last == other._last and self._step == other._step

    def __hash__(self):
        return hash((self._first, self._last, self._step))

    def __str__(self):
        if self._ascending():
            return f"{self._first}{RANGE_TO}{self._last}{STEP}{self._step}"
        return f"{self._first}{DOWN_TO}{self._last}{STEP}{self._step}"

    def __repr__(self):
        return f"{type(self).__name__}({self._first!r}, {self._last!r}, {self._step!r})"
