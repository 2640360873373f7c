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
"""bigrational package for exact arbitrary-precision rational arithmetic"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .exceptions import *
from .config import Configuration, display_mode
from .special_values import Kind
from .rounding import RoundingMode, DEFAULT_ROUNDING
from .big_rational_base import BigRationalBase, BigRationalCompanion
from .fixed import FixedBigRational
from .floating import FloatingBigRational
from .math_functions import big_rational_sum, average
from .continued_fraction import ContinuedFractionBase, FixedContinuedFraction, FloatingContinuedFraction
from .progression import BigRationalProgression
from .rational_math import RationalMath
