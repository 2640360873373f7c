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
"""Static strings used in the bigrational package

    Semantics of a rational type

        FIXED = 'fixed'

        FLOATING = 'floating'

    Display modes

        ASCII = 'ascii'

        UNICODE = 'unicode'

    Rendering

        FRACTION_SLASH = '⁄'

        NAN_STR = 'NaN'

        POS_INF_STR = 'Infinity'

        NEG_INF_STR = '-Infinity'

        POS_INF_UNICODE = '+∞'

        NEG_INF_UNICODE = '-∞'

    Progressions

        RANGE_TO = '..'

        DOWN_TO = ' downTo '

        STEP = ' step '
"""

# semantics of a rational type
FIXED = 'fixed'
FLOATING = 'floating'
SEMANTICS = (FIXED, FLOATING)

# display modes
ASCII = 'ascii'
UNICODE = 'unicode'
DISPLAY_MODES = (ASCII, UNICODE)

# rendering
FRACTION_SLASH = '⁄'
NAN_STR = 'NaN'
POS_INF_STR = 'Infinity'
NEG_INF_STR = '-Infinity'
POS_INF_UNICODE = '+∞'
NEG_INF_UNICODE = '-∞'

# progressions
RANGE_TO = '..'
DOWN_TO = ' downTo '
STEP = ' step '
