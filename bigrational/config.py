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
"""Display configuration shared by all rational types"""

import logging
from contextlib import contextmanager
from bigrational.names import ASCII, DISPLAY_MODES

LOG = logging.getLogger(__name__)


class Configuration:
    """
    Singleton holding process-wide display settings.

    Only the rendering of non-finite values depends on it; arithmetic never
    reads the configuration.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._display_mode = ASCII
        return cls._instance

    @property
    def display_mode(self) -> str:
        return self._display_mode

    @display_mode.setter
    def display_mode(self, mode: str):
        if mode not in DISPLAY_MODES:
            raise ValueError(f"Unknown display mode '{mode}', choose one of {DISPLAY_MODES}")
        LOG.debug(f"Display mode set to {mode}")
        self._display_mode = mode


@contextmanager
def display_mode(mode: str):
    """Environment in which rationals are rendered in the given display mode"""
    conf = Configuration()
    previous = conf.display_mode
    conf.display_mode = mode
    try:
        yield conf
    finally:
        conf.display_mode = previous
