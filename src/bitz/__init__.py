# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from bitz.bitset import BitSet, popcount  # noqa: F401
from bitz.errors import BitzError, CapacityMismatchError, ConfigError  # noqa: F401
from bitz.render import render_ascii  # noqa: F401

__version__ = "0.1.0"
