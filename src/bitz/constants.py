# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

BITS_PER_BYTE = 8
FULL_BYTE = 0xFF
EMPTY_BYTE = 0x00

DEFAULT_CAPACITY = 64
DEFAULT_RENDER_WIDTH = 64
PRETTY_RENDER_WIDTH = 32

EMPTY_RENDER = "Empty bitset\n"

DEFAULT_LOGGER_DIR = "./logs"
