# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from bitz.commands.app import app, main
from bitz.commands.combine import combine, complement
from bitz.commands.count import count
from bitz.commands.show import show

__all__ = [
    "app",
    "main",
    "show",
    "count",
    "combine",
    "complement",
]
