# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""
ASCII table rendering for bitsets.

Each row shows bit indices in hexadecimal above their 0/1 values, grouped in
chunks of 8 and closed by a border line::

    Bit Index: |  0  1  2  3  4  5  6  7 |  8  9  a  b  c  d  e  f |
    Bit Value: |  0  1  0  0  0  1  0  0 |  0  0  1  0  0  0  0  0 |
               +------------------------+------------------------+
"""

from typing import List

from bitz.constants import BITS_PER_BYTE, DEFAULT_RENDER_WIDTH, EMPTY_RENDER

INDEX_LABEL = "Bit Index: "
VALUE_LABEL = "Bit Value: "
BORDER_LABEL = " " * len(INDEX_LABEL)
BLANK_FIELD = "   "
BORDER_FIELD = "---"


def render_row(bitset, start: int, end: int) -> str:
    """Renders bits in ``[start, end)`` as the three lines of a single row."""
    index_line = INDEX_LABEL
    value_line = VALUE_LABEL
    border_line = BORDER_LABEL

    for group_start in range(start, end, BITS_PER_BYTE):
        group_end = min(group_start + BITS_PER_BYTE, end)

        index_line += "|"
        value_line += "|"
        border_line += "+"

        for bit in range(group_start, group_end):
            index_line += f"{bit:3x}"
            value_line += f"{1 if bitset.test(bit) else 0:3d}"
            border_line += BORDER_FIELD

        padding = BITS_PER_BYTE - (group_end - group_start)
        index_line += BLANK_FIELD * padding
        value_line += BLANK_FIELD * padding
        border_line += BORDER_FIELD * padding

        index_line += " "
        value_line += " "
        border_line += "-"

    return f"{index_line}|\n{value_line}|\n{border_line}+\n"


def render_ascii(bitset, width: int = DEFAULT_RENDER_WIDTH, start: int = 0) -> str:
    """
    Renders ``bitset`` from ``start`` as stacked rows of ``width`` bits.

    Returns ``"Empty bitset\\n"`` when nothing falls inside the capacity.
    Raises ``ValueError`` when ``start`` is negative.
    """
    if start < 0:
        raise ValueError(f"Start must be non-negative, got {start}")
    capacity = bitset.capacity
    end = min(start + width, capacity)
    if end <= start:
        return EMPTY_RENDER

    rows: List[str] = []
    while True:
        rows.append(render_row(bitset, start, end))
        if not (end < capacity and width < capacity):
            break
        start = end
        end = min(start + width, capacity)
    return "".join(rows)
