# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.


class BitzError(Exception):
    """Base class for errors raised by bitz."""


class CapacityMismatchError(BitzError, ValueError):
    """
    Raised when a binary set operation is given two bitsets whose capacities differ.

    :param operation: The verb used in the message, e.g. ``"union"`` or ``"intersect"``.
    :param left_capacity: Capacity of the receiving bitset, in bits.
    :param right_capacity: Capacity of the other operand, in bits.
    """

    def __init__(self, operation: str, left_capacity: int, right_capacity: int) -> None:
        self.operation = operation
        self.left_capacity = left_capacity
        self.right_capacity = right_capacity
        super().__init__(
            f"Cannot {operation} bitsets with different capacities: "
            f"{left_capacity} != {right_capacity}"
        )


class ConfigError(BitzError):
    """Raised when a configuration file cannot be loaded or holds invalid values."""
