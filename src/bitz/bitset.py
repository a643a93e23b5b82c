# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from typing import Any, Iterator, Optional

from bitz.constants import (
    BITS_PER_BYTE,
    DEFAULT_CAPACITY,
    DEFAULT_RENDER_WIDTH,
    EMPTY_BYTE,
    FULL_BYTE,
    PRETTY_RENDER_WIDTH,
)
from bitz.errors import CapacityMismatchError
from bitz.logger import LOGGER
from bitz.render import render_ascii


def popcount(n: int) -> int:
    """
    Counts the one-bits of a single byte without looping over its bits.

    :param n: A byte value in ``range(256)``.
    :type n: int
    :return: The number of bits set in ``n``.
    :rtype: int
    """
    n = n - ((n >> 1) & 0x55)  # pairs
    n = (n & 0x33) + ((n >> 2) & 0x33)  # nibbles
    n = (n + (n >> 4)) & 0x0F  # whole byte
    return n


class BitSet:
    """
    A growable set of bit flags packed into a bytearray.

    Writing past the current capacity grows the buffer by doubling its byte
    length; the new bytes are filled according to the ``fill`` policy given
    at construction. Reading past the capacity never grows the buffer and
    yields ``None``.

    Instances are not thread safe. Callers sharing a bitset between threads
    must provide their own locking.
    """

    __slots__ = ("_buffer", "_fill")

    def __init__(self, capacity_bits: int = DEFAULT_CAPACITY, fill: bool = False) -> None:
        """
        Initializes a BitSet with room for at least ``capacity_bits`` bits.

        :param capacity_bits: Initial capacity, rounded up to a multiple of 8.
        :type capacity_bits: int
        :param fill: When True every bit starts set, and later growth adds set bits too.
        :type fill: bool
        :raises ValueError: If ``capacity_bits`` is negative.
        """
        if capacity_bits < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity_bits}")
        self._fill = bool(fill)
        self._buffer = bytearray()
        self._resize((capacity_bits + BITS_PER_BYTE - 1) // BITS_PER_BYTE)

    @property
    def capacity(self) -> int:
        """The number of addressable bits, always a multiple of 8."""
        return len(self._buffer) * BITS_PER_BYTE

    @property
    def fill_policy(self) -> bool:
        """Whether bytes added by growth start with every bit set."""
        return self._fill

    def _resize(self, new_length: int) -> None:
        fill_byte = FULL_BYTE if self._fill else EMPTY_BYTE
        self._buffer.extend(bytes((fill_byte,)) * (new_length - len(self._buffer)))

    def _grow_to_fit(self, byte_index: int) -> None:
        old_length = len(self._buffer)
        new_length = old_length
        while byte_index >= new_length:
            new_length = max(new_length * 2, 1)
        if new_length != old_length:
            LOGGER.debug(f"Growing bitset buffer from {old_length} to {new_length} bytes")
            self._resize(new_length)

    @staticmethod
    def _locate(bit: int):
        if bit < 0:
            raise IndexError(f"Index out of range: {bit}")
        return divmod(bit, BITS_PER_BYTE)

    def set(self, bit: int) -> None:
        """
        Sets the bit at the specified index to 1, growing the buffer if needed.

        :param bit: The index of the bit to be set.
        :type bit: int
        :raises IndexError: If the index is negative.
        """
        byte_index, bit_offset = self._locate(bit)
        self._grow_to_fit(byte_index)
        self._buffer[byte_index] |= 1 << bit_offset

    def unset(self, bit: int) -> None:
        """
        Sets the bit at the specified index to 0, growing the buffer if needed.

        :param bit: The index of the bit to be cleared.
        :type bit: int
        :raises IndexError: If the index is negative.
        """
        byte_index, bit_offset = self._locate(bit)
        self._grow_to_fit(byte_index)
        self._buffer[byte_index] &= ~(1 << bit_offset) & FULL_BYTE

    def test(self, bit: int) -> Optional[bool]:
        """
        Checks the value of the bit at the specified index.

        :param bit: The index of the bit to be checked.
        :type bit: int
        :raises IndexError: If the index is negative.
        :return: True if the bit is set, False if it is cleared, None if the
            position lies beyond the allocated capacity.
        :rtype: Optional[bool]
        """
        byte_index, bit_offset = self._locate(bit)
        if byte_index >= len(self._buffer):
            return None
        return bool(self._buffer[byte_index] & (1 << bit_offset))

    def set_all(self) -> None:
        """Sets every allocated bit to 1."""
        self._buffer[:] = bytes((FULL_BYTE,)) * len(self._buffer)

    def unset_all(self) -> None:
        """Sets every allocated bit to 0."""
        self._buffer[:] = bytes(len(self._buffer))

    def count(self) -> int:
        """
        Returns the number of bits set to 1.

        :rtype: int
        """
        return sum(popcount(byte) for byte in self._buffer)

    def _check_capacity(self, other: "BitSet", operation: str) -> None:
        if other.capacity != self.capacity:
            LOGGER.debug(
                f"Refusing to {operation} bitsets of capacity {self.capacity} and {other.capacity}"
            )
            raise CapacityMismatchError(operation, self.capacity, other.capacity)

    def union_in_place(self, other: "BitSet") -> "BitSet":
        """
        Sets every bit that is set in ``other``. ``other`` is left unchanged.

        :param other: A bitset with the same capacity.
        :type other: BitSet
        :raises CapacityMismatchError: If the capacities differ.
        :return: This bitset, for chaining.
        :rtype: BitSet
        """
        self._check_capacity(other, "union")
        for index, byte in enumerate(other._buffer):
            self._buffer[index] |= byte
        return self

    def intersection_in_place(self, other: "BitSet") -> "BitSet":
        """
        Clears every bit that is not also set in ``other``. ``other`` is left unchanged.

        :param other: A bitset with the same capacity.
        :type other: BitSet
        :raises CapacityMismatchError: If the capacities differ.
        :return: This bitset, for chaining.
        :rtype: BitSet
        """
        self._check_capacity(other, "intersect")
        for index, byte in enumerate(other._buffer):
            self._buffer[index] &= byte
        return self

    def union(self, other: "BitSet") -> "BitSet":
        """Returns a new bitset holding the bits set in either operand."""
        self._check_capacity(other, "union")
        return self.copy().union_in_place(other)

    def intersection(self, other: "BitSet") -> "BitSet":
        """Returns a new bitset holding the bits set in both operands."""
        self._check_capacity(other, "intersect")
        return self.copy().intersection_in_place(other)

    def toggle_all_in_place(self) -> "BitSet":
        """
        Flips every allocated bit.

        :return: This bitset, for chaining.
        :rtype: BitSet
        """
        for index, byte in enumerate(self._buffer):
            self._buffer[index] = ~byte & FULL_BYTE
        return self

    def complement(self) -> "BitSet":
        """Returns a new bitset with every bit flipped."""
        return self.copy().toggle_all_in_place()

    def each_set_bit(self) -> Iterator[int]:
        """
        Yields the index of every set bit in ascending order.

        Each call scans the buffer afresh. Mutating the bitset while the
        iterator is live gives unspecified results.
        """
        for byte_index, byte in enumerate(self._buffer):
            base = byte_index * BITS_PER_BYTE
            for bit_offset in range(BITS_PER_BYTE):
                if byte & 1:
                    yield base + bit_offset
                byte >>= 1

    def equals(self, other: Any) -> bool:
        """
        Compares capacity and contents. Objects that are not bitsets never compare equal.

        :rtype: bool
        """
        if not isinstance(other, BitSet):
            return False
        if other.capacity != self.capacity:
            return False
        return self._buffer == other._buffer

    def copy(self) -> "BitSet":
        """
        Returns an independent bitset with the same bits and fill policy.

        :rtype: BitSet
        """
        duplicate = type(self).__new__(type(self))
        duplicate._fill = self._fill
        duplicate._buffer = bytearray(self._buffer)
        return duplicate

    def to_ascii(self, width: int = DEFAULT_RENDER_WIDTH, start: int = 0) -> str:
        """
        Renders bits ``start`` onwards as an ASCII table, ``width`` bits per row.

        :param width: The number of bits per row.
        :type width: int
        :param start: The first bit to render.
        :type start: int
        :raises ValueError: If ``start`` is negative.
        :rtype: str
        """
        return render_ascii(self, width=width, start=start)

    def __copy__(self) -> "BitSet":
        return self.copy()

    def __deepcopy__(self, memo) -> "BitSet":
        return self.copy()

    def __contains__(self, bit: int) -> bool:
        return self.test(bit) is True

    def __iter__(self) -> Iterator[int]:
        return self.each_set_bit()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Mutating a bitset that is already used as a dict key is the caller's problem.
        return hash(bytes(self._buffer))

    def __or__(self, other: "BitSet") -> "BitSet":
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "BitSet") -> "BitSet":
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.intersection(other)

    def __ior__(self, other: "BitSet") -> "BitSet":
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.union_in_place(other)

    def __iand__(self, other: "BitSet") -> "BitSet":
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.intersection_in_place(other)

    def __invert__(self) -> "BitSet":
        return self.complement()

    def __str__(self) -> str:
        """
        Returns the bits as a string of 0s and 1s, lowest index first.

        :rtype: str
        """
        return "".join(bin(byte)[2:].zfill(8)[::-1] for byte in self._buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, count={self.count()}, fill={self._fill})"

    def _repr_pretty_(self, p, cycle: bool) -> None:
        p.text(self.to_ascii(width=PRETTY_RENDER_WIDTH))
