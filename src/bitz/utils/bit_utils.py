# coding=utf-8
# Copyright 2024 XiaHan
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

from typing import Iterable, List

from bitz.bitset import BitSet
from bitz.constants import DEFAULT_CAPACITY


def _parse_index(text: str, entry: str) -> int:
    if not text.isdecimal():
        raise ValueError(f"Invalid bit specifier: '{entry}'")
    return int(text)


def parse_bits(text: str) -> List[int]:
    """
    Parses a comma separated list of bit indices such as ``"1,5,10-12"``.

    Ranges are inclusive on both ends.

    Args:
        text: The bit list. Whitespace around entries is ignored.

    Returns:
        List[int]: The indices in the order given, ranges expanded.

    Raises:
        ValueError: If an entry is not a non-negative integer or a valid range.
    """
    bits: List[int] = []
    text = text.strip()
    if not text:
        return bits

    for entry in text.split(","):
        entry = entry.strip()
        if not entry:
            raise ValueError(f"Empty bit specifier in '{text}'")
        if "-" in entry[1:]:
            first, last = entry.split("-", 1)
            first_bit = _parse_index(first.strip(), entry)
            last_bit = _parse_index(last.strip(), entry)
            if last_bit < first_bit:
                raise ValueError(f"Invalid bit range: '{entry}'")
            bits.extend(range(first_bit, last_bit + 1))
        else:
            bits.append(_parse_index(entry, entry))
    return bits


def build_bitset(
    bits: Iterable[int], capacity: int = DEFAULT_CAPACITY, fill: bool = False
) -> BitSet:
    """Creates a bitset of the given capacity and sets every index in ``bits``."""
    bitset = BitSet(capacity, fill=fill)
    for bit in bits:
        bitset.set(bit)
    return bitset
