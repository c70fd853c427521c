"""Packing and unpacking of bits into printable 6-bit characters.

Every character of a graph6-family line carries six bits, most
significant bit first, stored as ``chr(value + 63)``. :class:`BitWriter`
accumulates bits and flushes whole groups as characters;
:class:`BitReader` walks a string with an explicit cursor (character
index plus bit offset) so no intermediate bit list is ever built.
"""

from __future__ import annotations

from typing import List

from ..errors import InvalidCharacter, TrailingData, TruncatedInput

BIAS = 63
GROUP_BITS = 6
GROUP_MASK = (1 << GROUP_BITS) - 1
MIN_CHAR = BIAS
MAX_CHAR = BIAS + GROUP_MASK


def group_to_char(value: int) -> str:
    """Map a 6-bit value to its printable character."""
    return chr((value & GROUP_MASK) + BIAS)


def char_to_group(char: str, position: int = 0) -> int:
    """Map a printable character back to its 6-bit value.

    Raises
    ------
    InvalidCharacter
        If ``char`` is outside the range 63..126.
    """
    code = ord(char)
    if code < MIN_CHAR or code > MAX_CHAR:
        raise InvalidCharacter(position, char)
    return code - BIAS


def validate_characters(text: str, offset: int = 0) -> None:
    """Raise :class:`InvalidCharacter` for the first out-of-range character."""
    for i, char in enumerate(text):
        code = ord(char)
        if code < MIN_CHAR or code > MAX_CHAR:
            raise InvalidCharacter(offset + i, char)


class BitWriter:
    """Append bits MSB first and pack them into characters."""

    def __init__(self) -> None:
        self._chars: List[str] = []
        self._acc = 0
        self._nbits = 0

    @property
    def bit_length(self) -> int:
        """Total number of bits written so far."""
        return len(self._chars) * GROUP_BITS + self._nbits

    @property
    def padding_needed(self) -> int:
        """Bits still missing to complete the current group."""
        return (-self._nbits) % GROUP_BITS

    def write_bit(self, bit: int) -> None:
        self._acc = (self._acc << 1) | (1 if bit else 0)
        self._nbits += 1
        if self._nbits == GROUP_BITS:
            self._chars.append(group_to_char(self._acc))
            self._acc = 0
            self._nbits = 0

    def write_bits(self, value: int, width: int) -> None:
        """Append the ``width`` low-order bits of ``value``, MSB first."""
        if width < 0:
            raise ValueError("width must be >= 0")
        while width > 0:
            take = min(width, GROUP_BITS - self._nbits)
            width -= take
            chunk = (value >> width) & ((1 << take) - 1)
            self._acc = (self._acc << take) | chunk
            self._nbits += take
            if self._nbits == GROUP_BITS:
                self._chars.append(group_to_char(self._acc))
                self._acc = 0
                self._nbits = 0

    def pad(self, bit: int = 0) -> None:
        """Fill the incomplete group, if any, with ``bit``."""
        missing = self.padding_needed
        if missing:
            self.write_bits(((1 << missing) - 1) if bit else 0, missing)

    def getvalue(self) -> str:
        """Zero-pad the last group and return the packed characters."""
        self.pad(0)
        return "".join(self._chars)


class BitReader:
    """Read bits MSB first from a string of printable characters.

    Parameters
    ----------
    text: str
        Characters holding the packed bits.
    offset: int
        Position of ``text`` inside the full line; used in error messages.
    """

    def __init__(self, text: str, offset: int = 0) -> None:
        self._text = text
        self._offset = offset
        self._index = 0
        self._bit = 0

    @property
    def bits_remaining(self) -> int:
        return (len(self._text) - self._index) * GROUP_BITS - self._bit

    def _current(self) -> int:
        return char_to_group(self._text[self._index], self._offset + self._index)

    def _require(self, width: int) -> None:
        available = self.bits_remaining
        if width > available:
            raise TruncatedInput(
                f"need {width} more bits but only {available} remain",
                needed=width,
                available=available,
            )

    def peek_bit(self) -> int:
        self._require(1)
        return (self._current() >> (GROUP_BITS - 1 - self._bit)) & 1

    def read_bit(self) -> int:
        bit = self.peek_bit()
        self._bit += 1
        if self._bit == GROUP_BITS:
            self._index += 1
            self._bit = 0
        return bit

    def read_bits(self, width: int) -> int:
        """Consume ``width`` bits and return them as an unsigned integer."""
        self._require(width)
        value = 0
        while width > 0:
            left = GROUP_BITS - self._bit
            take = min(width, left)
            group = self._current()
            chunk = (group >> (left - take)) & ((1 << take) - 1)
            value = (value << take) | chunk
            width -= take
            self._bit += take
            if self._bit == GROUP_BITS:
                self._index += 1
                self._bit = 0
        return value

    def ensure_exhausted(self) -> None:
        """Check that only zero padding bits of the current group remain.

        Raises
        ------
        TrailingData
            If whole characters are left over or a padding bit is set.
        """
        remaining = self.bits_remaining
        if remaining >= GROUP_BITS:
            extra = remaining // GROUP_BITS
            raise TrailingData(
                f"{extra} unexpected trailing character(s)",
                needed=0,
                available=remaining,
            )
        if remaining and self.read_bits(remaining) != 0:
            raise TrailingData(
                "non-zero padding bits after adjacency data",
                needed=0,
                available=remaining,
            )
