"""Encoding of the N(n) vertex-count prefix.

NAUTY stores the number of vertices with a tiered, big-endian scheme:

- ``0 <= n <= 62``: a single character ``n + 63``;
- ``63 <= n <= 258047``: ``"~"`` followed by 3 characters (18 bits);
- ``258048 <= n <= 2**36 - 1``: ``"~~"`` followed by 6 characters (36 bits).

The encoder always picks the smallest tier and the decoder rejects any
header that is not minimally encoded.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import MalformedHeader, ValueOutOfRange
from .bitstream import GROUP_BITS, MAX_CHAR, char_to_group, group_to_char

SMALL_MAX = 62
MEDIUM_MAX = 258047
LARGE_MAX = (1 << 36) - 1

TIER_MARKER = chr(MAX_CHAR)


def _pack(n: int, groups: int) -> str:
    shifts = range((groups - 1) * GROUP_BITS, -1, -GROUP_BITS)
    return "".join(group_to_char(n >> shift) for shift in shifts)


def encode_size(n: int) -> str:
    """Return the N(n) prefix for a graph with ``n`` vertices.

    Raises
    ------
    ValueOutOfRange
        If ``n`` is negative or larger than ``2**36 - 1``.
    """
    if n < 0:
        raise ValueOutOfRange(f"vertex count must be >= 0, got {n}")
    if n <= SMALL_MAX:
        return group_to_char(n)
    if n <= MEDIUM_MAX:
        return TIER_MARKER + _pack(n, 3)
    if n <= LARGE_MAX:
        return TIER_MARKER * 2 + _pack(n, 6)
    raise ValueOutOfRange(f"vertex count {n} exceeds the maximum of {LARGE_MAX}")


def _unpack(text: str, start: int, groups: int, offset: int) -> int:
    if len(text) < start + groups:
        raise MalformedHeader(
            f"header needs {groups} size characters after the marker, "
            f"found {max(len(text) - start, 0)}"
        )
    value = 0
    for i in range(start, start + groups):
        value = (value << GROUP_BITS) | char_to_group(text[i], offset + i)
    return value


def decode_size(text: str, offset: int = 0) -> Tuple[int, int]:
    """Read the N(n) prefix at the start of ``text``.

    Parameters
    ----------
    text: str
        Line contents with any variant marker already removed.
    offset: int
        Position of ``text`` inside the full line, for error messages.

    Returns
    -------
    Tuple[int, int]
        The vertex count and the number of characters consumed.
    """
    if not text:
        raise MalformedHeader("missing vertex count")
    first = char_to_group(text[0], offset)
    if text[0] != TIER_MARKER:
        return first, 1

    if len(text) > 1 and text[1] == TIER_MARKER:
        n = _unpack(text, 2, 6, offset)
        if n <= MEDIUM_MAX:
            raise MalformedHeader(f"vertex count {n} is not minimally encoded")
        return n, 8

    n = _unpack(text, 1, 3, offset)
    if n <= SMALL_MAX:
        raise MalformedHeader(f"vertex count {n} is not minimally encoded")
    return n, 4
