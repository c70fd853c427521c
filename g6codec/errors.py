"""Exception hierarchy for g6codec.

Every failure raised by the codec derives from :class:`G6CodecError`.
Decoding problems are :class:`DecodeError` subclasses and encoding
problems :class:`EncodeError` subclasses; both are also ``ValueError``
so that callers written against plain ``ValueError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class G6CodecError(Exception):
    """Base class for all g6codec errors."""


class DecodeError(G6CodecError, ValueError):
    """A text line could not be decoded into a graph."""


class EncodeError(G6CodecError, ValueError):
    """A graph could not be encoded into a text line."""


class EmptyInput(DecodeError):
    """The line to decode is empty."""

    def __init__(self, message: str = "empty input line") -> None:
        super().__init__(message)


class InvalidCharacter(DecodeError):
    """A character outside the printable range 63..126 was found."""

    def __init__(self, position: int, char: str) -> None:
        self.position = position
        self.char = char
        super().__init__(
            f"invalid character {char!r} (code {ord(char)}) at position {position}; "
            "expected a code in [63, 126]"
        )


class MalformedHeader(DecodeError):
    """The N(n) vertex-count prefix is truncated or not minimally encoded."""


class TruncatedInput(DecodeError):
    """Fewer bits are available than the adjacency data requires."""

    def __init__(
        self,
        message: str,
        needed: Optional[int] = None,
        available: Optional[int] = None,
    ) -> None:
        self.needed = needed
        self.available = available
        super().__init__(message)


class TrailingData(TruncatedInput):
    """Characters or non-zero padding bits follow the adjacency data."""


class UnsupportedVariant(DecodeError, EncodeError):
    """Unknown marker combination, or a graph that does not fit the variant."""


class ValueOutOfRange(DecodeError, EncodeError):
    """A vertex count or vertex index is outside the representable range."""


__all__ = [
    "G6CodecError",
    "DecodeError",
    "EncodeError",
    "EmptyInput",
    "InvalidCharacter",
    "MalformedHeader",
    "TruncatedInput",
    "TrailingData",
    "UnsupportedVariant",
    "ValueOutOfRange",
]
