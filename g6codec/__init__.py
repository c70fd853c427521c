from __future__ import annotations

__version__ = "0.1.0"

from .core.graph import Graph
from .errors import (
    G6CodecError,
    DecodeError,
    EncodeError,
    EmptyInput,
    InvalidCharacter,
    MalformedHeader,
    TruncatedInput,
    TrailingData,
    UnsupportedVariant,
    ValueOutOfRange,
)
from .io.formats import Variant, decode, encode


def list_variants():
    return [v.value for v in Variant]
