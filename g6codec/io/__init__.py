"""Codecs for the graph6 family of text formats.

:mod:`~g6codec.io.formats` is the entry point; the other modules hold the
bit packing, the N(n) header and the per-variant adjacency strategies.
"""

from .export import to_adjmat, to_dot, to_net  # noqa: F401
from .formats import Variant, decode, detect_variant, encode, encode_payload  # noqa: F401

__all__ = [
    "Variant",
    "decode",
    "detect_variant",
    "encode",
    "encode_payload",
    "to_adjmat",
    "to_dot",
    "to_net",
]
