"""Variant detection and the top-level graph6 / digraph6 / sparse6 codec.

Decoding a line::

    [">>graph6<<" | ">>digraph6<<" | ">>sparse6<<"]   optional file header
    ["&" | ":"]                                      variant marker
    N(n)                                             vertex count
    packed adjacency bits

Encoding produces the same layout; the file header is only written on
request.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Tuple, Union

from ..core.graph import Graph
from ..errors import EmptyInput, MalformedHeader, UnsupportedVariant, ValueOutOfRange
from ..utils.logging import get_logger
from .bitstream import BitReader, BitWriter, validate_characters
from .dense import (
    decode_digraph6_bits,
    decode_graph6_bits,
    encode_digraph6_bits,
    encode_graph6_bits,
)
from .header import decode_size, encode_size
from .sparse6 import decode_sparse6_bits, encode_sparse6_bits

logger = get_logger(__name__)

DIGRAPH6_MARKER = "&"
SPARSE6_MARKER = ":"
INCREMENTAL_SPARSE6_MARKER = ";"
_MARKERS = DIGRAPH6_MARKER + SPARSE6_MARKER + INCREMENTAL_SPARSE6_MARKER


class Variant(Enum):
    GRAPH6 = "graph6"
    DIGRAPH6 = "digraph6"
    SPARSE6 = "sparse6"

    @property
    def marker(self) -> str:
        return _VARIANT_MARKERS[self]

    @property
    def directed(self) -> bool:
        return self is Variant.DIGRAPH6

    @property
    def file_header(self) -> str:
        """NAUTY's optional ``>>name<<`` file header."""
        return f">>{self.value}<<"

    @classmethod
    def coerce(cls, value: Union["Variant", str]) -> "Variant":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnsupportedVariant(
                f"Unknown variant {value!r}. "
                f"Available: {sorted(v.value for v in cls)}"
            ) from None


_VARIANT_MARKERS: Dict[Variant, str] = {
    Variant.GRAPH6: "",
    Variant.DIGRAPH6: DIGRAPH6_MARKER,
    Variant.SPARSE6: SPARSE6_MARKER,
}

_DECODERS: Dict[Variant, Callable[[int, BitReader], Graph]] = {
    Variant.GRAPH6: decode_graph6_bits,
    Variant.DIGRAPH6: decode_digraph6_bits,
    Variant.SPARSE6: decode_sparse6_bits,
}

_ENCODERS: Dict[Variant, Callable[[Graph, BitWriter], None]] = {
    Variant.GRAPH6: encode_graph6_bits,
    Variant.DIGRAPH6: encode_digraph6_bits,
    Variant.SPARSE6: encode_sparse6_bits,
}


def detect_variant(line: str) -> Tuple[Variant, int]:
    """Identify the variant of ``line`` from its leading marker.

    Returns
    -------
    Tuple[Variant, int]
        The variant and the index where the N(n) prefix starts.

    Raises
    ------
    EmptyInput
        If ``line`` is empty.
    UnsupportedVariant
        For incremental sparse6 (``;``) or stacked markers such as ``&:``.
    """
    if not line:
        raise EmptyInput()
    first = line[0]
    if first == INCREMENTAL_SPARSE6_MARKER:
        raise UnsupportedVariant("incremental sparse6 (';') is not supported")
    if first not in (DIGRAPH6_MARKER, SPARSE6_MARKER):
        return Variant.GRAPH6, 0
    if len(line) > 1 and line[1] in _MARKERS:
        raise UnsupportedVariant(f"unsupported marker combination {line[:2]!r}")
    if first == DIGRAPH6_MARKER:
        return Variant.DIGRAPH6, 1
    return Variant.SPARSE6, 1


def _strip_file_header(line: str) -> Tuple[str, Union[Variant, None]]:
    for variant in Variant:
        if line.startswith(variant.file_header):
            return line[len(variant.file_header):], variant
    return line, None


def decode(line: str) -> Graph:
    """Decode one graph6, digraph6 or sparse6 line.

    A single trailing newline and a leading ``>>graph6<<``-style file
    header are tolerated. Anything else that does not follow the format
    raises a :class:`~g6codec.errors.DecodeError` subclass.
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    if not line:
        raise EmptyInput()

    line, declared = _strip_file_header(line)
    if not line:
        raise EmptyInput("file header without graph data")

    variant, start = detect_variant(line)
    if declared is not None and declared is not variant:
        raise UnsupportedVariant(
            f"file header declares {declared.value} but the line is {variant.value}"
        )

    body = line[start:]
    if not body:
        raise MalformedHeader("missing vertex count")
    validate_characters(body, start)

    n, used = decode_size(body, start)
    logger.debug("Decoding %s line with n=%d", variant.value, n)
    reader = BitReader(body[used:], start + used)
    graph = _DECODERS[variant](n, reader)
    logger.debug("Decoded %d edges", graph.number_of_edges())
    return graph


def _check_graph(graph: Graph, variant: Variant) -> None:
    if graph.directed != variant.directed:
        kind = "directed" if graph.directed else "undirected"
        raise UnsupportedVariant(f"{variant.value} cannot encode a {kind} graph")
    for u, v in graph.edges:
        if not (0 <= u < graph.n and 0 <= v < graph.n):
            raise ValueOutOfRange(
                f"edge {(u, v)} references a vertex outside [0, {graph.n})"
            )


def encode_payload(graph: Graph, variant: Union[Variant, str]) -> str:
    """Return ``N(n)`` followed by the packed adjacency bits, without marker."""
    variant = Variant.coerce(variant)
    _check_graph(graph, variant)
    size = encode_size(graph.n)
    writer = BitWriter()
    _ENCODERS[variant](graph, writer)
    logger.debug(
        "Encoded %s graph with n=%d into %d bits",
        variant.value,
        graph.n,
        writer.bit_length,
    )
    return size + writer.getvalue()


def encode(
    graph: Graph,
    variant: Union[Variant, str] = Variant.GRAPH6,
    header: bool = False,
) -> str:
    """Encode ``graph`` as a single line (without trailing newline).

    Parameters
    ----------
    graph: Graph
        Graph to encode. Must be directed for digraph6 and undirected
        for graph6 and sparse6.
    variant: Variant or str
        Target format.
    header: bool
        Prefix NAUTY's optional ``>>variant<<`` file header.
    """
    variant = Variant.coerce(variant)
    payload = encode_payload(graph, variant)
    prefix = variant.file_header if header else ""
    return prefix + variant.marker + payload
