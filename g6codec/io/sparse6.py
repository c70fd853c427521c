"""Sparse edge-list strategy (sparse6).

The edge set is written as a stream of ``(b, x)`` records where ``b`` is
one bit and ``x`` is a ``k``-bit vertex index, ``k`` being the number of
bits needed to address ``n`` vertices (at least 1). The decoder keeps a
running vertex ``v`` starting at 0:

- ``b == 1`` advances ``v`` by one;
- ``x > v`` moves ``v`` forward to ``x`` without producing an edge;
- otherwise the edge ``{x, v}`` is produced.

Edges are emitted sorted by larger endpoint, then smaller endpoint, so a
given edge set always produces the same stream.

The last character is padded with 1-bits, which can never be mistaken
for an edge, except when ``n == 2**k``, ``k < 6`` and the running vertex
ends at ``n - 2``: all-ones padding would then read as a loop on
``n - 1``. In that case, with at least ``k + 1`` bits to fill, a single
0-bit is written before the 1-bits.
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.graph import Graph
from ..errors import TrailingData
from .bitstream import GROUP_BITS, BitReader, BitWriter


def vertex_width(n: int) -> int:
    """Number of bits ``k`` used to store one vertex index."""
    if n <= 1:
        return 1
    return (n - 1).bit_length()


def _sorted_records(graph: Graph) -> List[Tuple[int, int]]:
    # (larger endpoint, smaller endpoint)
    return sorted((max(u, v), min(u, v)) for u, v in graph.edges)


def encode_sparse6_bits(graph: Graph, writer: BitWriter) -> None:
    """Emit the sparse6 record stream for an undirected graph, padding included."""
    n = graph.n
    k = vertex_width(n)
    curv = 0
    for v, u in _sorted_records(graph):
        if v == curv:
            writer.write_bit(0)
            writer.write_bits(u, k)
        elif v == curv + 1:
            curv = v
            writer.write_bit(1)
            writer.write_bits(u, k)
        else:
            curv = v
            writer.write_bit(1)
            writer.write_bits(v, k)
            writer.write_bit(0)
            writer.write_bits(u, k)

    missing = writer.padding_needed
    if missing == 0:
        return
    if k < GROUP_BITS and n == (1 << k) and curv == n - 2 and missing >= k + 1:
        writer.write_bit(0)
    writer.pad(1)


def decode_sparse6_bits(n: int, reader: BitReader) -> Graph:
    """Rebuild an undirected graph from a sparse6 record stream.

    Decoding stops when a whole record no longer fits, when the running
    vertex reaches ``n`` or when a record names a vertex ``>= n``; the
    bits left at that point are padding.

    Raises
    ------
    ValueOutOfRange
        If a record describes a self-loop.
    TrailingData
        If whole characters remain after the record stream ends.
    """
    k = vertex_width(n)
    graph = Graph(n)
    v = 0
    while reader.bits_remaining >= 1 + k:
        b = reader.read_bit()
        x = reader.read_bits(k)
        if b:
            v += 1
        if x >= n or v >= n:
            break
        if x > v:
            v = x
        else:
            graph.add_edge(x, v)

    remaining = reader.bits_remaining
    if remaining >= GROUP_BITS:
        raise TrailingData(
            f"{remaining // GROUP_BITS} unexpected trailing character(s) after sparse6 data",
            needed=0,
            available=remaining,
        )
    return graph
