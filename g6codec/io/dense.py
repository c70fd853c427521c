"""Dense adjacency strategies: graph6 (undirected) and digraph6 (directed).

graph6 stores the strict upper triangle of the adjacency matrix column
by column::

    for j in 1..n-1:
        for i in 0..j-1:
            bit(i, j)

for ``n * (n - 1) / 2`` bits in total. digraph6 stores the full matrix,
diagonal included, row by row (``n * n`` bits). In both cases the last
character is padded with zero bits.
"""

from __future__ import annotations

from ..core.graph import Graph
from ..errors import TruncatedInput
from .bitstream import BitReader, BitWriter


def graph6_bit_count(n: int) -> int:
    return n * (n - 1) // 2


def digraph6_bit_count(n: int) -> int:
    return n * n


def _check_available(reader: BitReader, needed: int) -> None:
    available = reader.bits_remaining
    if available < needed:
        raise TruncatedInput(
            f"adjacency data needs {needed} bits but only {available} are present",
            needed=needed,
            available=available,
        )


def encode_graph6_bits(graph: Graph, writer: BitWriter) -> None:
    """Emit the upper-triangle bits of an undirected graph."""
    n = graph.n
    edges = graph.edges
    for j in range(1, n):
        for i in range(j):
            writer.write_bit((i, j) in edges)


def decode_graph6_bits(n: int, reader: BitReader) -> Graph:
    """Rebuild an undirected graph from its upper-triangle bits.

    Raises
    ------
    TruncatedInput
        If the reader holds fewer than ``n * (n - 1) / 2`` bits.
    TrailingData
        If characters or non-zero padding bits follow the triangle.
    """
    _check_available(reader, graph6_bit_count(n))
    graph = Graph(n)
    for j in range(1, n):
        for i in range(j):
            if reader.read_bit():
                graph.add_edge(i, j)
    reader.ensure_exhausted()
    return graph


def encode_digraph6_bits(graph: Graph, writer: BitWriter) -> None:
    """Emit the full adjacency matrix of a directed graph, row-major."""
    n = graph.n
    arcs = graph.edges
    for i in range(n):
        for j in range(n):
            writer.write_bit((i, j) in arcs)


def decode_digraph6_bits(n: int, reader: BitReader) -> Graph:
    """Rebuild a directed graph from its row-major adjacency bits."""
    _check_available(reader, digraph6_bit_count(n))
    graph = Graph(n, directed=True)
    for i in range(n):
        for j in range(n):
            if reader.read_bit():
                graph.add_edge(i, j)
    reader.ensure_exhausted()
    return graph
