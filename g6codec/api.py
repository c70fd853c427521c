from __future__ import annotations

from typing import Iterable, List, Optional, Union

import networkx as nx

from .core.graph import Graph
from .io.formats import Variant, decode, encode

GraphLike = Union[Graph, nx.Graph]


def _normalize_graph(graph: GraphLike) -> Graph:
    if isinstance(graph, Graph):
        return graph
    if isinstance(graph, nx.Graph):
        return Graph.from_networkx(graph)
    raise TypeError(f"Cannot interpret {type(graph)} as a graph")


def parse(text: str) -> List[Graph]:
    """Decode every non-blank line of ``text``.

    Blank lines are skipped; any malformed line aborts the whole call
    with the corresponding :class:`~g6codec.errors.DecodeError`.
    """
    return [decode(line) for line in text.splitlines() if line.strip()]


def dumps(
    graphs: Iterable[GraphLike],
    variant: Union[Variant, str] = Variant.GRAPH6,
    header: bool = False,
) -> str:
    """Encode ``graphs`` one per line, newline terminated.

    With ``header=True`` only the first line carries the file header,
    which is how NAUTY writes files.
    """
    lines = []
    for idx, graph in enumerate(graphs):
        lines.append(encode(_normalize_graph(graph), variant, header=header and idx == 0))
    return "".join(line + "\n" for line in lines)


def encode_networkx(G: nx.Graph, variant: Optional[Union[Variant, str]] = None) -> str:
    """Encode a networkx graph.

    If no variant is given, directed graphs become digraph6 and
    undirected graphs graph6.
    """
    if variant is None:
        variant = Variant.DIGRAPH6 if G.is_directed() else Variant.GRAPH6
    return encode(Graph.from_networkx(G), variant)


def decode_networkx(line: str) -> nx.Graph:
    """Decode ``line`` straight into a ``networkx.Graph`` / ``networkx.DiGraph``."""
    return decode(line).to_networkx()
