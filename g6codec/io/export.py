"""Plain-text renderings of a decoded graph.

These helpers mirror the conversions offered by other graph6 tools:
an adjacency matrix dump, Graphviz DOT and Pajek ``.net`` text. They
return strings only; writing them anywhere is up to the caller.
"""

from __future__ import annotations

from typing import Optional

from ..core.graph import Graph


def to_adjmat(graph: Graph) -> str:
    """Return the adjacency matrix as space separated 0/1 rows."""
    return "".join(
        " ".join(str(bit) for bit in row) + "\n"
        for row in graph.adjacency_matrix()
    )


def to_dot(graph: Graph, graph_id: Optional[int] = None) -> str:
    """Render ``graph`` in Graphviz DOT syntax.

    Example::

        >>> to_dot(Graph(2, [(1, 0)], directed=True))
        'digraph {\\n1 -> 0;\\n}'
    """
    kind = "digraph" if graph.directed else "graph"
    name = f"graph_{graph_id} " if graph_id is not None else ""
    arrow = "->" if graph.directed else "--"
    parts = [f"{kind} {name}{{"]
    for u, v in graph.iter_edges():
        parts.append(f"\n{u} {arrow} {v};")
    parts.append("\n}")
    return "".join(parts)


def to_net(graph: Graph) -> str:
    """Render ``graph`` in Pajek ``.net`` format (1-based vertex ids)."""
    lines = [f"*Vertices {graph.n}"]
    lines.extend(f'{i + 1} "{i}"' for i in range(graph.n))
    lines.append("*Arcs" if graph.directed else "*Edges")
    lines.extend(f"{u + 1} {v + 1}" for u, v in graph.iter_edges())
    return "\n".join(lines) + "\n"
