"""Graph container read and written by the g6codec codecs.

The graph6 family only describes unlabelled, unweighted graphs whose
vertices are the integers ``0..n-1``. :class:`Graph` therefore keeps
nothing more than a vertex count, a directedness flag and a set of
edges (or arcs).

Canonical storage:
  - undirected edges are stored as ``(min(u, v), max(u, v))`` so that
    ``(u, v)`` and ``(v, u)`` are the same edge;
  - directed arcs are stored as given and may include self-loops.

Example usage::

    >>> from g6codec.core.graph import Graph
    >>> g = Graph(3, edges=[(0, 1), (2, 1)])
    >>> list(g.iter_edges())
    [(0, 1), (1, 2)]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Sequence, Set, Tuple

from ..errors import ValueOutOfRange

if TYPE_CHECKING:  # pragma: no cover
    import networkx

Edge = Tuple[int, int]


class Graph:
    """Simple graph (or digraph with loops) on vertices ``0..n-1``."""

    def __init__(
        self,
        n: int = 0,
        edges: Iterable[Edge] = (),
        directed: bool = False,
    ) -> None:
        n = int(n)
        if n < 0:
            raise ValueOutOfRange(f"vertex count must be >= 0, got {n}")
        self.n = n
        self.directed = bool(directed)
        self._edges: Set[Edge] = set()
        for u, v in edges:
            self.add_edge(u, v)

    # --------------------------
    # Canonicalization
    # --------------------------

    def _edge_key(self, u: int, v: int) -> Edge:
        if self.directed:
            return (u, v)
        return (u, v) if u <= v else (v, u)

    def _check_edge(self, u: int, v: int) -> None:
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise ValueOutOfRange(
                f"edge {(u, v)} references a vertex outside [0, {self.n})"
            )
        if u == v and not self.directed:
            raise ValueOutOfRange(f"self-loop {(u, v)} in an undirected graph")

    # --------------------------
    # Public API
    # --------------------------

    @property
    def edges(self) -> Set[Edge]:
        """The edge (or arc) set; a copy, mutate through :meth:`add_edge`."""
        return set(self._edges)

    def add_edge(self, u: int, v: int) -> None:
        u, v = int(u), int(v)
        self._check_edge(u, v)
        self._edges.add(self._edge_key(u, v))

    def has_edge(self, u: int, v: int) -> bool:
        return self._edge_key(int(u), int(v)) in self._edges

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate edges once, in sorted order."""
        return iter(sorted(self._edges))

    def neighbours(self, v: int) -> List[int]:
        """Return the out-neighbours of ``v`` (all neighbours if undirected)."""
        out = set()
        for a, b in self._edges:
            if a == v:
                out.add(b)
            elif b == v and not self.directed:
                out.add(a)
        return sorted(out)

    def number_of_nodes(self) -> int:
        return self.n

    def number_of_edges(self) -> int:
        return len(self._edges)

    def adjacency_matrix(self) -> List[List[int]]:
        """Return the ``n x n`` 0/1 adjacency matrix.

        The matrix is symmetric with a zero diagonal for undirected graphs.
        """
        rows = [[0] * self.n for _ in range(self.n)]
        for u, v in self._edges:
            rows[u][v] = 1
            if not self.directed:
                rows[v][u] = 1
        return rows

    @classmethod
    def from_adjacency_matrix(
        cls, rows: Sequence[Sequence[int]], directed: bool = False
    ) -> "Graph":
        """Build a graph from a square 0/1 matrix.

        For undirected graphs only the strict upper triangle is read.
        """
        n = len(rows)
        for r in rows:
            if len(r) != n:
                raise ValueOutOfRange("adjacency matrix must be square")
        graph = cls(n, directed=directed)
        for i in range(n):
            start = 0 if directed else i + 1
            for j in range(start, n):
                if rows[i][j]:
                    graph.add_edge(i, j)
        return graph

    def to_networkx(self) -> "networkx.Graph":
        """Convert this graph into a ``networkx.Graph`` or ``networkx.DiGraph``."""
        import networkx as nx

        G = nx.DiGraph() if self.directed else nx.Graph()
        G.add_nodes_from(range(self.n))
        G.add_edges_from(self.iter_edges())
        return G

    @classmethod
    def from_networkx(cls, G: "networkx.Graph") -> "Graph":
        """Create a :class:`Graph` from a networkx graph.

        Nodes are relabelled to ``0..n-1`` in the graph's iteration order.

        Parameters
        ----------
        G: networkx.Graph
            Any networkx graph; multi-edges collapse to a single edge.

        Returns
        -------
        Graph
            A new Graph with the same structure.
        """
        id_map = {node: idx for idx, node in enumerate(G.nodes())}
        graph = cls(len(id_map), directed=G.is_directed())
        for u, v in G.edges():
            graph.add_edge(id_map[u], id_map[v])
        return graph

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.n == other.n
            and self.directed == other.directed
            and self._edges == other._edges
        )

    def __repr__(self) -> str:
        return (
            f"Graph(num_nodes={self.number_of_nodes()}, "
            f"num_edges={self.number_of_edges()}, "
            f"directed={self.directed})"
        )
