import networkx as nx
import pytest

from g6codec import Graph, decode, encode
from g6codec.api import decode_networkx, dumps, encode_networkx, parse
from g6codec.errors import TruncatedInput


def test_parse_skips_blank_lines() -> None:
    graphs = parse("Bw\n\n&AG\n:Fa@x^\n")
    assert [g.n for g in graphs] == [3, 2, 7]
    assert graphs[1].directed


def test_parse_propagates_errors() -> None:
    with pytest.raises(TruncatedInput):
        parse("Bw\nB\n")


def test_dumps() -> None:
    triangle = Graph(3, [(0, 1), (0, 2), (1, 2)])
    edge = Graph(2, [(0, 1)])
    assert dumps([triangle, edge]) == "Bw\nA_\n"
    assert dumps([triangle, edge], header=True) == ">>graph6<<Bw\nA_\n"
    assert dumps([nx.complete_graph(3)], "sparse6") == encode(triangle, "sparse6") + "\n"


def test_dumps_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        dumps([object()])


def test_encode_networkx_picks_variant() -> None:
    assert encode_networkx(nx.complete_graph(3)) == "Bw"

    D = nx.DiGraph()
    D.add_nodes_from([0, 1])
    D.add_edge(1, 0)
    assert encode_networkx(D) == "&AG"


def test_decode_networkx() -> None:
    G = decode_networkx("Bw")
    assert not G.is_directed()
    assert G.number_of_edges() == 3

    D = decode_networkx("&AG")
    assert D.is_directed()
    assert list(D.edges()) == [(1, 0)]


@pytest.mark.parametrize(
    "G",
    [nx.petersen_graph(), nx.path_graph(16), nx.complete_graph(5), nx.empty_graph(70), nx.cycle_graph(100)],
)
def test_graph6_matches_networkx(G: nx.Graph) -> None:
    ours = encode(Graph.from_networkx(G), "graph6")
    theirs = nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
    assert ours == theirs
    assert Graph.from_networkx(nx.from_graph6_bytes(ours.encode("ascii"))) == Graph.from_networkx(G)


@pytest.mark.parametrize(
    "G",
    [nx.petersen_graph(), nx.path_graph(16), nx.star_graph(7), nx.cycle_graph(100)],
)
def test_sparse6_interoperates_with_networkx(G: nx.Graph) -> None:
    g = Graph.from_networkx(G)

    theirs = nx.to_sparse6_bytes(G).decode("ascii")
    assert decode(theirs) == g

    ours = encode(g, "sparse6")
    H = nx.from_sparse6_bytes(ours.encode("ascii"))
    assert Graph.from_networkx(H) == g
