import pytest

from g6codec import Graph, decode, encode
from g6codec.errors import TrailingData, TruncatedInput
from g6codec.io.bitstream import BitReader
from g6codec.io.dense import decode_digraph6_bits, digraph6_bit_count, graph6_bit_count


def test_triangle_graph6() -> None:
    g = Graph(3, [(0, 1), (0, 2), (1, 2)])
    assert encode(g, "graph6") == "Bw"

    decoded = decode("Bw")
    assert decoded.n == 3
    assert decoded.directed is False
    assert decoded.edges == {(0, 1), (0, 2), (1, 2)}


def test_empty_graph6() -> None:
    assert encode(Graph(0), "graph6") == "?"
    decoded = decode("?")
    assert decoded.n == 0
    assert decoded.edges == set()


def test_single_vertex_has_no_adjacency_data() -> None:
    assert encode(Graph(1), "graph6") == "@"
    assert decode("@") == Graph(1)


@pytest.mark.parametrize(
    "line, edges",
    [
        ("A_", {(0, 1)}),
        ("A?", set()),
        ("C~", {(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)}),
    ],
)
def test_small_graph6_lines(line: str, edges: set) -> None:
    g = decode(line)
    assert g.edges == edges
    assert encode(g, "graph6") == line


def test_graph6_column_order() -> None:
    # bits are (0,1) (0,2) (1,2) (0,3) (1,3) (2,3); only (0,3) set
    g = Graph(4, [(0, 3)])
    assert encode(g, "graph6") == "CC"
    assert decode("CC").edges == {(0, 3)}


def test_digraph6_single_arc() -> None:
    g = decode("&AG")
    assert g.directed is True
    assert g.n == 2
    assert g.edges == {(1, 0)}
    assert encode(g, "digraph6") == "&AG"


@pytest.mark.parametrize("line, n", [("&B\\o", 3), ("&C]|w", 4)])
def test_complete_digraphs(line: str, n: int) -> None:
    g = decode(line)
    assert g.edges == {(i, j) for i in range(n) for j in range(n) if i != j}
    assert encode(g, "digraph6") == line


def test_digraph6_self_loops() -> None:
    g = Graph(2, [(0, 0), (1, 1)], directed=True)
    assert encode(g, "digraph6") == "&Ac"
    assert decode("&Ac") == g


def test_bit_counts() -> None:
    assert graph6_bit_count(0) == 0
    assert graph6_bit_count(1) == 0
    assert graph6_bit_count(5) == 10
    assert digraph6_bit_count(5) == 25


@pytest.mark.parametrize("line", ["B", "C", "D?"])
def test_graph6_truncated(line: str) -> None:
    with pytest.raises(TruncatedInput):
        decode(line)


def test_digraph6_truncated_reports_bit_counts() -> None:
    with pytest.raises(TruncatedInput) as exc:
        decode_digraph6_bits(3, BitReader("\\"))
    assert exc.value.needed == 9
    assert exc.value.available == 6


@pytest.mark.parametrize("line", ["Bw?", "Bx", "@?", "?~", "&AH"])
def test_trailing_data_rejected(line: str) -> None:
    with pytest.raises(TrailingData):
        decode(line)


def test_trailing_data_is_truncated_input_kind() -> None:
    with pytest.raises(TruncatedInput):
        decode("Bw?")
