import pytest

from g6codec.errors import InvalidCharacter, MalformedHeader, ValueOutOfRange
from g6codec.io.header import decode_size, encode_size


@pytest.mark.parametrize(
    "n, text",
    [
        (0, "?"),
        (1, "@"),
        (62, "}"),
        (63, "~??~"),
        (258047, "~}~~"),
        (258048, "~~???~??"),
        (68719476735, "~~~~~~~~"),
    ],
)
def test_header_tiers(n: int, text: str) -> None:
    assert encode_size(n) == text
    assert decode_size(text) == (n, len(text))


def test_decode_size_ignores_following_data() -> None:
    assert decode_size("Bw") == (3, 1)
    assert decode_size("~??~??") == (63, 4)


@pytest.mark.parametrize("n", [-1, 68719476736])
def test_encode_size_out_of_range(n: int) -> None:
    with pytest.raises(ValueOutOfRange):
        encode_size(n)


@pytest.mark.parametrize("text", ["", "~", "~??", "~~", "~~???"])
def test_truncated_header(text: str) -> None:
    with pytest.raises(MalformedHeader):
        decode_size(text)


@pytest.mark.parametrize("text", ["~???", "~??}", "~~??????", "~~???}~~"])
def test_non_minimal_header(text: str) -> None:
    with pytest.raises(MalformedHeader):
        decode_size(text)


def test_header_bad_character() -> None:
    with pytest.raises(InvalidCharacter):
        decode_size("!")
    with pytest.raises(InvalidCharacter) as exc:
        decode_size("~?!?", offset=1)
    assert exc.value.position == 3
