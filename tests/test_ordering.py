import pytest

from n64romconvert.ordering import (
    RomOrdering,
    ordering_display_char,
    parse_ordering_code,
)


def test_magic_numbers():
    assert RomOrdering.BIG_ENDIAN.magic == b"\x80\x37\x12\x40"
    assert RomOrdering.LITTLE_ENDIAN.magic == b"\x40\x12\x37\x80"
    assert RomOrdering.BYTE_SWAPPED.magic == b"\x37\x80\x40\x12"


def test_magic_numbers_are_permutations_of_each_other():
    magics = [o.magic for o in RomOrdering]
    assert len(set(magics)) == 3
    assert len({bytes(sorted(m)) for m in magics}) == 1


def test_extensions():
    assert RomOrdering.BIG_ENDIAN.extension == ".z64"
    assert RomOrdering.LITTLE_ENDIAN.extension == ".n64"
    assert RomOrdering.BYTE_SWAPPED.extension == ".v64"


def test_parse_ordering_code():
    assert parse_ordering_code("z") is RomOrdering.BIG_ENDIAN
    assert parse_ordering_code("n") is RomOrdering.LITTLE_ENDIAN
    assert parse_ordering_code("v") is RomOrdering.BYTE_SWAPPED


@pytest.mark.parametrize("char", ["q", "Z", "", "6", "z64"])
def test_parse_ordering_code_no_match(char):
    assert parse_ordering_code(char) is None


@pytest.mark.parametrize("ordering", list(RomOrdering))
def test_display_char_is_inverse_of_parse(ordering):
    assert parse_ordering_code(ordering_display_char(ordering)) is ordering


def test_str():
    assert str(RomOrdering.BYTE_SWAPPED) == "BYTE_SWAPPED (v64)"
