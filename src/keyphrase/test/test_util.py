import hypothesis.strategies as st
from hypothesis import given

import pytest

from keyphrase import util
from keyphrase.errors import HexFormatError


def test_key_to_hex():
    hexstr = util.key_to_hex(b"\x00\x45\x91\xfe\xff")
    assert isinstance(hexstr, str)
    assert hexstr == "004591feff"
    assert util.key_to_hex([0, 255]) == "00ff"
    assert util.key_to_hex(b"") == ""


def test_key_from_hex():
    b = util.key_from_hex("004591feff")
    assert isinstance(b, bytes)
    assert b == b"\x00\x45\x91\xfe\xff"
    assert util.key_from_hex("004591FEFF") == b"\x00\x45\x91\xfe\xff"
    assert util.key_from_hex("") == b""


def test_key_from_hex_odd_length():
    assert util.key_from_hex("abc") == b"\xab\xc0"
    assert util.key_from_hex("f") == b"\xf0"


@pytest.mark.parametrize("bad", ["0g", "00 ff", "ab+/", "0x00", "٣٣"])
def test_key_from_hex_rejects(bad):
    with pytest.raises(HexFormatError):
        util.key_from_hex(bad)


@given(st.binary())
def test_hex_round_trip(key):
    hexstr = util.key_to_hex(key)
    assert len(hexstr) == 2 * len(key)
    assert hexstr == hexstr.lower()
    assert util.key_from_hex(hexstr) == key
