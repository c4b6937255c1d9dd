import hypothesis.strategies as st
from hypothesis import given

import pytest

from keyphrase.bitwindow import STORED, Stored, Truncated, read_bits, write_bits
from keyphrase.errors import InvalidBitCountError


def test_read_aligned():
    buf = b"\x12\x34\x56"
    assert read_bits(buf, 0, 16) == 0x1234
    assert read_bits(buf, 8, 16) == 0x3456
    assert read_bits(buf, 16, 8) == 0x56
    assert read_bits(buf, 0, 1) == 0


def test_read_straddles_bytes():
    assert read_bits(b"\xff\x00", 4, 8) == 0xF0
    assert read_bits(b"\x0f\xf0", 4, 8) == 0xFF
    # 13 bits starting at bit 5 cover three bytes
    assert read_bits(b"\x07\xff\xc0", 5, 13) == 0x1FFF


def test_read_past_end_is_zero():
    assert read_bits(b"\xff", 4, 8) == 0xF0
    assert read_bits(b"\xff", 8, 16) == 0
    assert read_bits(b"", 0, 13) == 0
    assert read_bits([0xff, 0xff], 13, 13) == 0b1110000000000


def test_bad_bitcount():
    with pytest.raises(InvalidBitCountError):
        read_bits(b"\x00\x00\x00", 0, 17)
    with pytest.raises(InvalidBitCountError):
        read_bits(b"\x00\x00\x00", 0, 0)
    with pytest.raises(InvalidBitCountError):
        write_bits(bytearray(3), 0, 0, 17)


def test_negative_startbit():
    with pytest.raises(ValueError):
        read_bits(b"\x00", -1, 8)


def test_write_keeps_neighbours():
    buf = bytearray(b"\xff\xff\xff")
    assert write_bits(buf, 0, 4, 8) is STORED
    assert buf == b"\xf0\x0f\xff"

    buf = bytearray(3)
    assert write_bits(buf, 0x1FFF, 5, 13) is STORED
    assert buf == b"\x07\xff\xc0"


def test_write_masks_value():
    buf = bytearray(2)
    write_bits(buf, 0x1FF, 0, 8)
    assert buf == b"\xff\x00"


def test_write_fits_exactly():
    # the unused third byte of the window is past the end, but holds no
    # bits of the field
    buf = bytearray(1)
    assert write_bits(buf, 0xAB, 0, 8) is STORED
    assert buf == b"\xab"


def test_write_overflow():
    buf = bytearray(1)
    result = write_bits(buf, 0x1FFF, 0, 13)
    assert isinstance(result, Truncated)
    assert result.lost == (0xF8,)
    assert result.discarded
    # the byte inside the buffer is still written
    assert buf == b"\xff"


def test_write_overflow_of_zero_bits():
    buf = bytearray(1)
    result = write_bits(buf, 0x1FE0, 0, 13)
    assert isinstance(result, Truncated)
    assert result.lost == (0,)
    assert not result.discarded
    assert buf == b"\xff"


def test_write_entirely_past_end():
    buf = bytearray(2)
    result = write_bits(buf, 1, 26, 13)
    assert isinstance(result, Truncated)
    assert result.discarded
    assert buf == b"\x00\x00"


def test_stored_is_not_discarded():
    assert not Stored().discarded


@st.composite
def windows(draw):
    buf = draw(st.binary(min_size=1, max_size=8))
    bitcount = draw(st.integers(min_value=1,
                                max_value=min(16, len(buf) * 8)))
    startbit = draw(st.integers(min_value=0,
                                max_value=len(buf) * 8 - bitcount))
    value = draw(st.integers(min_value=0, max_value=(1 << bitcount) - 1))
    return buf, startbit, bitcount, value


def _bit(buf, i):
    return (buf[i // 8] >> (7 - i % 8)) & 1


@given(windows())
def test_write_then_read(window):
    original, startbit, bitcount, value = window
    buf = bytearray(original)
    assert write_bits(buf, value, startbit, bitcount) is STORED
    assert read_bits(buf, startbit, bitcount) == value
    for i in range(len(buf) * 8):
        if not startbit <= i < startbit + bitcount:
            assert _bit(buf, i) == _bit(original, i)
