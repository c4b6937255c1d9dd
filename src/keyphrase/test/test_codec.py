import hypothesis.strategies as st
from hypothesis import given

import pytest

from keyphrase import codec
from keyphrase.dictionary import DEFAULT_DICTIONARY, Dictionary
from keyphrase.errors import (EncodingOverflowError, InsufficientWordsError,
                              InvalidDictionaryError, MissingKeyError,
                              UnknownWordError)

from .common import make_words

DICTIONARIES = {count: Dictionary(make_words(count))
                for count in (2, 4, 5, 32, 1000, 2048, 65534)}


def test_bits_per_word_default():
    assert codec.bits_per_word() == 13
    assert codec.bits_per_word(DEFAULT_DICTIONARY) == 13


@pytest.mark.parametrize("count, bits", [
    (2, 1),
    (3, 1),
    (8192, 13),
    (8193, 13),
    (16383, 13),
    (16384, 14),
    (65534, 15),
])
def test_bits_per_word(count, bits):
    assert codec.bits_per_word(Dictionary(make_words(count))) == bits


@pytest.mark.parametrize("count", [0, 1, 65535, 65536])
def test_bits_per_word_invalid(count):
    d = Dictionary(make_words(count))
    with pytest.raises(InvalidDictionaryError):
        codec.bits_per_word(d)
    with pytest.raises(InvalidDictionaryError):
        codec.encode(b"\x00", d)
    with pytest.raises(InvalidDictionaryError):
        codec.decode("w00000", 1, d)


def test_not_a_dictionary():
    with pytest.raises(TypeError):
        codec.encode(b"\x00", ["a", "b"])


def test_encode_zero_key():
    assert codec.encode(b"\x00\x00") == "a a"
    assert codec.encode([0, 0]) == "a a"
    d = Dictionary(make_words(8192))
    assert codec.encode(b"\x00\x00", d) == "w00000 w00000"


def test_encode_vectors():
    assert codec.encode(b"\x00\x01") == "a cafe"
    assert codec.encode(b"\x80\x00") == "livable a"
    # 256 bits need 20 words, the last one padded with four zero bits
    assert codec.encode(b"\xff" * 32) == " ".join(["zoom"] * 19 + ["zeal"])


def test_encode_word_count():
    assert len(codec.encode(b"\x00").split(" ")) == 1
    assert len(codec.encode(b"\x00" * 16).split(" ")) == 10
    assert len(codec.encode(b"\x00" * 32).split(" ")) == 20
    assert len(codec.encode(b"\x00", Dictionary(["x", "y"])).split(" ")) == 8


def test_encode_missing_key():
    with pytest.raises(MissingKeyError):
        codec.encode(b"")


def test_decode_vectors():
    assert codec.decode("a a", 2) == b"\x00\x00"
    assert codec.decode("a cafe", 2) == b"\x00\x01"
    assert codec.decode("livable a", 2) == b"\x80\x00"
    zooms = " ".join(["zoom"] * 19 + ["zeal"])
    assert codec.decode(zooms) == b"\xff" * 32


def test_decode_normalizes():
    assert codec.decode("  A,\tCafe\n", 2) == b"\x00\x01"


def test_decode_unknown_word():
    with pytest.raises(UnknownWordError) as e:
        codec.decode("zzz not-a-word", 2)
    assert e.value.word == "zzz"


def test_decode_insufficient_words():
    with pytest.raises(InsufficientWordsError):
        codec.decode("a a a", 32)
    with pytest.raises(InsufficientWordsError):
        codec.decode("", 1)


def test_decode_overflow():
    # "aback" sets the last bit of a 13-bit field that starts at bit 13,
    # which is past the end of a 2 byte key
    with pytest.raises(EncodingOverflowError):
        codec.decode("a aback", 2)
    with pytest.raises(EncodingOverflowError):
        codec.decode("a a aback", 2)
    with pytest.raises(EncodingOverflowError):
        codec.decode(" ".join(["zoom"] * 20), 32)


def test_decode_extra_zero_words():
    assert codec.decode("a a a", 2) == b"\x00\x00"


def test_decode_bad_key_length():
    with pytest.raises(ValueError):
        codec.decode("a a", 0)


def test_decode_unreachable_word():
    d = Dictionary(["a", "b", "c", "d", "e"])
    assert codec.decode("d d d d", 1, d) == b"\xff"
    with pytest.raises(UnknownWordError):
        codec.decode("e e e e", 1, d)


def test_case_sensitive():
    d = Dictionary(["A", "B", "a", "b"], case_sensitive=True)
    assert codec.split_words("A b", d) == ["A", "b"]
    assert codec.encode(b"\x1b", d) == "A B a b"
    assert codec.decode("A B a b", 1, d) == b"\x1b"
    with pytest.raises(UnknownWordError):
        codec.decode("c B a b", 1, d)


@given(st.binary(min_size=1, max_size=64))
def test_round_trip(key):
    passphrase = codec.encode(key)
    assert codec.decode(passphrase, len(key)) == key


@pytest.mark.parametrize("count", sorted(DICTIONARIES))
@given(key=st.binary(min_size=1, max_size=33))
def test_round_trip_dictionaries(count, key):
    d = DICTIONARIES[count]
    passphrase = codec.encode(key, d)
    assert codec.decode(passphrase, len(key), d) == key


def test_lookup_every_default_word():
    for i, word in enumerate(DEFAULT_DICTIONARY.words):
        assert codec.word_lookup(word) == i


@pytest.mark.parametrize("count", range(2, 41))
def test_lookup_ordered(count):
    d = Dictionary(make_words(count))
    for i, word in enumerate(d.words):
        assert codec.word_lookup(word, d) == i
    # absent words before, between and after the entries
    assert codec.word_lookup("a", d) == -1
    assert codec.word_lookup("w00000x", d) == -1
    assert codec.word_lookup("z", d) == -1


def test_lookup_unordered():
    words = list(reversed(make_words(100)))
    d = Dictionary(words, ordered=False)
    for i, word in enumerate(words):
        assert codec.word_lookup(word, d) == i
    assert codec.word_lookup("nope", d) == -1


def test_lookup_absent():
    assert codec.word_lookup("zzz") == -1
    assert codec.word_lookup("") == -1
    # lookups do not fold case, only split_words does
    assert codec.word_lookup("Cafe") == -1


def test_split_words():
    assert codec.split_words("  a,,b\tc  ") == ["a", "b", "c"]
    assert codec.split_words("") == []
    assert codec.split_words(None) == []
    d = Dictionary(make_words(4))
    # the default separator for other dictionaries is whitespace only
    assert codec.split_words("a,b c", d) == ["a,b", "c"]


def test_clean():
    assert codec.clean("  Able,  ABLY\n") == "able ably"


def test_hex_wrappers():
    assert codec.from_hex_key("0000") == "a a"
    assert codec.from_hex_key("0001") == "a cafe"
    assert codec.to_hex_key("livable a", 2) == "8000"
