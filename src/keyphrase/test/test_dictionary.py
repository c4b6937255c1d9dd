import re

import attr
import pytest

from keyphrase import codec
from keyphrase._interfaces import IDictionary
from keyphrase.dictionary import DEFAULT_DICTIONARY, Dictionary
from keyphrase.errors import InvalidDictionaryError

from .common import make_words


def test_default_dictionary():
    d = DEFAULT_DICTIONARY
    assert IDictionary.providedBy(d)
    assert len(d.words) == 8192
    assert len(set(d.words)) == 8192
    assert list(d.words) == sorted(d.words)
    assert d.words[0] == "a"
    assert d.words[-1] == "zoom"
    assert d.ordered
    assert not d.case_sensitive
    assert d.separator.split("a,b c") == ["a", "b", "c"]


def test_frozen():
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        DEFAULT_DICTIONARY.case_sensitive = True


def test_separator():
    d = Dictionary(make_words(4), separator="-")
    assert d.separator.pattern == "-"
    pattern = re.compile(r"[\s.]")
    assert Dictionary(make_words(4), separator=pattern).separator is pattern
    assert codec.split_words("w00001-w00002", d) == ["w00001", "w00002"]


def test_unreachable_words_logged(log_messages):
    Dictionary(make_words(5))
    assert log_messages.matching("dictionary has 5 words, the last 1 can")


def test_power_of_two_not_logged(log_messages):
    Dictionary(make_words(4))
    Dictionary(make_words(1))
    assert log_messages.matching("dictionary has") == []


def test_from_file(tmp_path, log_messages):
    fn = tmp_path / "words.txt"
    fn.write_text("# fruit\nApple\n\nbanana\n  cherry \ndate\n")
    d = Dictionary.from_file(str(fn))
    assert d.words == ("apple", "banana", "cherry", "date")
    assert d.ordered
    assert not d.case_sensitive
    assert codec.bits_per_word(d) == 2
    assert codec.encode(b"\x1b", d) == "apple banana cherry date"
    assert log_messages.matching("loaded 4 words from")


def test_from_file_unordered(tmp_path):
    fn = tmp_path / "words.txt"
    fn.write_text("date\ncherry\nbanana\napple\n")
    d = Dictionary.from_file(str(fn))
    assert not d.ordered
    assert codec.word_lookup("apple", d) == 3
    assert codec.decode("apple apple apple apple", 1, d) == b"\xff"


def test_from_file_case_sensitive(tmp_path):
    fn = tmp_path / "words.txt"
    fn.write_text("Apple\napple\n")
    d = Dictionary.from_file(str(fn), case_sensitive=True)
    assert d.words == ("Apple", "apple")
    assert d.case_sensitive
    assert d.ordered


def test_from_file_duplicates(tmp_path):
    fn = tmp_path / "words.txt"
    fn.write_text("apple\nApple\n")
    with pytest.raises(InvalidDictionaryError):
        Dictionary.from_file(str(fn))


def test_evolve():
    d = attr.evolve(DEFAULT_DICTIONARY, case_sensitive=True)
    assert d.case_sensitive
    assert d.words == DEFAULT_DICTIONARY.words
    assert d.separator.pattern == DEFAULT_DICTIONARY.separator.pattern
