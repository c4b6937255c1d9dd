"""
Convert keys (byte strings) to passphrases and back.

Each word of a passphrase spells the next ``bits_per_word`` bits of the key,
most significant bit first. The last word is padded with zero bits, so a
32 byte key and the 8192 word default dictionary give a 20 word passphrase
(13 bits per word).
"""

from . import _interfaces
from .bitwindow import read_bits, write_bits
from .dictionary import DEFAULT_DICTIONARY
from .errors import (EncodingOverflowError, InsufficientWordsError,
                     InvalidDictionaryError, MissingKeyError,
                     UnknownWordError)
from .util import key_from_hex, key_to_hex

DEFAULT_KEY_LENGTH = 32
MAX_WORDS = 0xFFFF


def _dictionary(dictionary):
    if dictionary is None:
        return DEFAULT_DICTIONARY
    return _interfaces.IDictionary(dictionary)


def bits_per_word(dictionary=None):
    """Return the number of key bits each word of ``dictionary`` carries."""
    dictionary = _dictionary(dictionary)
    count = len(dictionary.words)
    if count < 2 or count >= MAX_WORDS:
        raise InvalidDictionaryError("dictionary has %d words" % count)
    return count.bit_length() - 1


def encode(key, dictionary=None):
    """
    Select a passphrase from ``dictionary`` using the bits of ``key``.

    :param key: bytes (or any sequence of ints 0-255) of any length
    :return str: the words, separated by single spaces
    """
    dictionary = _dictionary(dictionary)
    width = bits_per_word(dictionary)
    count = (len(key) * 8 + width - 1) // width
    if not count:
        raise MissingKeyError()
    return " ".join(dictionary.words[read_bits(key, i * width, width)]
                    for i in range(count))


def decode(passphrase, key_length=DEFAULT_KEY_LENGTH, dictionary=None):
    """
    Rebuild the key of ``key_length`` bytes spelled by ``passphrase``.

    :return bytes: the key
    """
    dictionary = _dictionary(dictionary)
    width = bits_per_word(dictionary)
    if key_length < 1:
        raise ValueError("key_length must be at least 1, not %d" % key_length)
    words = split_words(passphrase, dictionary)
    if len(words) * width < key_length * 8:
        raise InsufficientWordsError(
            "%d words carry %d bits, a %d byte key needs %d"
            % (len(words), len(words) * width, key_length, key_length * 8))

    key = bytearray(key_length)
    for i, word in enumerate(words):
        index = word_lookup(word, dictionary)
        # words past the first 2**width can never come out of encode()
        if index < 0 or index >> width:
            raise UnknownWordError(word)
        if write_bits(key, index, i * width, width).discarded:
            raise EncodingOverflowError(
                "word %d (%r) does not fit in a %d byte key"
                % (i + 1, word, key_length))
    return bytes(key)


def word_lookup(word, dictionary=None):
    """Return the index of ``word`` in ``dictionary``, or -1."""
    dictionary = _dictionary(dictionary)
    words = dictionary.words
    if not dictionary.ordered:
        for i, candidate in enumerate(words):
            if candidate == word:
                return i
        return -1

    i = 0
    span = len(words)
    while span:
        if 0 <= i < len(words) and words[i] == word:
            return i
        if span == 1:
            break
        span = (span + 1) // 2
        # probes that overshoot either end of the list walk back in
        if i < 0 or (i < len(words) and word > words[i]):
            i += span
        else:
            i -= span
    return -1


def split_words(passphrase, dictionary=None):
    """Return the list of words in ``passphrase``, lower-cased unless the
    dictionary is case sensitive."""
    dictionary = _dictionary(dictionary)
    if not passphrase:
        return []
    words = [w for w in dictionary.separator.split(passphrase) if w]
    if not dictionary.case_sensitive:
        words = [w.lower() for w in words]
    return words


def clean(passphrase, dictionary=None):
    """Remove extra separators from ``passphrase``."""
    return " ".join(split_words(passphrase, dictionary))


def from_hex_key(hexkey, dictionary=None):
    return encode(key_from_hex(hexkey), dictionary)


def to_hex_key(passphrase, key_length=DEFAULT_KEY_LENGTH, dictionary=None):
    return key_to_hex(decode(passphrase, key_length, dictionary))
