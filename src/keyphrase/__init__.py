from .codec import (bits_per_word, clean, decode, encode, from_hex_key,
                    split_words, to_hex_key, word_lookup)
from .dictionary import DEFAULT_DICTIONARY, Dictionary
from .keygen import random_key, random_passphrase
from .util import key_from_hex, key_to_hex

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "encode", "decode", "word_lookup", "bits_per_word",
    "split_words", "clean", "from_hex_key", "to_hex_key",
    "Dictionary", "DEFAULT_DICTIONARY",
    "random_key", "random_passphrase",
    "key_to_hex", "key_from_hex",
]
