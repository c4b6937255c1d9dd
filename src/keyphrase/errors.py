class KeyphraseError(Exception):
    """Parent class for all keyphrase-related errors"""


class InvalidDictionaryError(KeyphraseError):
    """
    The dictionary can not be used to build passphrases. It must hold at
    least 2 and fewer than 65535 words.
    """


class MissingKeyError(KeyphraseError):
    """A key with at least one byte is required to build a passphrase."""


class InsufficientWordsError(KeyphraseError):
    """
    The passphrase does not have enough words to fill a key of the requested
    length. Check that no words were left out, or ask for a shorter key.
    """


class UnknownWordError(KeyphraseError):
    """
    The passphrase contains a word that is not in the dictionary. Check the
    spelling, and make sure the same word list is used to encode and decode.
    """

    def __init__(self, word):
        self.word = word

    def __str__(self):
        return "unknown word: %r" % (self.word,)


class EncodingOverflowError(KeyphraseError):
    """
    The passphrase carries more information than fits in a key of the
    requested length. Either it has extra words, or the key length is wrong.
    """


class InvalidBitCountError(KeyphraseError):
    """The programmer asked for a bit window wider than 16 bits."""


class HexFormatError(KeyphraseError):
    """
    The key must be written as hexadecimal digits (0-9, a-f), two digits per
    byte.
    """


class NoSecureRandomError(KeyphraseError):
    """
    A secure random number source was required, but this system does not
    provide one.
    """
